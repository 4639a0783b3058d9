from __future__ import annotations

import ast
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[4]


def _iter_python_files(base: Path) -> list[Path]:
    return [path for path in base.rglob("*.py") if "__pycache__" not in path.parts]


def _collect_import_targets(path: Path, *, top_level_only: bool) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    nodes = tree.body if top_level_only else list(ast.walk(tree))
    targets: list[str] = []
    for node in nodes:
        if isinstance(node, ast.Import):
            targets.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module is not None:
            targets.append(node.module)
    return targets


def _violations(base: Path, predicate, *, top_level_only: bool = False) -> list[str]:
    found: list[str] = []
    for path in _iter_python_files(base):
        for target in _collect_import_targets(path, top_level_only=top_level_only):
            if predicate(target):
                found.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    return found


def _is_package(target: str, package: str) -> bool:
    return target == package or target.startswith(f"{package}.")


def test_helm_does_not_import_broadside() -> None:
    violations = _violations(REPO_ROOT / "helm", lambda target: _is_package(target, "broadside"))
    assert not violations, "helm must not import broadside:\n" + "\n".join(violations)


def test_broadside_imports_helm_only_via_api() -> None:
    violations = _violations(
        REPO_ROOT / "broadside",
        lambda target: _is_package(target, "helm") and not _is_package(target, "helm.api"),
    )
    assert not violations, "broadside must import helm only via helm.api:\n" + "\n".join(violations)


def test_helm_api_has_no_top_level_runtime_imports() -> None:
    violations = _violations(
        REPO_ROOT / "helm" / "api",
        lambda target: _is_package(target, "helm.runtime") or _is_package(target, "helm.ai"),
        top_level_only=True,
    )
    assert not violations, "helm.api top-level imports must not reach runtime:\n" + "\n".join(
        violations
    )


def test_game_core_does_not_import_other_game_layers() -> None:
    core = REPO_ROOT / "broadside" / "game" / "core"
    violations = _violations(
        core,
        lambda target: _is_package(target, "broadside.game")
        and not _is_package(target, "broadside.game.core"),
    )
    assert not violations, "game core must only import game core:\n" + "\n".join(violations)
