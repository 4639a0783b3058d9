"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from helm.api.env import env_float, env_int

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env.app",
    ".env.app.local",
)


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable match settings sourced from environment."""

    seed: int | None
    opponent_delay_seconds: float


def load_match_config() -> MatchConfig:
    """Load match settings from ``BROADSIDE_*`` env vars."""
    return MatchConfig(
        seed=env_int("BROADSIDE_SEED", None),
        opponent_delay_seconds=max(0.0, env_float("BROADSIDE_OPPONENT_DELAY", 1.0)),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> dict[str, str]:
    """Export the pairs of one env file into ``os.environ``; a missing file is skipped.

    Returns the pairs actually written.
    """
    env_path = _resolve_env_path(path)
    if not env_path.is_file():
        return {}
    applied: dict[str, str] = {}
    for key, value in parse_env_lines(env_path.read_text(encoding="utf-8").splitlines()).items():
        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def parse_env_lines(lines: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines. Comments, blanks and lines without a key are ignored."""
    pairs: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.removeprefix("export ").strip()
        if not sep or not key:
            continue
        pairs[key] = _unquote(value.strip())
    return pairs


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load split env files with optional local overrides.

    Later files win because they are loaded last.
    """
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate
    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value
