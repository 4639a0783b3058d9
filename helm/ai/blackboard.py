"""Dict-backed blackboard."""

from __future__ import annotations

from copy import deepcopy

_MISSING = object()


class RuntimeBlackboard:
    """Blackboard keyed by non-empty, whitespace-trimmed names.

    ``None`` is a storable value; absence is reported through ``KeyError`` or
    the caller's default.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, object] = {}

    def put(self, key: str, value: object) -> None:
        self._entries[_normalize(key)] = value

    def get(self, key: str, default: object | None = None) -> object | None:
        return self._entries.get(_normalize(key), default)

    def require(self, key: str) -> object:
        value = self._entries.get(_normalize(key), _MISSING)
        if value is _MISSING:
            raise KeyError(f"blackboard has no entry for {key!r}")
        return value

    def take(self, key: str) -> object:
        value = self.require(key)
        del self._entries[_normalize(key)]
        return value

    def discard(self, key: str) -> None:
        self._entries.pop(_normalize(key), None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> dict[str, object]:
        return deepcopy(self._entries)


def _normalize(key: str) -> str:
    normalized = key.strip()
    if not normalized:
        raise ValueError("blackboard key must not be empty")
    return normalized
