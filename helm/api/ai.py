"""Decision contracts shared by automated players."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol


class Blackboard(Protocol):
    """Scratch memory an agent fills during ``decide`` and its host drains."""

    def put(self, key: str, value: object) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    def get(self, key: str, default: object | None = None) -> object | None:
        """Return the stored value or ``default``."""

    def require(self, key: str) -> object:
        """Return the stored value or raise ``KeyError``."""

    def take(self, key: str) -> object:
        """Remove and return the stored value, raising ``KeyError`` if absent."""

    def discard(self, key: str) -> None:
        """Drop ``key`` if present."""

    def __contains__(self, key: object) -> bool: ...

    def __len__(self) -> int: ...

    def snapshot(self) -> dict[str, object]:
        """Return a deep copy of the stored values."""


def _empty_observations() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DecisionContext:
    """What an agent may look at while making one decision."""

    blackboard: Blackboard
    step: int = 0
    observations: Mapping[str, object] = field(default_factory=_empty_observations)


class Agent(Protocol):
    """Anything that turns a decision context into an action name."""

    def decide(self, context: DecisionContext) -> str: ...


def create_blackboard() -> Blackboard:
    from helm.ai.blackboard import RuntimeBlackboard

    return RuntimeBlackboard()
