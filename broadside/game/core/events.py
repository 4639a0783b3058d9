"""Match events published to presentation collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.core.models import AttackResult, ShipPlacement, Side


@dataclass(frozen=True, slots=True)
class MatchEvent:
    """Base class for everything the turn coordinator publishes."""


@dataclass(frozen=True, slots=True)
class FleetPlaced(MatchEvent):
    side: Side
    placements: tuple[ShipPlacement, ...]


@dataclass(frozen=True, slots=True)
class CoinFlipped(MatchEvent):
    starting_side: Side


@dataclass(frozen=True, slots=True)
class AttackResolved(MatchEvent):
    result: AttackResult


@dataclass(frozen=True, slots=True)
class TurnChanged(MatchEvent):
    side: Side


@dataclass(frozen=True, slots=True)
class MatchEnded(MatchEvent):
    winner: Side


@dataclass(frozen=True, slots=True)
class MatchReset(MatchEvent):
    pass


@dataclass(frozen=True, slots=True)
class PacingHint(MatchEvent):
    """Cosmetic delay suggestion. The transition it follows is already applied."""

    next_turn: Side
    delay_seconds: float
