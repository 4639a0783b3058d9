"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class ShipType(StrEnum):
    """Classic Battleship ship types."""

    CARRIER = "carrier"
    BATTLESHIP = "battleship"
    CRUISER = "cruiser"
    SUBMARINE = "submarine"
    DESTROYER = "destroyer"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.CRUISER: 3,
    ShipType.SUBMARINE: 3,
    ShipType.DESTROYER: 2,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.CARRIER,
    ShipType.BATTLESHIP,
    ShipType.CRUISER,
    ShipType.SUBMARINE,
    ShipType.DESTROYER,
)

FLEET_SEGMENT_COUNT = sum(SHIP_LENGTHS.values())


class Side(StrEnum):
    """One of the two sides of a match."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class ShotResult(StrEnum):
    """Outcome class of a resolved shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Requested placement of a single ship."""

    ship_type: ShipType
    bow: Coord
    orientation: Orientation


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Resolved attack against one cell of the defending board."""

    attacker: Side
    cell: Coord
    hit: bool
    sunk: bool = False
    ship_type: ShipType | None = None

    @property
    def outcome(self) -> ShotResult:
        if self.sunk:
            return ShotResult.SUNK
        if self.hit:
            return ShotResult.HIT
        return ShotResult.MISS


def footprint(size: int, bow: Coord, orientation: Orientation) -> list[Coord]:
    """Compute the cells covered by a ship of ``size`` starting at ``bow``."""
    result: list[Coord] = []
    for i in range(size):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(bow.row, bow.col + i))
        else:
            result.append(Coord(bow.row + i, bow.col))
    return result


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    return footprint(placement.ship_type.size, placement.bow, placement.orientation)
