"""Ship records, per-side fleets and hit bookkeeping."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from broadside.game.core.errors import InvalidPlacementError
from broadside.game.core.models import (
    Coord,
    Orientation,
    ShipPlacement,
    ShipType,
    Side,
    footprint,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Ship:
    """A placed ship and the hit state of each of its segments."""

    ship_type: ShipType
    bow: Coord
    orientation: Orientation
    hit_mask: list[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.hit_mask:
            self.hit_mask = [False] * self.ship_type.size
        if len(self.hit_mask) != self.ship_type.size:
            raise ValueError(
                f"hit mask for {self.ship_type.value} must have {self.ship_type.size} entries"
            )

    @property
    def size(self) -> int:
        return self.ship_type.size

    @property
    def cells(self) -> list[Coord]:
        return footprint(self.size, self.bow, self.orientation)

    @property
    def is_sunk(self) -> bool:
        return all(self.hit_mask)

    @property
    def placement(self) -> ShipPlacement:
        return ShipPlacement(self.ship_type, self.bow, self.orientation)

    def segment_index(self, coord: Coord) -> int | None:
        """Return the segment index covering ``coord``, if any."""
        if self.orientation is Orientation.HORIZONTAL:
            if coord.row != self.bow.row:
                return None
            index = coord.col - self.bow.col
        else:
            if coord.col != self.bow.col:
                return None
            index = coord.row - self.bow.row
        if 0 <= index < self.size:
            return index
        return None

    def mark_hit(self, coord: Coord) -> bool:
        """Mark the segment at ``coord`` as hit. Return whether it belongs to this ship."""
        index = self.segment_index(coord)
        if index is None:
            return False
        self.hit_mask[index] = True
        return True


@dataclass(slots=True)
class Fleet:
    """The ships belonging to one side."""

    ships: list[Ship] = field(default_factory=list)

    def __iter__(self) -> Iterator[Ship]:
        return iter(self.ships)

    def __len__(self) -> int:
        return len(self.ships)

    def add(self, ship: Ship) -> None:
        if self.by_type(ship.ship_type) is not None:
            raise InvalidPlacementError(f"Fleet already contains a {ship.ship_type.value}.")
        self.ships.append(ship)

    def by_type(self, ship_type: ShipType) -> Ship | None:
        """Find the ship of the given type."""
        for ship in self.ships:
            if ship.ship_type == ship_type:
                return ship
        return None

    def ship_at(self, coord: Coord) -> Ship | None:
        for ship in self.ships:
            if ship.segment_index(coord) is not None:
                return ship
        return None

    def is_defeated(self) -> bool:
        """Return whether every ship is sunk. An empty fleet is never defeated."""
        return bool(self.ships) and all(ship.is_sunk for ship in self.ships)

    def placements(self) -> tuple[ShipPlacement, ...]:
        return tuple(ship.placement for ship in self.ships)


@dataclass(frozen=True, slots=True)
class HitRecord:
    """Outcome of recording a shot against a fleet."""

    hit: bool
    ship_type: ShipType | None = None
    sunk: bool = False


class FleetRegistry:
    """Owns both sides' fleets and derives sunk/defeated status."""

    def __init__(self) -> None:
        self._fleets: dict[Side, Fleet] = {side: Fleet() for side in Side}

    def fleet(self, side: Side) -> Fleet:
        return self._fleets[side]

    def register_ship(self, side: Side, ship: Ship) -> None:
        """Append a placed ship to the side's fleet. Setup only."""
        self._fleets[side].add(ship)
        logger.debug("ship_registered side=%s ship=%s", side.value, ship.ship_type.value)

    def record_hit(self, side: Side, coord: Coord) -> HitRecord:
        """Mark the segment at ``coord`` hit on ``side``'s fleet, if a ship is there.

        Re-marking a segment is harmless, so a sunk ship keeps reporting sunk.
        """
        ship = self._fleets[side].ship_at(coord)
        if ship is None:
            return HitRecord(hit=False)
        ship.mark_hit(coord)
        return HitRecord(hit=True, ship_type=ship.ship_type, sunk=ship.is_sunk)

    def is_defeated(self, side: Side) -> bool:
        return self._fleets[side].is_defeated()

    def ship_at(self, side: Side, coord: Coord) -> Ship | None:
        return self._fleets[side].ship_at(coord)

    def remaining_ships(self, side: Side) -> list[ShipType]:
        return [ship.ship_type for ship in self._fleets[side] if not ship.is_sunk]
