"""Step-by-step manual fleet placement for the human side."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from broadside.game.core.errors import InvalidPlacementError
from broadside.game.core.fleet import Fleet, Ship
from broadside.game.core.grid import Grid
from broadside.game.core.models import DEFAULT_FLEET, Coord, Orientation, ShipPlacement, ShipType, footprint
from broadside.game.core.placement import place_manual, validate_placement

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlacementPreview:
    """Hover feedback for the ship currently being placed."""

    ship_type: ShipType
    cells: tuple[Coord, ...]
    valid: bool


class PlacementSession:
    """Walks the classic fleet largest-first, one validated ship at a time.

    The session places onto its own scratch grid; the finished ``layout()`` is
    handed to ``TurnCoordinator.setup_match`` which validates it again.
    """

    def __init__(self) -> None:
        self._grid = Grid()
        self._fleet = Fleet()
        self._index = 0
        self.orientation = Orientation.HORIZONTAL

    @property
    def current_ship(self) -> ShipType | None:
        if self._index >= len(DEFAULT_FLEET):
            return None
        return DEFAULT_FLEET[self._index]

    @property
    def is_complete(self) -> bool:
        return self.current_ship is None

    @property
    def placed(self) -> tuple[Ship, ...]:
        return tuple(self._fleet)

    def rotate(self) -> Orientation:
        self.orientation = self.orientation.toggled()
        return self.orientation

    def preview(self, bow: Coord) -> PlacementPreview | None:
        ship_type = self.current_ship
        if ship_type is None:
            return None
        cells = tuple(
            cell for cell in footprint(ship_type.size, bow, self.orientation) if self._grid.in_bounds(cell)
        )
        valid = validate_placement(self._grid, ship_type.size, bow, self.orientation)
        return PlacementPreview(ship_type=ship_type, cells=cells, valid=valid)

    def try_place(self, bow: Coord) -> Ship | None:
        """Place the current ship at ``bow``; ``None`` keeps the same ship selected."""
        ship_type = self.current_ship
        if ship_type is None:
            return None
        try:
            ship = place_manual(self._grid, ship_type, bow, self.orientation)
        except InvalidPlacementError:
            logger.debug("manual_placement_rejected ship=%s row=%d col=%d", ship_type.value, bow.row, bow.col)
            return None
        self._fleet.add(ship)
        self._index += 1
        return ship

    def layout(self) -> list[ShipPlacement]:
        if not self.is_complete:
            raise InvalidPlacementError("Fleet placement is not complete.")
        return [ship.placement for ship in self._fleet]

    def reset(self) -> None:
        self._grid = Grid()
        self._fleet = Fleet()
        self._index = 0
        self.orientation = Orientation.HORIZONTAL
