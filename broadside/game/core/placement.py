"""Ship placement validation and randomized fleet construction."""

from __future__ import annotations

import logging
import random

from broadside.game.core.errors import (
    FleetPlacementFailedError,
    InvalidPlacementError,
    PlacementExhaustedError,
)
from broadside.game.core.fleet import Fleet, Ship
from broadside.game.core.grid import Grid
from broadside.game.core.models import DEFAULT_FLEET, Coord, Orientation, ShipType, footprint

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 500
MAX_FLEET_RESETS = 10


def validate_placement(grid: Grid, ship_size: int, bow: Coord, orientation: Orientation) -> bool:
    """Return whether a ship fits on the board without touching another ship.

    The footprint plus its one-cell ring (diagonals included, clipped to the
    board) must be free of occupied cells.
    """
    if ship_size <= 0 or not grid.in_bounds(bow):
        return False
    if orientation is Orientation.HORIZONTAL:
        last = Coord(bow.row, bow.col + ship_size - 1)
    else:
        last = Coord(bow.row + ship_size - 1, bow.col)
    if not grid.in_bounds(last):
        return False

    rows = slice(max(0, bow.row - 1), min(grid.size, last.row + 2))
    cols = slice(max(0, bow.col - 1), min(grid.size, last.col + 2))
    return not grid.any_occupied_in(rows, cols)


def place_manual(grid: Grid, ship_type: ShipType, bow: Coord, orientation: Orientation) -> Ship:
    """Validate and commit an explicit placement."""
    if not validate_placement(grid, ship_type.size, bow, orientation):
        raise InvalidPlacementError(
            f"Invalid placement for {ship_type.value} at ({bow.row}, {bow.col}) {orientation.value}."
        )
    return _commit(grid, ship_type, bow, orientation)


def try_place_random(
    grid: Grid,
    ship_type: ShipType,
    rng: random.Random,
    attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Ship | None:
    """Sample random fitting positions until one validates or attempts run out."""
    size = ship_type.size
    for _ in range(attempts):
        orientation = rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
        max_row = grid.size - (size if orientation is Orientation.VERTICAL else 1)
        max_col = grid.size - (size if orientation is Orientation.HORIZONTAL else 1)
        bow = Coord(rng.randint(0, max_row), rng.randint(0, max_col))
        if validate_placement(grid, size, bow, orientation):
            return _commit(grid, ship_type, bow, orientation)
    return None


def place_random(
    grid: Grid,
    ship_type: ShipType,
    rng: random.Random,
    attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Ship:
    """Place one ship at a random valid position."""
    ship = try_place_random(grid, ship_type, rng, attempts)
    if ship is None:
        raise PlacementExhaustedError(
            f"No valid position found for {ship_type.value} after {attempts} attempts."
        )
    return ship


def place_fleet_random(
    grid: Grid,
    rng: random.Random,
    *,
    max_resets: int = MAX_FLEET_RESETS,
    attempts_per_ship: int = MAX_PLACEMENT_ATTEMPTS,
) -> Fleet:
    """Randomly place the classic fleet on an empty grid.

    Ships go down largest first. When any ship cannot be placed the grid is
    wiped and the whole fleet starts over, at most ``max_resets`` times.
    """
    if grid.occupied_count():
        raise InvalidPlacementError("Random fleet placement requires an empty grid.")

    for attempt in range(max_resets + 1):
        if attempt:
            grid.clear()
        fleet = _attempt_fleet(grid, rng, attempts_per_ship)
        if fleet is not None:
            if attempt:
                logger.info("fleet_placement_recovered resets=%d", attempt)
            return fleet
        logger.debug("fleet_placement_exhausted attempt=%d", attempt + 1)

    grid.clear()
    logger.error("fleet_placement_failed resets=%d", max_resets)
    raise FleetPlacementFailedError(
        f"Could not place the fleet after {max_resets} full board resets."
    )


def _attempt_fleet(grid: Grid, rng: random.Random, attempts_per_ship: int) -> Fleet | None:
    fleet = Fleet()
    for ship_type in sorted(DEFAULT_FLEET, key=lambda item: item.size, reverse=True):
        try:
            ship = place_random(grid, ship_type, rng, attempts_per_ship)
        except PlacementExhaustedError as exc:
            logger.debug("ship_placement_exhausted detail=%s", exc)
            return None
        fleet.add(ship)
    return fleet


def _commit(grid: Grid, ship_type: ShipType, bow: Coord, orientation: Orientation) -> Ship:
    for cell in footprint(ship_type.size, bow, orientation):
        grid.set_occupied(cell)
    return Ship(ship_type=ship_type, bow=bow, orientation=orientation)
