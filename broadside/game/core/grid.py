"""Per-side occupancy and shot tracking."""

from __future__ import annotations

import numpy as np

from broadside.game.core.errors import OutOfBoundsError
from broadside.game.core.models import BOARD_SIZE, Coord


class Grid:
    """Numpy-backed occupancy and shot flags for one side's board.

    Ship identity lives in the fleet; the grid only answers "is something
    here" and "was this cell fired at".
    """

    __slots__ = ("size", "_occupied", "_shots")

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = size
        self._occupied = np.zeros((size, size), dtype=np.int8)
        self._shots = np.zeros((size, size), dtype=np.int8)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def require_in_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord.row, coord.col, self.size)

    def is_occupied(self, coord: Coord) -> bool:
        self.require_in_bounds(coord)
        return bool(self._occupied[coord.row, coord.col])

    def set_occupied(self, coord: Coord) -> None:
        self.require_in_bounds(coord)
        self._occupied[coord.row, coord.col] = 1

    def is_shot(self, coord: Coord) -> bool:
        self.require_in_bounds(coord)
        return bool(self._shots[coord.row, coord.col])

    def mark_shot(self, coord: Coord) -> None:
        self.require_in_bounds(coord)
        self._shots[coord.row, coord.col] = 1

    def any_occupied_in(self, rows: slice, cols: slice) -> bool:
        """Return whether any cell in the (already clipped) window is occupied."""
        return bool(self._occupied[rows, cols].any())

    def occupied_count(self) -> int:
        return int(self._occupied.sum())

    def shot_count(self) -> int:
        return int(self._shots.sum())

    def unshot_cells(self) -> list[Coord]:
        """Return every cell not yet fired at, row-major."""
        return [Coord(int(r), int(c)) for r, c in np.argwhere(self._shots == 0)]

    def clear(self) -> None:
        """Reset occupancy and shots in place."""
        self._occupied.fill(0)
        self._shots.fill(0)
