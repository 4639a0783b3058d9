"""Human-readable cell labels (column letter + row number, e.g. ``B5``)."""

from __future__ import annotations

from broadside.game.core.errors import OutOfBoundsError
from broadside.game.core.models import BOARD_SIZE, Coord

COLUMN_LETTERS = "ABCDEFGHIJ"


def format_cell(coord: Coord) -> str:
    if not (0 <= coord.row < BOARD_SIZE and 0 <= coord.col < BOARD_SIZE):
        raise OutOfBoundsError(coord.row, coord.col, BOARD_SIZE)
    return f"{COLUMN_LETTERS[coord.col]}{coord.row + 1}"


def parse_cell(label: str) -> Coord:
    """Parse labels such as ``"a1"`` or ``"J10"`` into a coordinate."""
    text = label.strip().upper()
    if len(text) < 2 or text[0] not in COLUMN_LETTERS or not text[1:].isdigit():
        raise ValueError(f"Malformed cell label: {label!r}")
    col = COLUMN_LETTERS.index(text[0])
    row = int(text[1:]) - 1
    if not 0 <= row < BOARD_SIZE:
        raise OutOfBoundsError(row, col, BOARD_SIZE)
    return Coord(row=row, col=col)
