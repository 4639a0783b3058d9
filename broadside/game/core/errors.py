"""Error taxonomy for placement, attack and turn handling."""

from __future__ import annotations


class BroadsideError(Exception):
    """Base class for rules-engine errors."""


class OutOfBoundsError(BroadsideError, ValueError):
    """A cell reference lies outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"cell ({row}, {col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col


class InvalidPlacementError(BroadsideError, ValueError):
    """A manual placement breaks the fit, overlap or adjacency rules."""


class PlacementExhaustedError(BroadsideError, RuntimeError):
    """Randomized placement of one ship ran out of attempts."""


class FleetPlacementFailedError(BroadsideError, RuntimeError):
    """Randomized fleet placement ran out of full-board resets."""


class TurnOrderError(BroadsideError, RuntimeError):
    """An operation was requested in a match phase that does not allow it."""
