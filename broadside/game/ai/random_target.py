"""Uniform random targeting over the cells not yet fired at."""

from __future__ import annotations

import random

from broadside.game.ai.strategy import OpponentStrategy
from broadside.game.core.grid import Grid
from broadside.game.core.models import Coord


class RandomTargetAI(OpponentStrategy):
    """Rejection-samples the board until it lands on an unshot cell."""

    def __init__(self, target_grid: Grid, rng: random.Random) -> None:
        super().__init__(target_grid)
        self._rng = rng

    def choose_shot(self) -> Coord:
        grid = self.target_grid
        if grid.shot_count() >= grid.size * grid.size:
            raise RuntimeError("no unshot cells remain on the target grid")
        while True:
            candidate = Coord(self._rng.randrange(grid.size), self._rng.randrange(grid.size))
            if not grid.is_shot(candidate):
                return candidate
