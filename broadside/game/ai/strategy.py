"""Targeting policy contract for the automated side."""

from __future__ import annotations

from abc import ABC, abstractmethod

from helm.api.ai import Agent, Blackboard, DecisionContext, create_blackboard
from broadside.game.core.grid import Grid
from broadside.game.core.models import Coord, ShotResult


class OpponentStrategy(Agent, ABC):
    """Picks cells to fire at on one target grid.

    ``decide`` parks the chosen cell on the context blackboard under
    ``SHOT_KEY``; the host collects it with ``take_decided_shot`` and reports
    the outcome back through ``notify_result``.
    """

    ACTION_FIRE = "fire"
    SHOT_KEY = "broadside.ai.next_shot"
    OUTCOME_KEY = "broadside.ai.last_outcome"

    def __init__(self, target_grid: Grid) -> None:
        self._target = target_grid
        self._blackboard = create_blackboard()
        self.shots_taken = 0

    @property
    def target_grid(self) -> Grid:
        return self._target

    @property
    def blackboard(self) -> Blackboard:
        return self._blackboard

    def decide(self, context: DecisionContext) -> str:
        context.blackboard.put(self.SHOT_KEY, self.choose_shot())
        return self.ACTION_FIRE

    @classmethod
    def take_decided_shot(cls, blackboard: Blackboard) -> Coord:
        """Pop the pending shot; ``KeyError`` if ``decide`` has not stored one."""
        shot = blackboard.take(cls.SHOT_KEY)
        if not isinstance(shot, Coord):
            raise TypeError(f"blackboard shot must be a Coord, got {type(shot).__name__}")
        return shot

    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        self.shots_taken += 1
        self._blackboard.put(self.OUTCOME_KEY, (coord, result))
        self.on_result(coord, result)

    @abstractmethod
    def choose_shot(self) -> Coord:
        """Return an unshot cell of ``target_grid``."""

    def on_result(self, coord: Coord, result: ShotResult) -> None:
        """Override to learn from outcomes; the base policy ignores them."""
