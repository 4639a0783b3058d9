"""Cosmetic pacing of opponent turns on a helm scheduler."""

from __future__ import annotations

import logging

from helm.api.events import EventBus, Subscription
from helm.api.scheduler import SchedulerPort, create_scheduler
from broadside.game.app.turns import MatchPhase, TurnCoordinator
from broadside.game.core.events import MatchEnded, MatchReset, PacingHint, TurnChanged
from broadside.game.core.models import Side

logger = logging.getLogger(__name__)


class TurnPacer:
    """Runs the opponent turn after the delay suggested by ``PacingHint``.

    The delay only decides when the host sees the opponent move. If the host
    runs the opponent turn itself, the pending task is dropped as soon as the
    turn passes back to the player.
    """

    def __init__(
        self,
        coordinator: TurnCoordinator,
        event_bus: EventBus,
        scheduler: SchedulerPort | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._event_bus = event_bus
        self._scheduler = scheduler if scheduler is not None else create_scheduler()
        self._pending_task: int | None = None
        self._subscriptions: list[Subscription] = [
            event_bus.subscribe(PacingHint, self._on_pacing_hint),
            event_bus.subscribe(TurnChanged, self._on_turn_changed),
            event_bus.subscribe(MatchReset, self._on_stop),
            event_bus.subscribe(MatchEnded, self._on_stop),
        ]

    @property
    def pending(self) -> bool:
        return self._pending_task is not None

    def advance(self, delta_seconds: float) -> int:
        """Advance pacing clock and run any due opponent turn."""
        return self._scheduler.advance(delta_seconds)

    def cancel(self) -> None:
        if self._pending_task is not None:
            self._scheduler.cancel(self._pending_task)
            self._pending_task = None

    def close(self) -> None:
        self.cancel()
        for subscription in self._subscriptions:
            self._event_bus.unsubscribe(subscription)
        self._subscriptions.clear()

    def _on_pacing_hint(self, hint: PacingHint) -> None:
        if hint.next_turn is not Side.OPPONENT:
            return
        self.cancel()
        self._pending_task = self._scheduler.call_later(
            max(0.0, hint.delay_seconds), self._run_opponent_turn
        )

    def _on_turn_changed(self, event: TurnChanged) -> None:
        if event.side is Side.PLAYER and self._pending_task is not None:
            logger.debug("paced_opponent_turn_dropped")
            self.cancel()

    def _on_stop(self, _event: object) -> None:
        self.cancel()

    def _run_opponent_turn(self) -> None:
        self._pending_task = None
        if self._coordinator.get_match_state().phase is not MatchPhase.OPPONENT_TURN:
            logger.debug("paced_opponent_turn_skipped")
            return
        self._coordinator.run_opponent_turn()
