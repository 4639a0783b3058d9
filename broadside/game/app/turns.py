"""Turn sequencing state machine for one human vs. automated-opponent match."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from helm.api.ai import DecisionContext
from helm.api.events import EventBus
from broadside.game.ai.random_target import RandomTargetAI
from broadside.game.ai.strategy import OpponentStrategy
from broadside.game.core.coords import format_cell
from broadside.game.core.errors import InvalidPlacementError, TurnOrderError
from broadside.game.core.events import (
    AttackResolved,
    CoinFlipped,
    FleetPlaced,
    MatchEnded,
    MatchEvent,
    MatchReset,
    PacingHint,
    TurnChanged,
)
from broadside.game.core.fleet import Fleet, FleetRegistry
from broadside.game.core.grid import Grid
from broadside.game.core.models import DEFAULT_FLEET, AttackResult, Coord, ShipPlacement, ShipType, Side
from broadside.game.core.placement import place_fleet_random, place_manual
from broadside.game.core.shot_resolution import AttackResolver

logger = logging.getLogger(__name__)

StrategyFactory = Callable[[Grid, random.Random], OpponentStrategy]

_MAX_OPPONENT_DECISIONS = 200


class MatchPhase(StrEnum):
    """Turn coordinator states."""

    AWAITING_SETUP = "AwaitingSetup"
    COIN_FLIP = "CoinFlip"
    PLAYER_TURN = "PlayerTurn"
    OPPONENT_TURN = "OpponentTurn"
    MATCH_OVER = "MatchOver"


_TURN_PHASES: dict[Side, MatchPhase] = {
    Side.PLAYER: MatchPhase.PLAYER_TURN,
    Side.OPPONENT: MatchPhase.OPPONENT_TURN,
}


@dataclass(frozen=True, slots=True)
class MatchState:
    """Read-only snapshot for presentation layers."""

    phase: MatchPhase
    whose_turn: Side | None = None
    winner: Side | None = None

    @property
    def match_over(self) -> bool:
        return self.phase is MatchPhase.MATCH_OVER


@dataclass(frozen=True, slots=True)
class MatchSetup:
    """Fleets seeded for a new match."""

    player_fleet: Fleet
    opponent_fleet: Fleet


class _Match:
    """Everything one match owns. Replaced wholesale on reset."""

    def __init__(self) -> None:
        self.grids: dict[Side, Grid] = {side: Grid() for side in Side}
        self.registry = FleetRegistry()
        self.resolver = AttackResolver(self.grids, self.registry)
        self.shots_fired: dict[Side, int] = {side: 0 for side in Side}


class TurnCoordinator:
    """Alternates control between the player and the automated opponent.

    Every transition is driven by an explicit call; nothing here listens for
    input. Events go to the optional ``event_bus`` after the state change is
    complete, so a presentation layer may animate or delay freely.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        event_bus: EventBus | None = None,
        strategy_factory: StrategyFactory = RandomTargetAI,
        turn_delay_seconds: float = 0.0,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._event_bus = event_bus
        self._strategy_factory = strategy_factory
        self._turn_delay_seconds = turn_delay_seconds
        self._match = _Match()
        self._strategy: OpponentStrategy | None = None
        self._state = MatchState(phase=MatchPhase.AWAITING_SETUP)

    def get_match_state(self) -> MatchState:
        return self._state

    def grid(self, side: Side) -> Grid:
        return self._match.grids[side]

    def fleet(self, side: Side) -> Fleet:
        return self._match.registry.fleet(side)

    def shots_fired(self, side: Side) -> int:
        return self._match.shots_fired[side]

    def remaining_ships(self, side: Side) -> list[ShipType]:
        """Ship types of ``side`` still afloat."""
        return self._match.registry.remaining_ships(side)

    def setup_match(self, player_layout: Sequence[ShipPlacement] | None = None) -> MatchSetup:
        """Seed both fleets and move to the coin flip.

        The opponent fleet is always random. The player fleet is random unless
        ``player_layout`` supplies one explicit placement per classic ship. A
        rejected layout leaves the coordinator untouched in ``AWAITING_SETUP``.
        """
        self._require_phase(MatchPhase.AWAITING_SETUP, "setup_match")
        match = _Match()

        if player_layout is None:
            self._seed_random(match, Side.PLAYER)
        else:
            self._seed_manual(match, player_layout)
        self._seed_random(match, Side.OPPONENT)

        self._match = match
        self._strategy = self._strategy_factory(match.grids[Side.PLAYER], self._rng)
        self._state = MatchState(phase=MatchPhase.COIN_FLIP)
        logger.info("match_setup player_source=%s", "random" if player_layout is None else "manual")
        for side in Side:
            self._publish(FleetPlaced(side=side, placements=match.registry.fleet(side).placements()))
        return MatchSetup(
            player_fleet=match.registry.fleet(Side.PLAYER),
            opponent_fleet=match.registry.fleet(Side.OPPONENT),
        )

    def coin_flip(self) -> Side:
        """Pick the starting side uniformly at random."""
        self._require_phase(MatchPhase.COIN_FLIP, "coin_flip")
        starting = self._rng.choice((Side.PLAYER, Side.OPPONENT))
        self._state = MatchState(phase=_TURN_PHASES[starting], whose_turn=starting)
        logger.info("coin_flip starting_side=%s", starting.value)
        self._publish(CoinFlipped(starting_side=starting))
        self._publish(TurnChanged(side=starting))
        self._publish(PacingHint(next_turn=starting, delay_seconds=self._turn_delay_seconds))
        return starting

    def start_match(self, player_layout: Sequence[ShipPlacement] | None = None) -> Side:
        """Convenience for ``setup_match`` followed by ``coin_flip``."""
        self.setup_match(player_layout)
        return self.coin_flip()

    def submit_player_attack(self, cell: Coord) -> AttackResult | None:
        """Resolve the player's shot at the opponent board.

        Returns ``None`` for an already-shot cell; the player keeps the turn.
        """
        self._require_phase(MatchPhase.PLAYER_TURN, "submit_player_attack")
        result = self._match.resolver.attack(Side.PLAYER, cell)
        if result is None:
            return None
        self._after_attack(result)
        return result

    def run_opponent_turn(self) -> AttackResult:
        """Let the targeting policy pick an unshot player cell and resolve it."""
        self._require_phase(MatchPhase.OPPONENT_TURN, "run_opponent_turn")
        strategy = self._strategy
        if strategy is None:
            raise TurnOrderError("opponent strategy is not initialized")

        for _ in range(_MAX_OPPONENT_DECISIONS):
            decision = strategy.decide(
                DecisionContext(
                    blackboard=strategy.blackboard,
                    step=self._match.shots_fired[Side.OPPONENT],
                    observations={"phase": self._state.phase.value},
                )
            )
            if decision != OpponentStrategy.ACTION_FIRE:
                continue
            shot = OpponentStrategy.take_decided_shot(strategy.blackboard)
            result = self._match.resolver.attack(Side.OPPONENT, shot)
            if result is None:
                continue
            strategy.notify_result(shot, result.outcome)
            self._after_attack(result)
            return result
        raise RuntimeError("opponent strategy failed to choose an unshot cell")

    def reset(self) -> None:
        """Discard the current match and return to ``AWAITING_SETUP``."""
        self._match = _Match()
        self._strategy = None
        self._state = MatchState(phase=MatchPhase.AWAITING_SETUP)
        logger.info("match_reset")
        self._publish(MatchReset())

    def _after_attack(self, result: AttackResult) -> None:
        attacker = result.attacker
        defender = attacker.other
        self._match.shots_fired[attacker] += 1
        logger.debug(
            "attack_resolved attacker=%s cell=%s outcome=%s",
            attacker.value,
            format_cell(result.cell),
            result.outcome.value,
        )

        if self._match.registry.is_defeated(defender):
            self._state = MatchState(phase=MatchPhase.MATCH_OVER, winner=attacker)
            logger.info(
                "match_over winner=%s shots=%d",
                attacker.value,
                self._match.shots_fired[attacker],
            )
            self._publish(AttackResolved(result=result))
            self._publish(MatchEnded(winner=attacker))
            return

        self._state = MatchState(phase=_TURN_PHASES[defender], whose_turn=defender)
        self._publish(AttackResolved(result=result))
        self._publish(TurnChanged(side=defender))
        self._publish(PacingHint(next_turn=defender, delay_seconds=self._turn_delay_seconds))

    def _seed_random(self, match: _Match, side: Side) -> None:
        fleet = place_fleet_random(match.grids[side], self._rng)
        for ship in fleet:
            match.registry.register_ship(side, ship)

    def _seed_manual(self, match: _Match, layout: Sequence[ShipPlacement]) -> None:
        types = sorted(placement.ship_type for placement in layout)
        if types != sorted(DEFAULT_FLEET):
            raise InvalidPlacementError("Player layout must contain each classic ship exactly once.")
        grid = match.grids[Side.PLAYER]
        for placement in layout:
            ship = place_manual(grid, placement.ship_type, placement.bow, placement.orientation)
            match.registry.register_ship(Side.PLAYER, ship)

    def _require_phase(self, expected: MatchPhase, operation: str) -> None:
        if self._state.phase is not expected:
            raise TurnOrderError(
                f"{operation} requires phase {expected.value}, current phase is {self._state.phase.value}"
            )

    def _publish(self, event: MatchEvent) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
