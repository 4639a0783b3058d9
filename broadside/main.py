"""Headless entry point: plays automated matches and logs the outcome."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import replace

from helm.api.events import create_event_bus
from helm.api.logging import get_logger, shutdown_logging
from broadside.game.ai.random_target import RandomTargetAI
from broadside.game.app.pacing import TurnPacer
from broadside.game.app.turns import MatchPhase, MatchState, TurnCoordinator
from broadside.game.core.coords import parse_cell
from broadside.game.core.models import Coord, Side
from broadside.game.infra.app_data import ensure_app_data_dirs
from broadside.game.infra.config import MatchConfig, load_default_env_files, load_match_config
from broadside.game.infra.logging import setup_logging

logger = get_logger(__name__)


def play_match(
    coordinator: TurnCoordinator,
    pacer: TurnPacer,
    rng: random.Random,
    delay_seconds: float,
    opening: Sequence[Coord] = (),
) -> MatchState:
    """Play one match to completion with a random policy standing in for the human.

    The player side fires the ``opening`` cells first, in order; a repeated
    cell is simply stale and the player keeps the turn.
    """
    coordinator.start_match()
    player_ai = RandomTargetAI(coordinator.grid(Side.OPPONENT), rng)
    scripted = deque(opening)
    while not coordinator.get_match_state().match_over:
        if coordinator.get_match_state().phase is MatchPhase.PLAYER_TURN:
            shot = scripted.popleft() if scripted else player_ai.choose_shot()
            result = coordinator.submit_player_attack(shot)
            if result is not None:
                player_ai.notify_result(shot, result.outcome)
        else:
            pacer.advance(delay_seconds)
    return coordinator.get_match_state()


def run(config: MatchConfig, matches: int, opening: Sequence[Coord] = ()) -> dict[Side, int]:
    """Play ``matches`` matches back to back and return wins per side."""
    rng = random.Random(config.seed)
    bus = create_event_bus()
    coordinator = TurnCoordinator(
        rng, event_bus=bus, turn_delay_seconds=config.opponent_delay_seconds
    )
    pacer = TurnPacer(coordinator, bus)
    wins: dict[Side, int] = {side: 0 for side in Side}
    try:
        for index in range(matches):
            state = play_match(coordinator, pacer, rng, config.opponent_delay_seconds, opening)
            if state.winner is None:
                raise RuntimeError("match ended without a winner")
            wins[state.winner] += 1
            logger.info(
                "match_finished index=%d winner=%s player_shots=%d opponent_shots=%d afloat=%s",
                index + 1,
                state.winner.value,
                coordinator.shots_fired(Side.PLAYER),
                coordinator.shots_fired(Side.OPPONENT),
                ",".join(ship.value for ship in coordinator.remaining_ships(state.winner)),
            )
            coordinator.reset()
    finally:
        pacer.close()
    return wins


def main(argv: list[str] | None = None) -> int:
    """Run headless Broadside matches."""
    parser = argparse.ArgumentParser(description="Play automated Broadside matches.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible matches.")
    parser.add_argument("--matches", type=int, default=1, help="Number of matches to play.")
    parser.add_argument(
        "--opening",
        type=parse_cell,
        action="append",
        default=[],
        metavar="CELL",
        help="Cell such as B5 the player fires at first; repeatable.",
    )
    args = parser.parse_args(argv)
    if args.matches < 1:
        parser.error("--matches must be >= 1")

    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    config = load_match_config()
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    logger.info("app_data_paths root=%s logs=%s", paths["root"], paths["logs"])
    logger.info(
        "match_config seed=%s opponent_delay=%.2f matches=%d",
        config.seed,
        config.opponent_delay_seconds,
        args.matches,
    )

    try:
        wins = run(config, args.matches, args.opening)
        logger.info(
            "summary player_wins=%d opponent_wins=%d", wins[Side.PLAYER], wins[Side.OPPONENT]
        )
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
