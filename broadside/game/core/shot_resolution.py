"""Attack resolution against the defending side's grid and fleet."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from broadside.game.core.fleet import FleetRegistry
from broadside.game.core.grid import Grid
from broadside.game.core.models import AttackResult, Coord, Side

logger = logging.getLogger(__name__)


class AttackResolver:
    """Turns a targeted cell into a hit/miss/sunk result, or ``None`` when stale."""

    def __init__(self, grids: Mapping[Side, Grid], registry: FleetRegistry) -> None:
        self._grids = grids
        self._registry = registry

    def attack(self, attacking_side: Side, target: Coord) -> AttackResult | None:
        """Resolve one shot fired by ``attacking_side``.

        Raises ``OutOfBoundsError`` for cells off the board. Returns ``None``
        without touching state when the cell was already fired at. Never
        decides the match outcome.
        """
        defender = attacking_side.other
        grid = self._grids[defender]
        if grid.is_shot(target):
            logger.debug(
                "stale_attack attacker=%s row=%d col=%d",
                attacking_side.value,
                target.row,
                target.col,
            )
            return None

        grid.mark_shot(target)
        record = self._registry.record_hit(defender, target)
        return AttackResult(
            attacker=attacking_side,
            cell=target,
            hit=record.hit,
            sunk=record.sunk,
            ship_type=record.ship_type,
        )
