import pytest

from broadside.game.core.errors import OutOfBoundsError
from broadside.game.core.fleet import FleetRegistry
from broadside.game.core.grid import Grid
from broadside.game.core.models import Coord, Orientation, ShipType, Side
from broadside.game.core.placement import place_manual
from broadside.game.core.shot_resolution import AttackResolver


def _resolver_with_destroyer() -> tuple[AttackResolver, dict[Side, Grid], FleetRegistry]:
    grids = {side: Grid() for side in Side}
    registry = FleetRegistry()
    ship = place_manual(grids[Side.OPPONENT], ShipType.DESTROYER, Coord(0, 0), Orientation.HORIZONTAL)
    registry.register_ship(Side.OPPONENT, ship)
    return AttackResolver(grids, registry), grids, registry


def test_destroyer_hit_sunk_then_stale() -> None:
    resolver, grids, _ = _resolver_with_destroyer()

    first = resolver.attack(Side.PLAYER, Coord(0, 0))
    assert first is not None
    assert first.hit and not first.sunk

    second = resolver.attack(Side.PLAYER, Coord(0, 1))
    assert second is not None
    assert second.hit and second.sunk
    assert second.ship_type is ShipType.DESTROYER

    assert resolver.attack(Side.PLAYER, Coord(0, 0)) is None
    assert grids[Side.OPPONENT].shot_count() == 2


def test_miss_marks_defending_grid_only() -> None:
    resolver, grids, _ = _resolver_with_destroyer()
    result = resolver.attack(Side.PLAYER, Coord(5, 5))
    assert result is not None
    assert not result.hit and not result.sunk and result.ship_type is None
    assert grids[Side.OPPONENT].is_shot(Coord(5, 5))
    assert not grids[Side.PLAYER].is_shot(Coord(5, 5))


def test_out_of_bounds_attack_fails_fast_without_state_change() -> None:
    resolver, grids, registry = _resolver_with_destroyer()
    with pytest.raises(OutOfBoundsError):
        resolver.attack(Side.PLAYER, Coord(10, 0))
    assert grids[Side.OPPONENT].shot_count() == 0
    assert registry.fleet(Side.OPPONENT).by_type(ShipType.DESTROYER).hit_mask == [False, False]


def test_resolver_never_ends_match() -> None:
    resolver, _, registry = _resolver_with_destroyer()
    resolver.attack(Side.PLAYER, Coord(0, 0))
    result = resolver.attack(Side.PLAYER, Coord(0, 1))
    assert result is not None and result.sunk
    assert registry.is_defeated(Side.OPPONENT)
