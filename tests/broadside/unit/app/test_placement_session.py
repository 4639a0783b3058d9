import random

import pytest

from broadside.game.app.placement_session import PlacementSession
from broadside.game.app.turns import MatchPhase, TurnCoordinator
from broadside.game.core.errors import InvalidPlacementError
from broadside.game.core.models import DEFAULT_FLEET, Coord, Orientation, ShipType, Side


def test_session_walks_fleet_largest_first() -> None:
    session = PlacementSession()
    assert session.current_ship is DEFAULT_FLEET[0]
    for index, row in enumerate((0, 2, 4, 6, 8)):
        assert session.current_ship is DEFAULT_FLEET[index]
        assert session.try_place(Coord(row, 0)) is not None
    assert session.is_complete
    assert session.current_ship is None
    assert session.try_place(Coord(9, 9)) is None


def test_rejected_bow_keeps_current_ship() -> None:
    session = PlacementSession()
    session.try_place(Coord(0, 0))
    current = session.current_ship
    assert session.try_place(Coord(1, 1)) is None
    assert session.try_place(Coord(0, 8)) is None
    assert session.current_ship is current
    assert len(session.placed) == 1


def test_preview_clips_cells_and_flags_validity() -> None:
    session = PlacementSession()
    preview = session.preview(Coord(0, 8))
    assert preview is not None
    assert preview.ship_type is ShipType.CARRIER
    assert preview.cells == (Coord(0, 8), Coord(0, 9))
    assert not preview.valid

    good = session.preview(Coord(0, 0))
    assert good is not None and good.valid
    assert len(good.cells) == 5


def test_rotate_toggles_orientation_for_placement() -> None:
    session = PlacementSession()
    assert session.rotate() is Orientation.VERTICAL
    ship = session.try_place(Coord(0, 0))
    assert ship is not None
    assert ship.orientation is Orientation.VERTICAL
    assert session.rotate() is Orientation.HORIZONTAL


def test_layout_requires_complete_fleet() -> None:
    session = PlacementSession()
    session.try_place(Coord(0, 0))
    with pytest.raises(InvalidPlacementError):
        session.layout()


def test_completed_layout_is_accepted_by_coordinator() -> None:
    session = PlacementSession()
    for row in (0, 2, 4, 6, 8):
        session.try_place(Coord(row, 0))
    coordinator = TurnCoordinator(random.Random(4))
    coordinator.setup_match(session.layout())
    assert coordinator.get_match_state().phase is MatchPhase.COIN_FLIP
    assert coordinator.fleet(Side.PLAYER).ship_at(Coord(8, 1)) is not None


def test_reset_clears_progress() -> None:
    session = PlacementSession()
    session.rotate()
    session.try_place(Coord(0, 0))
    session.reset()
    assert session.current_ship is DEFAULT_FLEET[0]
    assert session.placed == ()
    assert session.orientation is Orientation.HORIZONTAL
    assert session.try_place(Coord(0, 0)) is not None
