from __future__ import annotations

import random

import pytest

from broadside.game.core.models import Coord, Orientation, ShipPlacement, ShipType


def make_valid_layout() -> list[ShipPlacement]:
    return [
        ShipPlacement(ShipType.CARRIER, Coord(0, 0), Orientation.HORIZONTAL),
        ShipPlacement(ShipType.BATTLESHIP, Coord(2, 0), Orientation.HORIZONTAL),
        ShipPlacement(ShipType.CRUISER, Coord(4, 0), Orientation.HORIZONTAL),
        ShipPlacement(ShipType.SUBMARINE, Coord(6, 0), Orientation.HORIZONTAL),
        ShipPlacement(ShipType.DESTROYER, Coord(8, 0), Orientation.HORIZONTAL),
    ]


@pytest.fixture
def valid_layout() -> list[ShipPlacement]:
    return make_valid_layout()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
