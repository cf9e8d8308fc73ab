from __future__ import annotations

import pytest

from ubongo_solver.engine.models import Game
from ubongo_solver.puzzles import load_example


@pytest.fixture
def b4_game() -> Game:
    return load_example("b4")


@pytest.fixture
def b38y_game() -> Game:
    return load_example("b38y")


@pytest.fixture
def rhombus_game() -> Game:
    """2x2 rhombus board tiled by two dominoes."""
    return Game.model_validate({
        "board": [[0, 0], [1, 0], [0, 1], [1, 1]],
        "pieces": [[[0, 0], [1, 0]], [[0, 0], [1, 0]]],
    })
