"""
Shared pytest fixtures for engine tests.

Game fixtures are function-scoped so every test gets a fresh, independently
mutable position.
"""

from typing import Callable

import pytest

from barragoon.game import Game
from barragoon.models import SquareContent
from tests.helpers import at


# =============================================================================
# GAME FIXTURES
# =============================================================================


@pytest.fixture
def start_game() -> Game:
    """The canonical start position, Light to move."""
    return Game.new()


@pytest.fixture
def empty_game() -> Game:
    return Game.empty()


@pytest.fixture
def game_factory() -> Callable[..., Game]:
    """Factory for an otherwise empty game with the given contents placed.

    Usage:
        game = game_factory({(4, 3): light(TileType.TWO), (2, 3): BlockingFace()})
    """

    def _create_game(contents: dict[tuple[int, int], SquareContent]) -> Game:
        game = Game.empty()
        for (rank, file), content in contents.items():
            game.set_content(at(rank, file), content)
        return game

    return _create_game
