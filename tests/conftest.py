# Area: Test Fixtures
"""Shared pytest fixtures."""

import pytest

from nuggets_server._game.grid import Grid

from helpers import DOOR_MAP, ROOM_MAP, make_session


@pytest.fixture
def room_grid():
    return Grid.from_text(ROOM_MAP)


@pytest.fixture
def door_grid():
    return Grid.from_text(DOOR_MAP)


@pytest.fixture
def session():
    """Room session with one far-away pile so slides never end the game."""
    return make_session(piles={(5, 3): 10})
