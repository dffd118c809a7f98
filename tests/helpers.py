# Area: Test Fixtures
"""Small deterministic maps and hand-built sessions for tests."""

import random

from nuggets_server._game.gold import GoldPile
from nuggets_server._game.grid import Grid
from nuggets_server._game.state import Session
from nuggets_server._runner_config import ServerConfig

# 5 room columns (1..5) by 3 room rows (1..3)
ROOM_MAP = "\n".join([
    "+-----+",
    "|.....|",
    "|.....|",
    "|.....|",
    "+-----+",
])

# Room with a doorway at (8, 2) leading into a passage
DOOR_MAP = "\n".join([
    "+-------+",
    "|.......|",
    "|.......#####",
    "|.......|   #",
    "+-------+   #",
])


def make_big_map(width: int = 30, height: int = 12) -> str:
    """A single open room with width * height room spots."""
    border = "+" + "-" * width + "+"
    rows = [border] + ["|" + "." * width + "|" for _ in range(height)] + [border]
    return "\n".join(rows)


def make_session(grid_text=ROOM_MAP, piles=None, max_players=26, seed=7):
    """
    Build a session with exactly the given piles.

    piles maps (col, row) -> quantity; gold_total is their sum.
    """
    grid = Grid.from_text(grid_text)
    piles = piles or {}
    total = sum(piles.values())
    config = ServerConfig(max_players=max_players, gold_total=max(total, 1))
    return Session(
        grid=grid,
        config=config,
        rng=random.Random(seed),
        gold_total=total,
        gold_remaining=total,
        piles={pos: GoldPile(position=pos, quantity=qty) for pos, qty in piles.items()},
    )


def place(session, name, address, position):
    """Admit a player and move it to a fixed position."""
    player = session.add_player(name, address)
    player.position = position
    return player
