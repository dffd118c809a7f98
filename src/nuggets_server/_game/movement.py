# Area: Game
"""
nuggets_server._game.movement - Movement resolver
=================================================

Turns one keystroke into position changes. Lower-case keys move one
step; upper-case keys slide step by step until blocked:

    y k u
    h @ l
    b j n

A slide is an explicit loop bounded by the grid's larger dimension.
After every successful step the caller's `on_step` hook runs, so each
intermediate cell is observed before the next step is attempted.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .state import Player, Session

logger = logging.getLogger("nuggets_server.movement")

DIRECTIONS = {
    "h": (-1, 0),
    "l": (1, 0),
    "k": (0, -1),
    "j": (0, 1),
    "y": (-1, -1),
    "u": (1, -1),
    "b": (-1, 1),
    "n": (1, 1),
}


class MoveResult(Enum):
    """Outcome of a single step."""
    INVALID = "invalid"
    MOVED = "moved"
    MOVED_ONTO_GOLD = "moved_onto_gold"
    MOVED_ONTO_PLAYER = "moved_onto_player"


@dataclass
class StepOutcome:
    result: MoveResult
    picked_up: int = 0
    swapped_with: Optional[Player] = None

    @property
    def moved(self) -> bool:
        return self.result is not MoveResult.INVALID


@dataclass
class MoveSummary:
    """What one keystroke did overall."""
    key_valid: bool
    steps: int = 0


# Returns True when the move must stop early (game over)
StepHook = Callable[[StepOutcome], bool]


def is_direction_key(key: str) -> bool:
    return len(key) == 1 and key.lower() in DIRECTIONS and key.isalpha()


def is_slide_key(key: str) -> bool:
    return is_direction_key(key) and key.isupper()


def step(session: Session, player: Player, vector: Tuple[int, int]) -> StepOutcome:
    """Attempt one step in direction `vector`."""
    col, row = player.position
    target = (col + vector[0], row + vector[1])

    if not session.grid.is_passable(target):
        return StepOutcome(MoveResult.INVALID)

    other = session.player_at(target)
    if other is not None and other is not player:
        other.position, player.position = player.position, target
        logger.debug(f"Player {player.letter} swapped with {other.letter}")
        return StepOutcome(MoveResult.MOVED_ONTO_PLAYER, swapped_with=other)

    player.position = target
    pile = session.piles.get(target)
    if pile is not None:
        amount = session.collect(player, pile)
        return StepOutcome(MoveResult.MOVED_ONTO_GOLD, picked_up=amount)

    return StepOutcome(MoveResult.MOVED)


def resolve_move(
    session: Session, player: Player, key: str, on_step: StepHook
) -> MoveSummary:
    """
    Apply a direction key for `player`.

    Args:
        session: The session to mutate
        player: The moving, connected player
        key: One direction letter; upper case slides
        on_step: Called after each successful step

    Returns:
        MoveSummary with key_valid False for unrecognized keys
    """
    if not is_direction_key(key):
        return MoveSummary(key_valid=False)

    vector = DIRECTIONS[key.lower()]
    max_steps = max(session.grid.rows, session.grid.cols) if is_slide_key(key) else 1

    summary = MoveSummary(key_valid=True)
    while summary.steps < max_steps:
        outcome = step(session, player, vector)
        if not outcome.moved:
            break
        summary.steps += 1
        if on_step(outcome):
            break

    logger.debug(f"Player {player.letter} key '{key}': {summary.steps} step(s)")
    return summary
