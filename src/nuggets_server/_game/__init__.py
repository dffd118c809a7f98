# Area: Game
"""
Game core - single-session engine.

This package handles:
- Map grid and visibility
- Session state and gold economy
- Message routing and admission
- Movement, broadcasts and the endgame summary
"""

from .grid import Grid
from .visibility import PlayerView, visible_from
from .gold import GoldPile, partition_gold
from .state import (
    Player,
    PlayerStatus,
    Session,
    Spectator,
    initialize_session,
    sanitize_name,
    teardown,
)
from .movement import MoveResult, resolve_move
from .broadcast import broadcast_gold, broadcast_map
from .endgame import rank_players, report_game_over
from .router import MessageRouter
from .coordinator import GameCoordinator

__all__ = [
    "Grid",
    "PlayerView",
    "visible_from",
    "GoldPile",
    "partition_gold",
    "Player",
    "PlayerStatus",
    "Session",
    "Spectator",
    "initialize_session",
    "sanitize_name",
    "teardown",
    "MoveResult",
    "resolve_move",
    "broadcast_gold",
    "broadcast_map",
    "rank_players",
    "report_game_over",
    "MessageRouter",
    "GameCoordinator",
]
