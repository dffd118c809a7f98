# Area: Game
"""
Game Message Handlers
=====================

Handler functions for the inbound message types.
"""

from .spectate import handle_spectate
from .play import handle_play
from .key import handle_key

__all__ = [
    "handle_spectate",
    "handle_play",
    "handle_key",
]
