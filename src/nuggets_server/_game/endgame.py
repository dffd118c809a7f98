# Area: Game
"""
nuggets_server._game.endgame - Endgame reporter
===============================================

Ranks every player who ever joined by purse and builds the GAMEOVER
summary for all remaining viewers.
"""

import logging
from dataclasses import dataclass
from typing import List

from .state import Player, Session
from .._shared.protocol import Outgoing, build_gameover

logger = logging.getLogger("nuggets_server.session")


@dataclass
class RankedPlayer:
    rank: int
    letter: str
    name: str
    purse: int

    def line(self) -> str:
        return f"{self.rank}. {self.letter} {self.name} {self.purse}"


def rank_players(players: List[Player]) -> List[RankedPlayer]:
    """Purse descending; equal purses keep roster order (stable sort)."""
    ordered = sorted(players, key=lambda p: p.purse, reverse=True)
    return [
        RankedPlayer(rank=i, letter=p.letter, name=p.name, purse=p.purse)
        for i, p in enumerate(ordered, start=1)
    ]


def build_summary(session: Session) -> str:
    return build_gameover([entry.line() for entry in rank_players(session.roster)])


def report_game_over(session: Session) -> Outgoing:
    """GAMEOVER to every connected player and the spectator."""
    summary = build_summary(session)
    logger.info("Game over:\n" + summary)
    outgoing: Outgoing = [(p.address, summary) for p in session.connected_players()]
    if session.spectator is not None:
        outgoing.append((session.spectator.address, summary))
    return outgoing
