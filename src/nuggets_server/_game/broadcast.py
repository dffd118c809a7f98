# Area: Game
"""
nuggets_server._game.broadcast - Broadcast engine
=================================================

Builds the per-viewer updates that follow a change of the shared world.
Nothing is sent here: every function returns the ordered
(address, text) pairs for the runner to deliver.
"""

from typing import Optional

from .state import Player, Session
from .visibility import render_full_view, render_player_view
from .._shared.protocol import Outgoing, build_display, build_gold


def render_for_player(session: Session, player: Player) -> str:
    return render_player_view(
        session.grid,
        player.view,
        player.position,
        session.piles.keys(),
        session.occupants(),
    )


def render_for_spectator(session: Session) -> str:
    return render_full_view(session.grid, session.piles.keys(), session.occupants())


def broadcast_map(session: Session) -> Outgoing:
    """DISPLAY for every connected player (masked) and the spectator (full)."""
    outgoing: Outgoing = []
    for player in session.connected_players():
        outgoing.append((player.address, build_display(render_for_player(session, player))))
    if session.spectator is not None:
        outgoing.append((session.spectator.address, build_display(render_for_spectator(session))))
    return outgoing


def broadcast_gold(session: Session, actor: Optional[Player], picked_up: int) -> Outgoing:
    """
    GOLD triples after a pickup.

    The actor gets (picked_up, purse, remaining); every other connected
    player gets (0, own purse, remaining); the spectator gets (0, 0, remaining).
    """
    remaining = session.gold_remaining
    outgoing: Outgoing = []
    for player in session.connected_players():
        if player is actor:
            outgoing.append((player.address, build_gold(picked_up, player.purse, remaining)))
        else:
            outgoing.append((player.address, build_gold(0, player.purse, remaining)))
    if session.spectator is not None:
        outgoing.append((session.spectator.address, build_gold(0, 0, remaining)))
    return outgoing


def gold_status_for(session: Session, player: Optional[Player]) -> str:
    """GOLD line for one newly joined viewer (player or spectator)."""
    purse = player.purse if player is not None else 0
    return build_gold(0, purse, session.gold_remaining)
