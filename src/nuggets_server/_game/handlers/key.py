# Area: Game
"""
Key Handler
===========

Handler for KEY messages: quitting and movement.
"""

import logging

from ..broadcast import broadcast_gold, broadcast_map
from ..movement import MoveResult, StepOutcome, resolve_move
from ..._shared.protocol import (
    QUIT_KEY,
    QUIT_PLAYER,
    QUIT_SPECTATOR,
    REASON_BLOCKED,
    REASON_INVALID_KEY,
    REASON_NOT_IN_GAME,
    REASON_SPECTATOR_MOVE,
    Outgoing,
    build_no,
    build_quit,
    format_address,
)

logger = logging.getLogger("nuggets_server.router")


def handle_key(ctx) -> Outgoing:
    """
    Handle KEY message.

    Q releases every role the sender holds. Any other key must come
    from a connected player and goes to the movement resolver; an
    address that is both a player and the spectator moves as the player.
    """
    session = ctx.session
    key = ctx.message.argument

    if key == QUIT_KEY:
        return _handle_quit(ctx)

    player = session.find_player(ctx.sender)
    if player is None:
        if session.is_spectator(ctx.sender):
            return [(ctx.sender, build_no(REASON_SPECTATOR_MOVE))]
        logger.warning(f"Key '{key}' from unknown sender {format_address(ctx.sender)}")
        return [(ctx.sender, build_no(REASON_NOT_IN_GAME))]

    outgoing: Outgoing = []

    def on_step(outcome: StepOutcome) -> bool:
        session.refresh_views()
        if outcome.result is MoveResult.MOVED_ONTO_GOLD:
            outgoing.extend(broadcast_gold(session, player, outcome.picked_up))
        outgoing.extend(broadcast_map(session))
        return session.is_gold_exhausted()

    summary = resolve_move(session, player, key, on_step)

    if not summary.key_valid:
        logger.info(f"Player {player.letter} sent invalid key '{key}'")
        return [(ctx.sender, build_no(REASON_INVALID_KEY))]
    if summary.steps == 0:
        return [(ctx.sender, build_no(REASON_BLOCKED))]
    return outgoing


def _handle_quit(ctx) -> Outgoing:
    session = ctx.session
    player = session.find_player(ctx.sender)
    watching = session.is_spectator(ctx.sender)

    if player is None and not watching:
        return [(ctx.sender, build_no(REASON_NOT_IN_GAME))]

    if watching:
        session.clear_spectator()
        logger.info(f"Spectator {format_address(ctx.sender)} quit")
    if player is None:
        return [(ctx.sender, build_quit(QUIT_SPECTATOR))]

    session.disconnect(player)
    outgoing: Outgoing = [(ctx.sender, build_quit(QUIT_PLAYER))]
    session.refresh_views()
    outgoing.extend(broadcast_map(session))
    return outgoing
