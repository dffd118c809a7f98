# Area: Game
"""
Play Handler
============

Handler for PLAY messages (player admission).
"""

import logging

from ..broadcast import broadcast_map, gold_status_for
from ..state import sanitize_name
from ..._shared.protocol import (
    REASON_ALREADY_PLAYING,
    REASON_EMPTY_NAME,
    REASON_GAME_FULL,
    Outgoing,
    build_grid,
    build_no,
    build_ok,
    format_address,
)

logger = logging.getLogger("nuggets_server.router")


def handle_play(ctx) -> Outgoing:
    """
    Handle PLAY message.

    Admits the sender as the next lettered player, places it on a free
    room spot and broadcasts the new map. Rejections leave the session
    untouched.
    """
    session = ctx.session

    if session.is_full():
        logger.info(f"Rejected {format_address(ctx.sender)}: roster full")
        return [(ctx.sender, build_no(REASON_GAME_FULL))]

    if session.find_player(ctx.sender) is not None:
        logger.info(f"Rejected {format_address(ctx.sender)}: already playing")
        return [(ctx.sender, build_no(REASON_ALREADY_PLAYING))]

    name = sanitize_name(ctx.message.argument, session.config.max_name_length)
    if not name:
        logger.info(f"Rejected {format_address(ctx.sender)}: empty name")
        return [(ctx.sender, build_no(REASON_EMPTY_NAME))]

    player = session.add_player(name, ctx.sender)

    outgoing: Outgoing = [
        (ctx.sender, build_ok(player.letter)),
        (ctx.sender, build_grid(session.grid.rows, session.grid.cols)),
    ]
    session.refresh_views()
    outgoing.extend(broadcast_map(session))
    outgoing.append((ctx.sender, gold_status_for(session, player)))
    return outgoing
