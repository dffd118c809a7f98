# Area: Game
"""
Spectate Handler
================

Handler for SPECTATE messages.
"""

import logging

from ..broadcast import gold_status_for, render_for_spectator
from ..._shared.protocol import (
    QUIT_REPLACED,
    Outgoing,
    build_display,
    build_grid,
    build_quit,
    format_address,
)

logger = logging.getLogger("nuggets_server.router")


def handle_spectate(ctx) -> Outgoing:
    """
    Handle SPECTATE message.

    Evicts any current spectator with a QUIT, installs the sender and
    sends it GRID, the full DISPLAY and the gold status.
    """
    session = ctx.session
    outgoing: Outgoing = []

    previous = session.install_spectator(ctx.sender)
    if previous is not None:
        outgoing.append((previous, build_quit(QUIT_REPLACED)))
        logger.info(
            f"Spectator {format_address(previous)} replaced by {format_address(ctx.sender)}"
        )
    else:
        logger.info(f"Spectator joined from {format_address(ctx.sender)}")

    outgoing.append((ctx.sender, build_grid(session.grid.rows, session.grid.cols)))
    outgoing.append((ctx.sender, build_display(render_for_spectator(session))))
    outgoing.append((ctx.sender, gold_status_for(session, None)))
    return outgoing
