# Area: Game
"""
nuggets_server._game.router - Message router
============================================

Routes classified inbound messages to handlers. Every handler:
1. Checks its admission rule and rejects with NO if it fails
2. Mutates the Session
3. Recomputes visibility and builds the broadcasts
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .state import Session
from .handlers import handle_key, handle_play, handle_spectate
from .._shared.protocol import (
    KEY,
    PLAY,
    REASON_UNRECOGNIZED,
    SPECTATE,
    Address,
    InboundMessage,
    Outgoing,
    build_no,
    format_address,
)

logger = logging.getLogger("nuggets_server.router")


@dataclass
class HandlerContext:
    """Context passed to handler functions."""

    session: Session
    message: InboundMessage
    sender: Address


class MessageRouter:
    """
    Stateless router over one session.

    Holds no state of its own beyond the session it reads and writes.
    """

    def __init__(self, session: Session):
        self.session = session

    def route(self, message: InboundMessage, sender: Address) -> Outgoing:
        """
        Route one inbound message.

        Returns list of (recipient_address, text) tuples, in send order.
        """
        ctx = HandlerContext(session=self.session, message=message, sender=sender)

        if message.kind == SPECTATE:
            return handle_spectate(ctx)

        elif message.kind == PLAY:
            return handle_play(ctx)

        elif message.kind == KEY:
            return handle_key(ctx)

        else:
            logger.warning(
                f"Unrecognized message from {format_address(sender)}: {message.argument!r}"
            )
            return [(sender, build_no(REASON_UNRECOGNIZED))]
