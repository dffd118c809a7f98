# Area: Game
"""Game coordinator - owns the session, routes messages, detects game over."""
import logging
import random
from typing import Optional

from .grid import Grid
from .router import MessageRouter
from .state import Session, initialize_session, teardown
from .endgame import report_game_over
from .._runner_config import ServerConfig
from .._shared.protocol import Address, Outgoing, parse_message

logger = logging.getLogger("nuggets_server.router")


class GameCoordinator:
    """
    High-level wrapper for one game session.

    Each call to route_message runs to completion: handler, broadcasts,
    accounting check and, once the last nugget is gone, the GAMEOVER
    summary. After that every further message is ignored.
    """

    def __init__(self, config: ServerConfig, grid: Grid,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.session: Optional[Session] = initialize_session(config, grid, rng)
        self.router = MessageRouter(self.session)
        self._over = False

    def route_message(self, sender: Address, text: str) -> Outgoing:
        """Handle one datagram; returns (address, text) tuples to send."""
        if self._over:
            logger.debug("Game over, ignoring message")
            return []

        outgoing = self.router.route(parse_message(text), sender)
        self.session.verify_accounting()

        if self.session.is_gold_exhausted():
            outgoing.extend(report_game_over(self.session))
            self._over = True

        return outgoing

    def is_over(self) -> bool:
        """True once the summary has been emitted."""
        return self._over

    def role_of(self, address: Address) -> Optional[str]:
        """Letter of the player at address, 'SPECTATOR', or None."""
        if self.session is None:
            return None
        if self.session.is_spectator(address):
            return "SPECTATOR"
        player = self.session.find_player(address)
        return player.letter if player else None

    def close(self) -> None:
        """Tear down the session; safe to call more than once."""
        teardown(self.session)
        self.session = None
