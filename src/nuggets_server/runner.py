"""
nuggets_server.runner - Main event loop
=======================================

The ServerRunner binds the UDP socket, then receives one datagram at a
time, hands it to the GameCoordinator and sends whatever it returns.
The loop ends when the game is over or the process is interrupted.
"""

from __future__ import annotations
import logging
import random
import signal
from pathlib import Path
from typing import Optional

from ._game import GameCoordinator, Grid
from ._runner_config import ServerConfig
from ._shared import (
    Outgoing,
    UdpTransport,
    disable_protocol_mode,
    enable_protocol_mode,
    get_protocol_logger,
    log_and_terminate,
    setup_logging,
)
from ._shared.protocol import format_address
from .errors import InternalConsistencyError, MapFileError

logger = logging.getLogger("nuggets_server.runner")


def load_grid(map_path: str) -> Grid:
    """
    Read and parse a map file.

    Raises:
        MapFileError: If the file cannot be read or is not a valid map
    """
    try:
        text = Path(map_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raise MapFileError(map_path)
    return Grid.from_text(text, source=map_path)


class ServerRunner:
    """
    Hosts one game session.

    Usage
    -----
        from nuggets_server import ServerRunner, ServerConfig

        runner = ServerRunner(map_path="maps/main.txt", config=ServerConfig(), seed=42)
        finished = runner.run()
    """

    def __init__(self, map_path: str, config: Optional[ServerConfig] = None,
                 seed: Optional[int] = None,
                 transport: Optional[UdpTransport] = None):
        self.config = config or ServerConfig()
        self._running = False

        setup_logging(log_file_path=self.config.log_file)

        grid = load_grid(map_path)
        self.coordinator = GameCoordinator(self.config, grid, random.Random(seed))
        self.transport = transport or UdpTransport(self.config.host, self.config.port)

        self._protocol_logger = get_protocol_logger()
        if self.config.trace:
            enable_protocol_mode()
            self._protocol_logger.set_enabled(True)

        logger.info(
            f"Map {map_path}: {grid.rows}x{grid.cols}, "
            f"{self.coordinator.session.gold_total} nuggets in "
            f"{len(self.coordinator.session.piles)} piles"
        )

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> bool:
        """
        Serve until all gold is collected. Blocks until then or Ctrl+C.

        Returns:
            True if the game finished normally
        """
        self._running = True

        def _signal_handler(sig, frame):
            logger.info("Interrupt received, shutting down...")
            self._running = False

        signal.signal(signal.SIGINT, _signal_handler)

        port = self.transport.open()
        print(f"ready at port '{port}'", flush=True)

        try:
            while self._running and not self.coordinator.is_over():
                self._receive_and_process()
        finally:
            self.transport.close()
            self.coordinator.close()
            if self.config.trace:
                disable_protocol_mode()
                self._protocol_logger.set_enabled(False)

        finished = self.coordinator.is_over()
        logger.info("Game finished." if finished else "Server interrupted.")
        return finished

    def _receive_and_process(self) -> None:
        """Single iteration: receive → route → send."""
        received = self.transport.receive(timeout=self.config.receive_timeout_seconds)
        if received is None:
            return
        sender, text = received
        self._protocol_logger.log_received(sender, text, self.coordinator.role_of(sender))

        try:
            outgoing = self.coordinator.route_message(sender, text)
        except InternalConsistencyError as e:
            self.transport.close()
            log_and_terminate(e)
            return
        except Exception as e:
            logger.error(f"Router error for message from {format_address(sender)}: {e}",
                         exc_info=True)
            self._protocol_logger.log_error(str(e))
            return

        self._send_messages(outgoing)

    def _send_messages(self, outgoing: Outgoing) -> None:
        """Send outgoing messages in order."""
        for address, text in outgoing:
            self._protocol_logger.log_sent(address, text, self.coordinator.role_of(address))
            self.transport.send(address, text)

    # ── Manual trigger for testing without a socket ───────────

    def simulate_incoming(self, sender, text: str) -> Outgoing:
        """
        For testing: handle a datagram without the network.
        Returns list of outgoing (address, text) tuples.
        """
        return self.coordinator.route_message(sender, text)
