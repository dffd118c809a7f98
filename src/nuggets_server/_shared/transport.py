# Area: Shared
"""
nuggets_server._shared.transport - UDP datagram transport
=========================================================

Handles all network I/O. The runner calls receive() to get the next
datagram and send() to deliver outgoing text. Delivery is best-effort:
a failed send is logged and dropped, never retried.
"""

from __future__ import annotations
import logging
import socket
from typing import Optional, Tuple

from .protocol import Address, format_address
from .._runner_config import MAX_DATAGRAM_BYTES

logger = logging.getLogger("nuggets_server.transport")


class UdpTransport:
    """Thin wrapper around one bound UDP socket."""

    def __init__(self, host: str = "0.0.0.0", port: int = 0):
        self.host = host
        self.port = port
        self._sock: Optional[socket.socket] = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def open(self) -> int:
        """Bind the socket and return the actual port number."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind((self.host, self.port))
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self.port = sock.getsockname()[1]
        logger.info(f"UDP transport bound to {self.host}:{self.port}")
        return self.port

    def close(self) -> None:
        """Close the socket; safe to call more than once."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.info("UDP transport closed")

    def receive(self, timeout: Optional[float] = None) -> Optional[Tuple[Address, str]]:
        """
        Wait for one datagram.

        Returns:
            (address, text), or None if the timeout elapsed first
        """
        if self._sock is None:
            raise RuntimeError("transport is not open")
        self._sock.settimeout(timeout)
        try:
            data, address = self._sock.recvfrom(MAX_DATAGRAM_BYTES)
        except socket.timeout:
            return None
        text = data.decode("utf-8", errors="replace")
        return (address[0], address[1]), text

    def send(self, address: Address, text: str) -> bool:
        """Send one datagram; returns False if the OS refused it."""
        if self._sock is None:
            raise RuntimeError("transport is not open")
        data = text.encode("utf-8")
        if len(data) > MAX_DATAGRAM_BYTES:
            logger.warning(
                f"Dropping {len(data)}-byte message to {format_address(address)}: too large"
            )
            return False
        try:
            self._sock.sendto(data, address)
        except OSError as e:
            logger.warning(f"Send to {format_address(address)} failed: {e}")
            return False
        return True
