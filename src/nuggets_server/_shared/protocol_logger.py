# Area: Shared
"""
nuggets_server._shared.protocol_logger - Datagram trace logging
===============================================================

One colored line per received or sent datagram, with the peer address,
the message type and the role of the peer (player letter or spectator).
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional

from .protocol import Address, format_address, message_type

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Inbound messages
CYAN = "\033[36m"          # Outbound messages
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# MESSAGE TYPE → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

RECEIVE_DISPLAY_NAMES = {
    "SPECTATE": "JOIN-SPECTATOR",
    "PLAY": "JOIN-PLAYER",
    "KEY": "KEYSTROKE",
}

SEND_DISPLAY_NAMES = {
    "OK": "ADMITTED",
    "GRID": "GRID-SIZE",
    "DISPLAY": "MAP-UPDATE",
    "GOLD": "GOLD-UPDATE",
    "QUIT": "DISCONNECT",
    "NO": "REJECTED",
    "GAMEOVER": "SUMMARY",
}


class ProtocolLogger:
    """Logger for datagram traffic."""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def log_received(self, address: Address, text: str, role: Optional[str] = None) -> None:
        """Log a received datagram."""
        if not self.enabled:
            return
        kind = message_type(text)
        display = RECEIVE_DISPLAY_NAMES.get(kind, "UNRECOGNIZED")
        detail = text.split("\n", 1)[0]
        line = (
            f"{GREEN}{self._now_ms()} | RECEIVED | from {format_address(address):21} | "
            f"{display:15} | ROLE: {role or '-':9} | {detail}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_sent(self, address: Address, text: str, role: Optional[str] = None) -> None:
        """Log a sent datagram (first line only)."""
        if not self.enabled:
            return
        kind = message_type(text)
        display = SEND_DISPLAY_NAMES.get(kind, kind)
        detail = text.split("\n", 1)[0]
        line = (
            f"{CYAN}{self._now_ms()} | SENT     | to   {format_address(address):21} | "
            f"{display:15} | ROLE: {role or '-':9} | {detail}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_error(self, description: str) -> None:
        """Log an error (always shown)."""
        line = f"{RED}[ERROR] {self._now_ms()} | {description}{RESET}"
        print(line, file=sys.stderr)


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
