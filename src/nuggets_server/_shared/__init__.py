# Area: Shared
"""
Shared utilities used by the game core and the runner.

This package contains:
- UDP transport
- Logging configuration and datagram trace
- Wire protocol helpers
"""

from .transport import UdpTransport
from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_fatal_error,
    enable_protocol_mode,
    disable_protocol_mode,
)
from .protocol import (
    Address,
    Outgoing,
    InboundMessage,
    parse_message,
    build_ok,
    build_grid,
    build_display,
    build_gold,
    build_quit,
    build_no,
    build_gameover,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "UdpTransport",
    "setup_logging",
    "log_and_terminate",
    "log_fatal_error",
    "enable_protocol_mode",
    "disable_protocol_mode",
    "Address",
    "Outgoing",
    "InboundMessage",
    "parse_message",
    "build_ok",
    "build_grid",
    "build_display",
    "build_gold",
    "build_quit",
    "build_no",
    "build_gameover",
    "get_protocol_logger",
    "ProtocolLogger",
]
