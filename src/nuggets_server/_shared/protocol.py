# Area: Shared
"""
nuggets_server._shared.protocol - Wire protocol helpers
=======================================================

Parses inbound datagrams and builds outbound ones. One message per
datagram, space-separated tokens:

    inbound:  SPECTATE | PLAY <name> | KEY <char>
    outbound: OK | GRID | DISPLAY | GOLD | QUIT | NO | GAMEOVER
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

# Address of a peer: (host, port). Peer equality is tuple equality.
Address = Tuple[str, int]

# Ordered list of (recipient, text) produced by one handled message
Outgoing = List[Tuple[Address, str]]

# Inbound message kinds
SPECTATE = "SPECTATE"
PLAY = "PLAY"
KEY = "KEY"
UNKNOWN = "UNKNOWN"

QUIT_KEY = "Q"

# Rejection reasons
REASON_GAME_FULL = "Game is full: no more players can join."
REASON_EMPTY_NAME = "Sorry - you must provide player's name."
REASON_ALREADY_PLAYING = "You are already playing"
REASON_INVALID_KEY = "Invalid key"
REASON_SPECTATOR_MOVE = "Spectators cannot move"
REASON_NOT_IN_GAME = "You are not in the game"
REASON_BLOCKED = "Cannot move there"
REASON_UNRECOGNIZED = "Unrecognized message"

# Termination notices
QUIT_PLAYER = "Thanks for playing!"
QUIT_SPECTATOR = "Thanks for watching!"
QUIT_REPLACED = "You have been replaced by a new spectator."


@dataclass(frozen=True)
class InboundMessage:
    """A classified inbound datagram."""
    kind: str
    argument: str = ""


def parse_message(text: str) -> InboundMessage:
    """Classify a raw datagram into SPECTATE, PLAY, KEY or UNKNOWN.

    PLAY keeps everything after the first space as the raw name.
    KEY keeps exactly one character; anything longer is UNKNOWN.
    """
    if text == SPECTATE or text.rstrip("\r\n") == SPECTATE:
        return InboundMessage(SPECTATE)

    if text.startswith(PLAY + " ") or text == PLAY:
        return InboundMessage(PLAY, text[len(PLAY) + 1:])

    if text.startswith(KEY + " "):
        key = text[len(KEY) + 1:].rstrip("\r\n")
        if len(key) == 1:
            return InboundMessage(KEY, key)

    return InboundMessage(UNKNOWN, text)


def build_ok(letter: str) -> str:
    return f"OK {letter}"


def build_grid(rows: int, cols: int) -> str:
    return f"GRID {rows} {cols}"


def build_display(grid_text: str) -> str:
    return f"DISPLAY\n{grid_text}"


def build_gold(collected: int, purse: int, remaining: int) -> str:
    return f"GOLD {collected} {purse} {remaining}"


def build_quit(reason: Optional[str] = None) -> str:
    if reason:
        return f"QUIT {reason}"
    return "QUIT"


def build_no(reason: str) -> str:
    return f"NO {reason}"


def build_gameover(lines: List[str]) -> str:
    """Build GAMEOVER followed by one newline-terminated line per player."""
    return "GAMEOVER\n" + "".join(f"{line}\n" for line in lines)


def message_type(text: str) -> str:
    """First token of a message, used for logging."""
    head = text.split("\n", 1)[0]
    return head.split(" ", 1)[0] if head else ""


def format_address(address: Address) -> str:
    return f"{address[0]}:{address[1]}"
