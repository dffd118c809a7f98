# Area: Game
"""
nuggets_server._game.state - Session state
==========================================

The root aggregate of one game: roster, spectator slot, gold economy
and map handles. Owned by a single GameCoordinator for its lifetime
and mutated only while one message is being handled.
"""

from __future__ import annotations
import logging
import random
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .grid import Grid, Position
from .gold import GoldPile, create_piles
from .visibility import PlayerView
from .._runner_config import ServerConfig
from .._shared.protocol import Address
from ..errors import InternalConsistencyError

logger = logging.getLogger("nuggets_server.session")

# Whitespace and ASCII control characters trimmed from names
_TRIM_CHARS = string.whitespace + "".join(chr(c) for c in range(32)) + "\x7f"


class PlayerStatus(Enum):
    """Connection status of a roster slot."""
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass
class Player:
    """One roster slot. Never removed; a quitting player is disconnected."""
    letter: str
    name: str
    address: Address
    position: Position = (0, 0)
    purse: int = 0
    status: PlayerStatus = PlayerStatus.CONNECTED
    view: PlayerView = field(default_factory=PlayerView)

    @property
    def connected(self) -> bool:
        return self.status is PlayerStatus.CONNECTED


@dataclass
class Spectator:
    """The single full-map viewer."""
    address: Address


@dataclass
class Session:
    """
    Full state of one game.

    `gold_remaining` always equals the sum of pile quantities; with the
    purses it adds up to `gold_total`.
    """
    grid: Optional[Grid]
    config: ServerConfig
    rng: random.Random
    gold_total: int
    gold_remaining: int = 0
    piles: Dict[Position, GoldPile] = field(default_factory=dict)
    roster: List[Player] = field(default_factory=list)
    spectator: Optional[Spectator] = None

    # ── Roster ──────────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return self.config.max_players

    def is_full(self) -> bool:
        return len(self.roster) >= self.capacity

    def connected_players(self) -> List[Player]:
        return [p for p in self.roster if p.connected]

    def find_player(self, address: Address) -> Optional[Player]:
        """Connected player bound to this address, if any."""
        for player in self.roster:
            if player.connected and player.address == address:
                return player
        return None

    def player_at(self, pos: Position) -> Optional[Player]:
        for player in self.roster:
            if player.connected and player.position == pos:
                return player
        return None

    def occupants(self) -> Dict[Position, str]:
        return {p.position: p.letter for p in self.roster if p.connected}

    def add_player(self, name: str, address: Address) -> Player:
        """Allocate the next slot, assign its letter and place it on the map."""
        if self.is_full():
            raise InternalConsistencyError(
                "roster_capacity", {"size": len(self.roster), "capacity": self.capacity}
            )
        letter = chr(ord("A") + len(self.roster))
        if any(p.letter == letter for p in self.roster):
            raise InternalConsistencyError("duplicate_letter", {"letter": letter})
        player = Player(letter=letter, name=name, address=address)
        player.position = self._free_spot()
        self.roster.append(player)
        logger.info(f"Player {letter} '{name}' joined at {player.position}")
        return player

    def _free_spot(self) -> Position:
        """Random room spot without a connected player, preferring no gold."""
        taken = set(self.occupants())
        rooms = [pos for pos in self.grid.room_cells() if pos not in taken]
        empty = [pos for pos in rooms if pos not in self.piles]
        candidates = empty or rooms
        if not candidates:
            raise InternalConsistencyError("no_free_spot", {"players": len(taken)})
        return self.rng.choice(candidates)

    def disconnect(self, player: Player) -> None:
        player.status = PlayerStatus.DISCONNECTED
        player.view.clear()
        logger.info(f"Player {player.letter} '{player.name}' quit with {player.purse} nuggets")

    # ── Spectator ───────────────────────────────────────────

    def is_spectator(self, address: Address) -> bool:
        return self.spectator is not None and self.spectator.address == address

    def install_spectator(self, address: Address) -> Optional[Address]:
        """Install a new spectator; returns the evicted one's address."""
        previous = self.spectator.address if self.spectator else None
        self.spectator = Spectator(address=address)
        return previous

    def clear_spectator(self) -> None:
        self.spectator = None

    # ── Gold ────────────────────────────────────────────────

    def collect(self, player: Player, pile: GoldPile) -> int:
        """Move a whole pile into the player's purse; returns the amount."""
        amount = pile.quantity
        del self.piles[pile.position]
        pile.quantity = 0
        player.purse += amount
        self.gold_remaining -= amount
        logger.info(
            f"Player {player.letter} picked up {amount} nuggets, {self.gold_remaining} remain"
        )
        return amount

    def is_gold_exhausted(self) -> bool:
        return self.gold_remaining == 0

    def verify_accounting(self) -> None:
        """
        Check gold conservation.

        Raises:
            InternalConsistencyError: If piles, purses and the remaining
                count disagree with the fixed total
        """
        in_piles = sum(p.quantity for p in self.piles.values())
        in_purses = sum(p.purse for p in self.roster)
        if in_piles != self.gold_remaining or in_piles + in_purses != self.gold_total:
            raise InternalConsistencyError("gold_accounting", {
                "in_piles": in_piles,
                "in_purses": in_purses,
                "remaining": self.gold_remaining,
                "total": self.gold_total,
            })

    # ── Visibility ──────────────────────────────────────────

    def refresh_views(self) -> None:
        """Recompute what every connected player sees."""
        for player in self.connected_players():
            player.view.refresh(self.grid, player.position)


def initialize_session(
    config: ServerConfig, grid: Grid, rng: Optional[random.Random] = None
) -> Session:
    """Create a session with its gold scattered over the grid."""
    rng = rng or random.Random()
    piles = create_piles(
        rng, grid, config.gold_total, config.gold_min_piles, config.gold_max_piles
    )
    session = Session(
        grid=grid,
        config=config,
        rng=rng,
        gold_total=config.gold_total,
        gold_remaining=sum(p.quantity for p in piles.values()),
        piles=piles,
    )
    session.verify_accounting()
    return session


def teardown(session: Optional[Session]) -> None:
    """Release everything the session owns. Safe on None or repeated calls."""
    if session is None:
        return
    for player in session.roster:
        player.view.clear()
    session.roster.clear()
    session.piles.clear()
    session.spectator = None
    session.grid = None
    logger.debug("Session torn down")


def sanitize_name(raw: str, max_length: int) -> str:
    """
    Clean a submitted player name.

    Truncates to max_length, strips trailing whitespace and control
    characters, and replaces any other unprintable character with '_'.
    An empty result means the name is rejected.
    """
    name = raw.strip(_TRIM_CHARS)[:max_length].rstrip(_TRIM_CHARS)
    return "".join(ch if ch.isprintable() else "_" for ch in name)
