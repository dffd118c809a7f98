# Area: Game
"""
nuggets_server._game.gold - Gold economy setup
==============================================

Draws the number of piles, splits the total into piles of at least one
nugget each, and scatters them over distinct room spots.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .grid import Grid, Position

logger = logging.getLogger("nuggets_server.session")


@dataclass
class GoldPile:
    """A room spot holding collectible nuggets."""
    position: Position
    quantity: int


def choose_pile_count(
    rng: random.Random, min_piles: int, max_piles: int, gold_total: int, room_count: int
) -> int:
    """Uniform draw from [min_piles, max_piles], capped by gold and space."""
    count = rng.randint(min_piles, max_piles)
    return max(1, min(count, gold_total, room_count))


def partition_gold(rng: random.Random, gold_total: int, pile_count: int) -> List[int]:
    """
    Split gold_total into pile_count positive parts summing to gold_total.

    Picks pile_count - 1 distinct cut points in 1..gold_total-1.
    """
    if not 1 <= pile_count <= gold_total:
        raise ValueError(f"cannot split {gold_total} nuggets into {pile_count} piles")
    cuts = sorted(rng.sample(range(1, gold_total), pile_count - 1))
    bounds = [0] + cuts + [gold_total]
    return [bounds[i + 1] - bounds[i] for i in range(pile_count)]


def scatter_piles(
    rng: random.Random, grid: Grid, quantities: Sequence[int]
) -> Dict[Position, GoldPile]:
    """Place each quantity on a distinct random room spot."""
    spots = rng.sample(grid.room_cells(), len(quantities))
    return {pos: GoldPile(position=pos, quantity=qty) for pos, qty in zip(spots, quantities)}


def create_piles(
    rng: random.Random, grid: Grid, gold_total: int, min_piles: int, max_piles: int
) -> Dict[Position, GoldPile]:
    """Build the full set of piles for a new session."""
    count = choose_pile_count(rng, min_piles, max_piles, gold_total, len(grid.room_cells()))
    quantities = partition_gold(rng, gold_total, count)
    piles = scatter_piles(rng, grid, quantities)
    logger.info(f"Placed {gold_total} nuggets in {len(piles)} piles")
    return piles
