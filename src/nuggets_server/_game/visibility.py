# Area: Game
"""
nuggets_server._game.visibility - Line of sight and per-viewer maps
===================================================================

A player sees a cell when the straight line from the player to that
cell is not blocked. Where the line crosses a column or row between two
grid points, the view is blocked only if both points are opaque; where
it passes exactly through a grid point, that point must be transparent.

Players remember every cell they have ever seen. Remembered cells show
the base map only; live overlays (gold, other players) appear only in
cells that are visible right now.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Mapping, Set

from .grid import Grid, Position, ROCK

GOLD_CHAR = "*"
SELF_CHAR = "@"


def _crossing_clear(grid: Grid, coord: float, make: Callable[[int], Position]) -> bool:
    """Check one crossing: an exact grid point, or the pair it falls between."""
    if coord == int(coord):
        return grid.is_transparent(make(int(coord)))
    low = math.floor(coord)
    return grid.is_transparent(make(low)) or grid.is_transparent(make(low + 1))


def is_visible(grid: Grid, origin: Position, target: Position) -> bool:
    """True if target can be seen from origin."""
    ox, oy = origin
    tx, ty = target
    dx, dy = tx - ox, ty - oy
    if max(abs(dx), abs(dy)) <= 1:
        return True

    # Every intermediate column the line crosses
    step = 1 if dx > 0 else -1
    for x in range(ox + step, tx, step):
        y = oy + dy * (x - ox) / dx
        if not _crossing_clear(grid, y, lambda r, x=x: (x, r)):
            return False

    # Every intermediate row the line crosses
    step = 1 if dy > 0 else -1
    for y in range(oy + step, ty, step):
        x = ox + dx * (y - oy) / dy
        if not _crossing_clear(grid, x, lambda c, y=y: (c, y)):
            return False

    return True


def visible_from(grid: Grid, origin: Position) -> Set[Position]:
    """All non-rock cells currently visible from origin."""
    visible: Set[Position] = set()
    for row in range(grid.rows):
        for col in range(grid.cols):
            pos = (col, row)
            if grid.base_char(pos) == ROCK:
                continue
            if is_visible(grid, origin, pos):
                visible.add(pos)
    return visible


@dataclass
class PlayerView:
    """What one player has seen and is seeing."""

    seen: Set[Position] = field(default_factory=set)
    visible: Set[Position] = field(default_factory=set)

    def refresh(self, grid: Grid, origin: Position) -> None:
        self.visible = visible_from(grid, origin)
        self.seen |= self.visible

    def clear(self) -> None:
        self.seen.clear()
        self.visible.clear()


def _overlay(
    grid: Grid,
    gold: Iterable[Position],
    occupants: Mapping[Position, str],
) -> Dict[Position, str]:
    marks: Dict[Position, str] = {pos: GOLD_CHAR for pos in gold}
    marks.update(occupants)
    return marks


def render_player_view(
    grid: Grid,
    view: PlayerView,
    origin: Position,
    gold: Iterable[Position],
    occupants: Mapping[Position, str],
) -> str:
    """Render one player's masked map; `occupants` maps cells to letters."""
    marks = _overlay(grid, gold, occupants)
    marks[origin] = SELF_CHAR
    lines = []
    for row in range(grid.rows):
        chars = []
        for col in range(grid.cols):
            pos = (col, row)
            if pos in view.visible:
                chars.append(marks.get(pos, grid.base_char(pos)))
            elif pos in view.seen:
                chars.append(grid.base_char(pos))
            else:
                chars.append(ROCK)
        lines.append("".join(chars))
    return "".join(f"{line}\n" for line in lines)


def render_full_view(
    grid: Grid,
    gold: Iterable[Position],
    occupants: Mapping[Position, str],
) -> str:
    """Render the unmasked map with every overlay, as the spectator sees it."""
    marks = _overlay(grid, gold, occupants)
    lines = []
    for row in range(grid.rows):
        lines.append("".join(
            marks.get((col, row), grid.base_char((col, row)))
            for col in range(grid.cols)
        ))
    return "".join(f"{line}\n" for line in lines)
