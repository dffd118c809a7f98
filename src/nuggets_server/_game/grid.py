# Area: Game
"""
nuggets_server._game.grid - Map grid storage
============================================

Parses map text into a rectangular grid of base characters:

    ' '  solid rock         '-' '|' '+'  walls
    '.'  room spot          '#'          passage spot

Gold piles and players are overlays kept by the session, never stored
in the grid itself.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from ..errors import MapFileError

Position = Tuple[int, int]  # (col, row)

ROOM = "."
PASSAGE = "#"
ROCK = " "
WALLS = frozenset("-|+")
MAP_CHARS = frozenset({ROOM, PASSAGE, ROCK}) | WALLS


@dataclass(frozen=True)
class Grid:
    """Immutable authoritative map."""

    cells: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str, source: str = "<map>") -> "Grid":
        """
        Parse map text.

        Short rows are padded with rock to the widest row; a map with
        unknown characters or without any room spot is rejected.

        Raises:
            MapFileError: If the text is not a usable map
        """
        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise MapFileError(source, "is an empty map")

        width = max(len(line) for line in lines)
        rows: List[str] = []
        for number, line in enumerate(lines, start=1):
            bad = set(line) - MAP_CHARS
            if bad:
                raise MapFileError(
                    source, f"has invalid characters {sorted(bad)} on line {number}"
                )
            rows.append(line.ljust(width, ROCK))

        grid = cls(cells=tuple(rows))
        if not grid.room_cells():
            raise MapFileError(source, "has no room spots")
        return grid

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, pos: Position) -> bool:
        col, row = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def base_char(self, pos: Position) -> str:
        if not self.in_bounds(pos):
            return ROCK
        col, row = pos
        return self.cells[row][col]

    def is_passable(self, pos: Position) -> bool:
        return self.base_char(pos) in (ROOM, PASSAGE)

    def is_room(self, pos: Position) -> bool:
        return self.base_char(pos) == ROOM

    def is_transparent(self, pos: Position) -> bool:
        """Only room spots let light through."""
        return self.base_char(pos) == ROOM

    def room_cells(self) -> List[Position]:
        return [
            (col, row)
            for row, line in enumerate(self.cells)
            for col, ch in enumerate(line)
            if ch == ROOM
        ]

    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.cells)
