from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .tiles import Terrain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


class Grid:
    """
    Square terrain matrix shared by generation, placement and play. All tile
    access is bounds-checked; out-of-bounds cells behave as walls for queries.

    The grid is built once per session by the generator and is treated as
    immutable afterwards.
    """

    def __init__(self, size: int, default: Terrain = Terrain.WALL) -> None:
        if size < 3:
            raise ValueError("Grid must be at least 3x3 to maintain wall borders")
        self.size = size
        self._cells: List[List[Terrain]] = [[default for _ in range(size)] for _ in range(size)]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from glyph rows ('#' wall, '.' path)."""
        size = len(lines)
        if any(len(line) != size for line in lines):
            raise ValueError("Grid rows must form a square")
        grid = cls(size)
        for y, line in enumerate(lines):
            for x, glyph in enumerate(line):
                grid._cells[y][x] = Terrain.from_glyph(glyph)
        return grid

    # ---- Landmarks -------------------------------------------------------
    @property
    def start(self) -> Point:
        return Point(1, 1)

    @property
    def goal(self) -> Point:
        return Point(self.size - 2, self.size - 2)

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self.size and 0 <= p.y < self.size

    def get(self, p: Point) -> Terrain:
        if not self.in_bounds(p):
            raise IndexError(f"Cell out of bounds: ({p.x},{p.y}) not in [0,{self.size})^2")
        return self._cells[p.y][p.x]

    def set(self, p: Point, terrain: Terrain) -> None:
        if not self.in_bounds(p):
            raise IndexError(f"Cell out of bounds: ({p.x},{p.y})")
        self._cells[p.y][p.x] = terrain

    # ---- Query -----------------------------------------------------------
    def is_path(self, p: Point) -> bool:
        return self.in_bounds(p) and self._cells[p.y][p.x].is_walkable

    def neighbors_4(self, p: Point) -> Iterator[Point]:
        # Ordered for deterministic traversal: north, east, south, west
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            n = p.offset(dx, dy)
            if self.in_bounds(n):
                yield n

    def path_cells(self) -> List[Point]:
        """All PATH cells in row-major order."""
        return [
            Point(x, y)
            for y in range(self.size)
            for x in range(self.size)
            if self._cells[y][x] is Terrain.PATH
        ]

    # ---- Search ----------------------------------------------------------
    def distances_from(self, start: Point) -> Dict[Point, int]:
        """BFS step distances from start to every reachable PATH cell."""
        if not self.is_path(start):
            return {}
        dist: Dict[Point, int] = {start: 0}
        dq = deque([start])
        while dq:
            p = dq.popleft()
            for n in self.neighbors_4(p):
                if n in dist or not self.is_path(n):
                    continue
                dist[n] = dist[p] + 1
                dq.append(n)
        return dist

    def is_reachable(self, start: Point, target: Point) -> bool:
        return target in self.distances_from(start)

    def shortest_path(self, start: Point, target: Point) -> Optional[List[Point]]:
        """Cells from start to target inclusive, or None when unreachable."""
        if not (self.is_path(start) and self.is_path(target)):
            return None
        parents: Dict[Point, Optional[Point]] = {start: None}
        dq = deque([start])
        while dq:
            p = dq.popleft()
            if p == target:
                break
            for n in self.neighbors_4(p):
                if n not in parents and self.is_path(n):
                    parents[n] = p
                    dq.append(n)
        if target not in parents:
            return None
        route: List[Point] = []
        cur: Optional[Point] = target
        while cur is not None:
            route.append(cur)
            cur = parents[cur]
        route.reverse()
        return route

    # ---- Export / Compare -----------------------------------------------
    def to_str_lines(self, overlay: Optional[Dict[Point, str]] = None) -> List[str]:
        overlay = overlay or {}
        lines: List[str] = []
        for y in range(self.size):
            row = []
            for x in range(self.size):
                p = Point(x, y)
                row.append(overlay.get(p, self._cells[y][x].glyph))
            lines.append("".join(row))
        return lines

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """
        Deterministic, hashable snapshot of the cells for equality tests.
        """
        return tuple(tuple(cell.value for cell in row) for row in self._cells)

    def __str__(self) -> str:
        return "\n".join(self.to_str_lines())
