from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from ..exceptions import InvalidConfiguration
from ..rng import RandomSource, make_rng, shuffled
from .grid import Grid, Point
from .tiles import Terrain

logger = logging.getLogger(__name__)

MIN_SIZE = 5

# Step-2 moves between lattice rooms; the corridor cell sits halfway.
_LATTICE_STEPS: Tuple[Tuple[int, int], ...] = ((0, 2), (2, 0), (0, -2), (-2, 0))


def validate_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidConfiguration(f"Maze size must be an integer, got {size!r}")
    if size < MIN_SIZE:
        raise InvalidConfiguration(f"Maze size must be at least {MIN_SIZE}, got {size}")
    if size % 2 == 0:
        raise InvalidConfiguration(f"Maze size must be odd, got {size}")
    return size


class MazeGenerator:
    """
    Randomized depth-first ("recursive backtracker") maze carver.

    Rooms live on odd coordinates; moving two cells between rooms carves the
    corridor cell in between. The traversal only ever joins an unvisited room
    to the visited tree, so the carved cells form a perfect maze.

    Guarantees:
    - Deterministic layout for a given seeded rng
    - Start (1, 1) and goal (size-2, size-2) are PATH
    - One-cell wall border (odd size keeps rooms off the edge)
    """

    def generate(self, size: int, rng: Optional[RandomSource] = None) -> Grid:
        size = validate_size(size)
        rng = rng if rng is not None else make_rng()
        logger.debug("Generating maze %dx%d", size, size)

        grid = Grid(size, default=Terrain.WALL)
        self._carve(grid, rng)

        grid.set(grid.start, Terrain.PATH)
        grid.set(grid.goal, Terrain.PATH)

        logger.debug("Generated maze:\n%s", grid)
        return grid

    def _carve(self, grid: Grid, rng: RandomSource) -> None:
        # Explicit stack of (room, remaining directions); visits rooms in the
        # same order as the recursive formulation without its depth limit.
        start = grid.start
        visited = {start}
        grid.set(start, Terrain.PATH)
        stack: List[Tuple[Point, Iterator[Tuple[int, int]]]] = [
            (start, iter(shuffled(_LATTICE_STEPS, rng)))
        ]
        while stack:
            room, pending = stack[-1]
            step = next(pending, None)
            if step is None:
                stack.pop()
                continue
            dx, dy = step
            target = room.offset(dx, dy)
            if not grid.in_bounds(target) or target in visited:
                continue
            grid.set(room.offset(dx // 2, dy // 2), Terrain.PATH)
            grid.set(target, Terrain.PATH)
            visited.add(target)
            stack.append((target, iter(shuffled(_LATTICE_STEPS, rng))))


def generate_maze(size: int, rng: Optional[RandomSource] = None) -> Grid:
    """Convenience wrapper around ``MazeGenerator().generate``."""
    return MazeGenerator().generate(size, rng)
