import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from audio_maze.config import GameConfig  # noqa: E402
from audio_maze.engine import Direction, GameEngine  # noqa: E402
from audio_maze.maze import Grid, ItemKind  # noqa: E402

# A single winding corridor from start (1,1) to goal (5,5).
CORRIDOR = [
    "#######",
    "#.....#",
    "#####.#",
    "#.....#",
    "#.#####",
    "#.....#",
    "#######",
]


class FixedGenerator:
    """Generator stand-in that always returns the same layout."""

    def __init__(self, lines):
        self.lines = lines
        self.calls = 0

    def generate(self, size, rng=None):
        self.calls += 1
        return Grid.from_lines(self.lines)


class FixedPlacer:
    """Placer stand-in that returns a fixed item map plus the exit."""

    def __init__(self, items):
        self.items = items

    def place(self, grid, rng=None):
        placed = dict(self.items)
        placed[grid.goal] = ItemKind.EXIT
        return placed


@pytest.fixture
def make_engine():
    """Build an engine on the corridor layout with the given items (started by default)."""

    def _make(items=None, config=None, lines=CORRIDOR, start=True):
        engine = GameEngine(
            config=config or GameConfig(),
            generator=FixedGenerator(lines),
            placer=FixedPlacer(items or {}),
        )
        if start:
            engine.start_game()
        return engine

    return _make


@pytest.fixture
def corridor_route():
    """Every step from start to goal along CORRIDOR."""
    e, s, w = Direction.EAST, Direction.SOUTH, Direction.WEST
    return [e] * 4 + [s] * 2 + [w] * 4 + [s] * 2 + [e] * 4
