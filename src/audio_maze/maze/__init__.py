"""
Maze systems for Audio Maze.

Contains the grid/terrain abstractions, the depth-first maze carver and the
item placer. Everything here is deterministic under a seeded rng and free of
any rendering or IO.
"""
from .generator import MazeGenerator, generate_maze
from .grid import Grid, Point
from .items import ItemKind, ItemMap
from .placement import ItemPlacer, place_items
from .tiles import Terrain

__all__ = [
    "Grid",
    "ItemKind",
    "ItemMap",
    "ItemPlacer",
    "MazeGenerator",
    "Point",
    "Terrain",
    "generate_maze",
    "place_items",
]
