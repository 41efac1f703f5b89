from enum import Enum, auto


class Terrain(Enum):
    """Maze cell terrain.

    - WALL: Non-walkable obstacle
    - PATH: Walkable carved cell
    """

    WALL = auto()
    PATH = auto()

    @property
    def is_walkable(self) -> bool:
        return self is Terrain.PATH

    @property
    def glyph(self) -> str:
        """A single-character visualization useful for logs/debug."""
        return {Terrain.WALL: "#", Terrain.PATH: "."}[self]

    @classmethod
    def from_glyph(cls, glyph: str) -> "Terrain":
        for terrain in cls:
            if terrain.glyph == glyph:
                return terrain
        raise ValueError(f"Unknown terrain glyph: {glyph!r}")
