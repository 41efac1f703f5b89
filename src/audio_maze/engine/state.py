from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..maze.grid import Point
from .inventory import Inventory


class SessionState(Enum):
    """Session mode governing which intents the engine accepts."""

    MENU = "menu"
    PLAYING = "playing"
    VICTORY = "victory"
    DEFEAT = "defeat"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.VICTORY, SessionState.DEFEAT)


class Direction(Enum):
    """Cardinal move directions as (dx, dy); y grows southwards."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass
class PlayerState:
    """Mutable player record; only GameEngine writes to it."""

    position: Point
    health: int
    max_health: int
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def alive(self) -> bool:
        return self.health > 0
