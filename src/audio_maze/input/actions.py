from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class InputAction(Enum):
    """Logical input actions.

    Abstracts the physical devices (keyboard, mouse, console words) so the
    game logic operates solely on semantic actions.
    """

    MOVE_NORTH = auto()
    MOVE_SOUTH = auto()
    MOVE_EAST = auto()
    MOVE_WEST = auto()
    INVENTORY = auto()
    HEALTH = auto()
    LOCATION = auto()
    REPEAT = auto()
    START = auto()
    STOP = auto()
    QUIT = auto()


@dataclass(frozen=True)
class InputEvent:
    """A press of a logical input action.

    Attributes:
        action: The logical action triggered.
        source: Optional string describing the source device (e.g., "keyboard", "console").
    """

    action: InputAction
    source: Optional[str] = None


__all__ = ["InputAction", "InputEvent"]
