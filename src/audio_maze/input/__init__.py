"""
Input abstraction layer for Audio Maze.

Exposes:
- InputAction: Logical input actions used by the game.
- InputEvent: A press of a logical action.
- InputMapper: Rebindable mapping from physical keys to actions.
- GameController: Dispatches actions to the engine and narrator.
"""
from .actions import InputAction, InputEvent
from .controller import GameController
from .mapping import InputMapper

__all__ = [
    "InputAction",
    "InputEvent",
    "InputMapper",
    "GameController",
]
