"""
Audio Maze package root.

A turn-based maze adventure designed to be played by ear: the maze, item and
engine modules hold pure, deterministic game logic; narration and input
translate it for whatever voice or keyboard front end drives the game.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "engine",
    "maze",
    "narration",
]
