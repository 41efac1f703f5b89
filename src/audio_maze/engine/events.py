from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by GameEngine to notify narration or rendering."""

    GAME_STARTED = auto()
    GAME_STOPPED = auto()
    PLAYER_MOVED = auto()
    MOVE_BLOCKED = auto()
    VICTORY = auto()
    DEFEAT = auto()
