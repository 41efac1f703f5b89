"""
Game engine: session state machine and turn resolution.

Exposes:
- GameEngine: owns the session and resolves moves.
- MoveOutcome / OutcomeKind: structured move results for narration.
- Direction, SessionState, PlayerState: engine vocabulary.
- GameEvent: notifications sent to engine listeners.
"""
from .events import GameEvent
from .game_engine import GameEngine
from .inventory import Inventory
from .outcomes import BLOCKED_INACTIVE, BLOCKED_WALL, MoveOutcome, OutcomeKind
from .state import Direction, PlayerState, SessionState

__all__ = [
    "BLOCKED_INACTIVE",
    "BLOCKED_WALL",
    "Direction",
    "GameEngine",
    "GameEvent",
    "Inventory",
    "MoveOutcome",
    "OutcomeKind",
    "PlayerState",
    "SessionState",
]
