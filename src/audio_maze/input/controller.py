from __future__ import annotations

import logging
from typing import Dict, Optional

from ..config import GameConfig
from ..engine.game_engine import GameEngine
from ..engine.state import Direction, SessionState
from ..narration import (
    NOT_PLAYING,
    Narrator,
    describe_health,
    describe_inventory,
    describe_location,
)
from .actions import InputAction

logger = logging.getLogger(__name__)

_MOVES: Dict[InputAction, Direction] = {
    InputAction.MOVE_NORTH: Direction.NORTH,
    InputAction.MOVE_SOUTH: Direction.SOUTH,
    InputAction.MOVE_EAST: Direction.EAST,
    InputAction.MOVE_WEST: Direction.WEST,
}


class GameController:
    """Dispatch logical actions to the engine and the narrator.

    Movement and queries are only honoured while a game is being played;
    START works from the menu and after victory or defeat, STOP only while
    playing. The engine is never written to except through its intents.
    """

    def __init__(self, engine: GameEngine, narrator: Narrator, config: Optional[GameConfig] = None) -> None:
        self.engine = engine
        self.narrator = narrator
        self.config = config

    def handle(self, action: InputAction) -> bool:
        """Apply ``action``. Returns False once the player asked to quit."""
        if action is InputAction.QUIT:
            logger.debug("Quit requested")
            return False

        state = self.engine.state
        if action is InputAction.START:
            if state is SessionState.PLAYING:
                logger.debug("START ignored while playing")
            else:
                self.engine.start_game(self.config)
            return True
        if action is InputAction.STOP:
            self.engine.stop_game()
            return True
        if action is InputAction.REPEAT:
            self.narrator.repeat()
            return True

        if state is not SessionState.PLAYING:
            self.narrator.say(NOT_PLAYING)
            return True

        direction = _MOVES.get(action)
        if direction is not None:
            self.engine.move(direction)
        elif action is InputAction.INVENTORY:
            self.narrator.say(describe_inventory(self.engine.inventory_order))
        elif action is InputAction.HEALTH:
            self.narrator.say(describe_health(self.engine.health, self.engine.max_health))
        elif action is InputAction.LOCATION:
            position = self.engine.position
            if position is not None:
                self.narrator.say(describe_location(position))
        return True
