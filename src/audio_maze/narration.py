"""
Text narration for Audio Maze.

Turns engine outcomes and snapshots into the spoken-style sentences the game
is played by. The actual voice (text-to-speech, screen reader, console) is an
external sink: ``Narrator`` hands every sentence to a ``speak`` callable.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from .engine.events import GameEvent
from .engine.game_engine import GameEngine
from .engine.outcomes import BLOCKED_INACTIVE, MoveOutcome, OutcomeKind
from .engine.state import Direction
from .maze.grid import Point
from .maze.items import ItemKind

logger = logging.getLogger(__name__)

WELCOME = (
    "Welcome to the Audio Maze Adventure! Start a game to begin, stop it at any time, "
    "and use the arrow keys to move through the maze."
)
GAME_START = (
    "Game started! You are at the maze entrance. Your goal is to find a key, "
    "collect weapons, and reach the exit door alive."
)
GAME_STOP = "Game stopped. Start again when ready."
VICTORY = "Congratulations! You found the key and reached the exit door. You won!"
DEFEAT = "Game over. You ran out of health. Start again to try again."
WALL_BUMP = "You cannot move there. There is a wall blocking your path."
NOT_PLAYING = "No game is in progress. Start a game first."

ITEM_DESCRIPTIONS: Dict[ItemKind, str] = {
    ItemKind.KEY: "A golden key that unlocks the exit door",
    ItemKind.SWORD: "A sharp sword for fighting monsters",
    ItemKind.SHIELD: "A protective shield that reduces damage",
    ItemKind.POTION: "A healing potion that restores your health",
    ItemKind.MONSTER: "A dangerous monster that attacks on contact",
    ItemKind.EXIT: "The exit door that leads to victory",
}

# Announcement order for the four neighbours.
_COMPASS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


def health_band(health: int, max_health: int) -> str:
    """Coarse health label: "critical" under 30%, "low" under 60%, else "good"."""
    if max_health <= 0:
        return "critical"
    ratio = health / max_health
    if ratio < 0.3:
        return "critical"
    if ratio < 0.6:
        return "low"
    return "good"


def describe_inventory(items: Iterable[ItemKind]) -> str:
    names = [k.value for k in items]
    if not names:
        return "Your inventory is empty."
    return f"Your inventory contains: {', '.join(names)}."


def describe_health(health: int, max_health: int) -> str:
    return f"Your current health is {health} out of {max_health}."


def describe_location(position: Point) -> str:
    return f"You are at position {position.x}, {position.y} in the maze."


def describe_outcome(outcome: MoveOutcome) -> str:
    """One sentence (or two) explaining a move outcome."""
    kind = outcome.kind
    if kind is OutcomeKind.BLOCKED:
        return NOT_PLAYING if outcome.reason == BLOCKED_INACTIVE else WALL_BUMP
    if kind is OutcomeKind.MOVED:
        return f"You move {outcome.direction.label}." if outcome.direction else "You move."
    if kind is OutcomeKind.PICKED_UP:
        if outcome.item is ItemKind.KEY:
            return "You picked up the golden key!"
        return f"You picked up a {outcome.item.value}!"
    if kind is OutcomeKind.HEALED:
        return f"You drank a healing potion! Your health is now {outcome.health}."
    if kind is OutcomeKind.DEFEATED:
        return "You defeated the monster with your sword!"
    if kind is OutcomeKind.ATTACKED:
        return (
            f"A monster attacked you! You took {outcome.amount} damage. "
            f"Your health is now {outcome.health}."
        )
    if kind is OutcomeKind.LOCKED:
        return "The exit door is locked! You need a key to open it."
    if kind is OutcomeKind.WON:
        return "You unlock the exit door with the golden key."
    if kind is OutcomeKind.DIED:
        if outcome.cause is not None and outcome.cause.kind is OutcomeKind.ATTACKED:
            return f"A monster attacked you! You took {outcome.cause.amount} damage and collapsed."
        return "You collapsed."
    raise ValueError(f"Unhandled outcome kind: {kind}")


def describe_surroundings(engine: GameEngine) -> str:
    """Position, the item underfoot, the four neighbours, inventory and health."""
    position = engine.position
    grid = engine.grid
    if position is None or grid is None:
        return NOT_PLAYING

    parts: List[str] = [f"You are at position {position.x}, {position.y}."]
    here = engine.item_at(position)
    if here is not None:
        parts.append(f"There is {ITEM_DESCRIPTIONS[here].lower()} here.")

    for direction in _COMPASS:
        dx, dy = direction.delta
        cell = position.offset(dx, dy)
        if not grid.in_bounds(cell):
            continue
        item = engine.item_at(cell)
        if not grid.is_path(cell):
            parts.append(f"Wall to your {direction.label}.")
        elif item is ItemKind.MONSTER:
            parts.append(f"Warning! Monster to your {direction.label}!")
        elif item is not None:
            parts.append(f"{ITEM_DESCRIPTIONS[item]} to your {direction.label}.")
        else:
            parts.append(f"Path to your {direction.label}.")

    parts.append(describe_inventory(engine.inventory_order))
    parts.append(f"Your health is {engine.health}.")
    return " ".join(parts)


class Narrator:
    """Engine listener that speaks every game event.

    Keeps the last message (for "repeat") and a bounded history.
    """

    def __init__(self, speak: Optional[Callable[[str], None]] = None, history_size: int = 100) -> None:
        self._speak = speak
        self._history: List[str] = []
        self._history_size = max(1, history_size)
        self.last_message: str = ""

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def attach(self, engine: GameEngine) -> None:
        engine.add_listener(self.on_event)

    def say(self, text: str) -> str:
        self.last_message = text
        self._history.append(text)
        if len(self._history) > self._history_size:
            del self._history[0]
        logger.debug("Narrating: %s", text)
        if self._speak is not None:
            self._speak(text)
        return text

    def repeat(self) -> Optional[str]:
        """Speak the last message again without recording it twice."""
        if not self.last_message:
            return None
        if self._speak is not None:
            self._speak(self.last_message)
        return self.last_message

    def on_event(self, event: GameEvent, engine: GameEngine) -> None:
        outcome = engine.last_outcome
        if event is GameEvent.GAME_STARTED:
            self.say(GAME_START)
            self.say(describe_surroundings(engine))
        elif event is GameEvent.GAME_STOPPED:
            self.say(GAME_STOP)
        elif event is GameEvent.MOVE_BLOCKED:
            self.say(WALL_BUMP)
        elif event is GameEvent.PLAYER_MOVED and outcome is not None:
            if outcome.ends_session:
                self.say(describe_outcome(outcome))
            else:
                self.say(f"{describe_outcome(outcome)} {describe_surroundings(engine)}")
        elif event is GameEvent.VICTORY:
            self.say(VICTORY)
        elif event is GameEvent.DEFEAT:
            self.say(DEFEAT)
