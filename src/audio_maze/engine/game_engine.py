from __future__ import annotations

import logging
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

from ..config import GameConfig
from ..maze.generator import MazeGenerator
from ..maze.grid import Grid, Point
from ..maze.items import ItemKind, ItemMap
from ..maze.placement import ItemPlacer
from ..rng import make_rng
from .events import GameEvent
from .outcomes import BLOCKED_INACTIVE, BLOCKED_WALL, MoveOutcome, OutcomeKind
from .state import Direction, PlayerState, SessionState

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "GameEngine"], None]


class GameEngine:
    """Owns one game session: the maze, the live item map and the player.

    Callers submit intents (``start_game``, ``stop_game``, ``move``) and read
    snapshots; they never write engine fields. Every intent runs to completion
    before returning, and ``move`` computes its effects on working copies so a
    turn is either fully applied or not at all.

    A single rng, seeded once at construction, drives every session so a seeded
    engine replays the same sequence of mazes.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        generator: Optional[MazeGenerator] = None,
        placer: Optional[ItemPlacer] = None,
    ) -> None:
        self._config: GameConfig = config or GameConfig()
        self._rng = make_rng(seed)
        self._generator = generator or MazeGenerator()
        self._placer = placer or ItemPlacer()
        self._listeners: List[Listener] = []

        self._state: SessionState = SessionState.MENU
        self._grid: Optional[Grid] = None
        self._items: ItemMap = {}
        self._player: Optional[PlayerState] = None
        self._last_outcome: Optional[MoveOutcome] = None

    # ---- Listeners -------------------------------------------------------
    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events (start, stop, moves, victory, defeat)."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash engine
                logger.exception("Listener errored on %s: %s", event, ex)

    # ---- Snapshots -------------------------------------------------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def items(self) -> Dict[Point, ItemKind]:
        return dict(self._items)

    def item_at(self, p: Point) -> Optional[ItemKind]:
        return self._items.get(p)

    @property
    def position(self) -> Optional[Point]:
        return self._player.position if self._player else None

    @property
    def player_pos(self) -> Optional[Tuple[int, int]]:
        if not self._player:
            return None
        return self._player.position.x, self._player.position.y

    @property
    def health(self) -> int:
        return self._player.health if self._player else 0

    @property
    def max_health(self) -> int:
        return self._player.max_health if self._player else self._config.start_health

    @property
    def inventory(self) -> FrozenSet[ItemKind]:
        return self._player.inventory.as_frozenset() if self._player else frozenset()

    @property
    def inventory_order(self) -> Tuple[ItemKind, ...]:
        """Held items in the order they were picked up."""
        return self._player.inventory.as_tuple() if self._player else ()

    @property
    def last_outcome(self) -> Optional[MoveOutcome]:
        return self._last_outcome

    # ---- Session lifecycle -----------------------------------------------
    def start_game(self, config: Optional[GameConfig] = None) -> None:
        """Start (or restart) a session with a freshly generated maze.

        Raises InvalidConfiguration for a bad config. Ignored while a session
        is already being played.
        """
        cfg = (config if config is not None else self._config).validated()
        if self._state is SessionState.PLAYING:
            logger.debug("start_game() called while already playing; ignored")
            return

        grid = self._generator.generate(cfg.maze_size, self._rng)
        items = dict(self._placer.place(grid, self._rng))

        self._config = cfg
        self._grid = grid
        self._items = items
        self._player = PlayerState(position=grid.start, health=cfg.start_health, max_health=cfg.start_health)
        self._last_outcome = None
        self._state = SessionState.PLAYING
        logger.info("Game started: %dx%d maze, %d items, health %d", grid.size, grid.size, len(items), cfg.start_health)
        self._emit(GameEvent.GAME_STARTED)

    def stop_game(self) -> None:
        """Return to the menu. Only valid while playing."""
        if self._state is not SessionState.PLAYING:
            logger.debug("stop_game() called in state %s; ignored", self._state.value)
            return
        self._state = SessionState.MENU
        logger.info("Game stopped by player")
        self._emit(GameEvent.GAME_STOPPED)

    # ---- Turn resolution -------------------------------------------------
    def move(self, direction: Direction) -> MoveOutcome:
        """Resolve one step of the player in ``direction``.

        Outside a session this returns a BLOCKED outcome with reason
        ``"inactive"`` and changes nothing.
        """
        player = self._player
        if self._state is not SessionState.PLAYING or player is None or self._grid is None:
            logger.debug("move(%s) ignored in state %s", direction.label, self._state.value)
            return MoveOutcome(
                kind=OutcomeKind.BLOCKED,
                position=player.position if player else Point(1, 1),
                health=player.health if player else 0,
                direction=direction,
                reason=BLOCKED_INACTIVE,
            )

        dx, dy = direction.delta
        target = player.position.offset(dx, dy)
        if not self._grid.is_path(target):
            outcome = MoveOutcome(
                kind=OutcomeKind.BLOCKED,
                position=player.position,
                health=player.health,
                direction=direction,
                reason=BLOCKED_WALL,
            )
            logger.debug("Blocked move %s from %s", direction.label, player.position)
            self._last_outcome = outcome
            self._emit(GameEvent.MOVE_BLOCKED)
            return outcome

        cfg = self._config
        items = dict(self._items)
        inventory = player.inventory.copy()
        health = player.health
        new_state = self._state
        amount = 0

        item = items.get(target)
        if item is None:
            kind = OutcomeKind.MOVED
        elif item.is_collectible:
            inventory.add(item)
            del items[target]
            kind = OutcomeKind.PICKED_UP
        elif item is ItemKind.POTION:
            amount = max(0, min(cfg.potion_healing, player.max_health - health))
            health += amount
            del items[target]
            kind = OutcomeKind.HEALED
        elif item is ItemKind.MONSTER:
            # The monster is gone either way; it never attacks twice.
            del items[target]
            if cfg.sword_bypasses_combat and inventory.has(ItemKind.SWORD):
                kind = OutcomeKind.DEFEATED
            else:
                damage = cfg.monster_damage
                if inventory.has(ItemKind.SHIELD):
                    damage -= cfg.shield_protection
                amount = max(0, damage)
                health -= amount
                kind = OutcomeKind.ATTACKED
        elif inventory.has(ItemKind.KEY):
            kind = OutcomeKind.WON
            new_state = SessionState.VICTORY
        else:
            kind = OutcomeKind.LOCKED

        outcome = MoveOutcome(
            kind=kind,
            position=target,
            health=max(0, health),
            direction=direction,
            item=item,
            amount=amount,
        )
        if kind is not OutcomeKind.WON and health <= 0:
            health = 0
            new_state = SessionState.DEFEAT
            outcome = MoveOutcome(
                kind=OutcomeKind.DIED,
                position=target,
                health=0,
                direction=direction,
                item=item,
                amount=amount,
                cause=outcome,
            )

        player.position = target
        player.health = health
        player.inventory = inventory
        self._items = items
        self._state = new_state
        self._last_outcome = outcome
        logger.debug("Move %s -> %s: %s (health=%d)", direction.label, target, outcome.kind.name, health)

        self._emit(GameEvent.PLAYER_MOVED)
        if new_state is SessionState.VICTORY:
            logger.info("Player escaped the maze at %s", target)
            self._emit(GameEvent.VICTORY)
        elif new_state is SessionState.DEFEAT:
            logger.info("Player died at %s", target)
            self._emit(GameEvent.DEFEAT)
        return outcome
