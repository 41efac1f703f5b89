from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..maze.grid import Point
from ..maze.items import ItemKind
from .state import Direction

BLOCKED_WALL = "wall"
BLOCKED_INACTIVE = "inactive"


class OutcomeKind(Enum):
    BLOCKED = auto()
    MOVED = auto()
    PICKED_UP = auto()
    HEALED = auto()
    DEFEATED = auto()
    ATTACKED = auto()
    LOCKED = auto()
    WON = auto()
    DIED = auto()


@dataclass(frozen=True)
class MoveOutcome:
    """Result of resolving one move, self-contained for narration.

    Attributes:
        kind: What happened.
        position: Player position after the move.
        health: Player health after the move.
        direction: Requested direction.
        item: Item involved (picked up, drunk, fought, exit).
        amount: Health actually restored (HEALED) or damage taken (ATTACKED, DIED).
        cause: For DIED, the encounter that killed the player.
        reason: For BLOCKED, ``"wall"`` or ``"inactive"`` (no session in play).
    """

    kind: OutcomeKind
    position: Point
    health: int
    direction: Optional[Direction] = None
    item: Optional[ItemKind] = None
    amount: int = 0
    cause: Optional["MoveOutcome"] = None
    reason: Optional[str] = None

    @property
    def moved(self) -> bool:
        return self.kind is not OutcomeKind.BLOCKED

    @property
    def ends_session(self) -> bool:
        return self.kind in (OutcomeKind.WON, OutcomeKind.DIED)
