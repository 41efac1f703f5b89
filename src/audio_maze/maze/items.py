"""Item kinds that can occupy maze cells.

Stable string values double as inventory identifiers and narration names.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict

from .grid import Point


class ItemKind(Enum):
    KEY = "key"
    SWORD = "sword"
    SHIELD = "shield"
    POTION = "potion"
    MONSTER = "monster"
    EXIT = "exit"

    @property
    def is_collectible(self) -> bool:
        """Kinds kept in the inventory; potions and monsters are consumed on contact."""
        return self in (ItemKind.KEY, ItemKind.SWORD, ItemKind.SHIELD)

    @property
    def glyph(self) -> str:
        return {
            ItemKind.KEY: "k",
            ItemKind.SWORD: "/",
            ItemKind.SHIELD: "]",
            ItemKind.POTION: "!",
            ItemKind.MONSTER: "M",
            ItemKind.EXIT: ">",
        }[self]


ItemMap = Dict[Point, ItemKind]
