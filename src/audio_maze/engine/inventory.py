from __future__ import annotations

from typing import FrozenSet, Iterable, List, Tuple

from ..maze.items import ItemKind


class Inventory:
    """Set of held collectibles (key, sword, shield) in pickup order.

    - Each kind is held at most once; adding a held kind is a no-op
    - Potions, monsters and the exit are rejected with ValueError
    - Thread-safety is out-of-scope; the engine is single-threaded
    """

    def __init__(self, items: Iterable[ItemKind] = ()) -> None:
        self._items: List[ItemKind] = []
        for kind in items:
            self.add(kind)

    def add(self, kind: ItemKind) -> bool:
        """Add ``kind``; return False when it was already held."""
        if not kind.is_collectible:
            raise ValueError(f"Item '{kind.value}' cannot be carried")
        if kind in self._items:
            return False
        self._items.append(kind)
        return True

    def has(self, kind: ItemKind) -> bool:
        return kind in self._items

    def copy(self) -> "Inventory":
        return Inventory(self._items)

    def as_tuple(self) -> Tuple[ItemKind, ...]:
        return tuple(self._items)

    def as_frozenset(self) -> FrozenSet[ItemKind]:
        return frozenset(self._items)

    def __contains__(self, kind: object) -> bool:
        return kind in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Inventory({[k.value for k in self._items]})"
