from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..rng import RandomSource, make_rng, shuffled
from .grid import Grid
from .items import ItemKind, ItemMap

logger = logging.getLogger(__name__)


class ItemPlacer:
    """Scatter the fixed item set over a generated grid.

    Candidates are every PATH cell except start and goal, taken in row-major
    order and uniformly permuted with ``rng``. ``ITEM_SEQUENCE`` is dealt onto
    the permuted list front to back; kinds left over when the maze is too small
    are dropped. The goal always receives the exit.
    """

    ITEM_SEQUENCE: Tuple[ItemKind, ...] = (
        ItemKind.KEY,
        ItemKind.SWORD,
        ItemKind.SHIELD,
        ItemKind.POTION,
        ItemKind.POTION,
        ItemKind.MONSTER,
        ItemKind.MONSTER,
        ItemKind.MONSTER,
    )

    def place(self, grid: Grid, rng: Optional[RandomSource] = None) -> ItemMap:
        rng = rng if rng is not None else make_rng()
        excluded = {grid.start, grid.goal}
        candidates = [p for p in grid.path_cells() if p not in excluded]
        candidates = shuffled(candidates, rng)

        items: ItemMap = {}
        for kind, cell in zip(self.ITEM_SEQUENCE, candidates):
            items[cell] = kind
        if len(candidates) < len(self.ITEM_SEQUENCE):
            dropped = [k.value for k in self.ITEM_SEQUENCE[len(candidates):]]
            logger.info("Only %d free cells; not placing %s", len(candidates), ", ".join(dropped))

        items[grid.goal] = ItemKind.EXIT
        logger.debug("Placed items: %s", {f"{p.x},{p.y}": k.value for p, k in items.items()})
        return items


def place_items(grid: Grid, rng: Optional[RandomSource] = None) -> ItemMap:
    """Convenience wrapper around ``ItemPlacer().place``."""
    return ItemPlacer().place(grid, rng)
