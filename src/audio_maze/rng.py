from __future__ import annotations

import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Minimal randomness API used by generation and placement.

    ``random.Random`` satisfies it; tests may pass any object exposing
    ``randrange``.
    """

    def randrange(self, stop: int) -> int:  # pragma: no cover - type contract
        ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a dedicated ``random.Random`` so no module touches the global RNG."""
    return random.Random(seed)


def shuffled(items: Sequence[T], rng: RandomSource) -> List[T]:
    """Return a uniformly permuted copy of ``items`` (Fisher-Yates).

    Consumes exactly ``len(items) - 1`` draws from ``rng``, walking the list
    from the end, so a seeded source always yields the same permutation.
    """
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out
