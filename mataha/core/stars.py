"""Star placement along the solution route."""

from __future__ import annotations

import random
from typing import List, MutableSequence, Sequence, TypeVar

from mataha.core.maze import Position

TOTAL_STARS = 3

T = TypeVar("T")


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """Shuffle ``items`` in place, walking from the last index down to 1."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def place_stars(
    solution_path: Sequence[Position],
    rng: random.Random,
    total: int = TOTAL_STARS,
) -> List[Position]:
    """Pick up to ``total`` distinct interior cells of ``solution_path``.

    The start and exit cells are never chosen. A path of two cells or fewer
    (including an empty one) yields no stars.
    """
    if len(solution_path) <= 2 or total <= 0:
        return []
    interior = list(solution_path[1:-1])
    fisher_yates_shuffle(interior, rng)
    return interior[: min(total, len(interior))]
