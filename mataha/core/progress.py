from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from mataha.core.maze import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressEvent:
    star_collected: bool = False
    all_collected: bool = False
    reached_exit: bool = False


class ProgressTracker:
    """Star pickups and exit arrival for one level.

    Built fresh for every level, so nothing carries over between levels.
    """

    def __init__(self, stars: Sequence[Position], exit: Position, total_stars: int) -> None:
        self._stars: List[Position] = list(stars)
        self._exit = exit
        self._total_stars = total_stars
        self._collected = 0
        self._checks = 0

    @property
    def stars(self) -> List[Position]:
        """Stars still on the board, in placement order."""
        return list(self._stars)

    @property
    def collected(self) -> int:
        return self._collected

    @property
    def total_stars(self) -> int:
        return self._total_stars

    @property
    def all_collected(self) -> bool:
        return self._collected >= self._total_stars

    @property
    def checks(self) -> int:
        """Number of times ``check`` has run."""
        return self._checks

    def check(self, position: Position) -> ProgressEvent:
        """Collect a star at ``position`` if one is there and report exit arrival."""
        self._checks += 1
        star_collected = False
        all_collected = False
        if position in self._stars:
            self._stars.remove(position)
            self._collected += 1
            star_collected = True
            all_collected = self._collected == self._total_stars
            logger.info("Star collected at %s (%d/%d)", tuple(position), self._collected, self._total_stars)

        return ProgressEvent(
            star_collected=star_collected,
            all_collected=all_collected,
            reached_exit=position == self._exit,
        )
