"""Player movement: grid steps resolved from input, animated smoothly between cells.

The logical position is authoritative and changes the moment a step starts.
The render position then eases towards it by a fixed fraction of the
remaining distance every tick, and snaps once it is closer than
``epsilon``. No new step starts while a step is being animated.

Three input policies are supported:

* ``EDGE`` – every press attempts one step immediately; presses that arrive
  while a step is animating are dropped.
* ``HELD`` – directions are held down; each idle tick the highest-priority
  held direction (up, down, left, right) is tried.
* ``QUEUED`` – the last pressed direction is remembered and taken as soon as
  it is open; the player keeps moving in the current direction until a wall
  stops it. Pressing the exact opposite direction reverses at once, even in
  the middle of a step.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Set, Tuple

from mataha.core.maze import DOWN, LEFT, NONE, RIGHT, UP, Direction, Maze, Position

logger = logging.getLogger(__name__)

HELD_PRIORITY = (UP, DOWN, LEFT, RIGHT)


class MotionPolicy(Enum):
    EDGE = "edge"
    HELD = "held"
    QUEUED = "queued"

    @classmethod
    def parse(cls, value: str) -> "MotionPolicy":
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown motion policy {value!r} (expected one of: {names})") from None


@dataclass(frozen=True)
class MotionEvent:
    """What happened during one controller tick or input call."""

    stepped: bool = False
    arrived: bool = False
    reversed: bool = False


def ticks_per_step(speed: float, epsilon: float) -> int:
    """Animating ticks needed to cover one cell and snap onto it.

    Runs the same float recurrence as the animation, so the count matches
    what the controller actually does rather than the closed-form
    ``ceil(log(epsilon) / log(1 - speed))``.
    """
    if not 0.0 < speed <= 1.0:
        raise ValueError(f"speed must be in (0, 1], got {speed}")
    if epsilon <= 0.0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    offset = 1.0
    ticks = 0
    while True:
        offset -= offset * speed
        ticks += 1
        if offset < epsilon:
            return ticks


class MotionController:
    def __init__(
        self,
        maze: Maze,
        policy: MotionPolicy = MotionPolicy.HELD,
        speed: float = 0.25,
        epsilon: float = 0.01,
        start: Position = Position(0, 0),
    ) -> None:
        if not 0.0 < speed <= 1.0:
            raise ValueError(f"speed must be in (0, 1], got {speed}")
        self._policy = policy
        self._speed = speed
        self._epsilon = epsilon
        self._held: Set[Direction] = set()
        self.reset(maze, start)

    def reset(self, maze: Maze, start: Position = Position(0, 0)) -> None:
        """Put the player idle on ``start`` in ``maze``, forgetting any input."""
        self._maze = maze
        self._position = start
        # render position minus logical position
        self._offset_x = 0.0
        self._offset_y = 0.0
        self._animating = False
        self._desired = NONE
        self._current = NONE
        self._held.clear()

    @property
    def policy(self) -> MotionPolicy:
        return self._policy

    @property
    def position(self) -> Position:
        return self._position

    @property
    def render_position(self) -> Tuple[float, float]:
        return (self._position.x + self._offset_x, self._position.y + self._offset_y)

    @property
    def animating(self) -> bool:
        return self._animating

    @property
    def current(self) -> Direction:
        return self._current

    @property
    def desired(self) -> Direction:
        return self._desired

    @property
    def held(self) -> FrozenSet[Direction]:
        return frozenset(self._held)

    @property
    def moving(self) -> bool:
        """True while the player intends to move (used for idle animations)."""
        if self._policy is MotionPolicy.QUEUED:
            return not (self._desired.is_none and self._current.is_none)
        return bool(self._held)

    def can_move(self, direction: Direction) -> bool:
        return self._maze.can_move(self._position, direction)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def press_step(self, direction: Direction) -> MotionEvent:
        if self._policy is not MotionPolicy.EDGE:
            return self.set_desired_direction(direction)
        if self._animating or direction.is_none or not self.can_move(direction):
            return MotionEvent()
        self._begin_step(direction)
        return MotionEvent(stepped=True)

    def set_desired_direction(self, direction: Direction) -> MotionEvent:
        if self._policy is MotionPolicy.EDGE:
            return self.press_step(direction)
        if direction.is_none:
            return MotionEvent()
        if self._policy is MotionPolicy.HELD:
            self._held.add(direction)
            return MotionEvent()

        self._desired = direction
        if self._animating and not self._current.is_none and direction == self._current.opposite():
            return self._reverse(direction)
        return MotionEvent()

    def release_direction(self, direction: Direction) -> None:
        if self._policy is MotionPolicy.HELD:
            self._held.discard(direction)
        elif self._policy is MotionPolicy.QUEUED and self._desired == direction:
            self._desired = NONE

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self) -> MotionEvent:
        """Advance one frame: animate the current step or start the next one."""
        if self._animating:
            return self._animate()

        direction = self._next_direction()
        if direction is None:
            return MotionEvent()
        self._begin_step(direction)
        return MotionEvent(stepped=True)

    def _animate(self) -> MotionEvent:
        self._offset_x -= self._offset_x * self._speed
        self._offset_y -= self._offset_y * self._speed
        remaining = math.hypot(self._offset_x, self._offset_y)
        if remaining >= self._epsilon:
            return MotionEvent()

        self._offset_x = 0.0
        self._offset_y = 0.0
        self._animating = False
        if self._policy is not MotionPolicy.QUEUED:
            self._current = NONE
        return MotionEvent(arrived=True)

    def _next_direction(self) -> Optional[Direction]:
        if self._policy is MotionPolicy.HELD:
            for direction in HELD_PRIORITY:
                if direction in self._held:
                    return direction if self.can_move(direction) else None
            return None

        if self._policy is MotionPolicy.QUEUED:
            if not self._desired.is_none and self.can_move(self._desired):
                self._current = self._desired
            if self._current.is_none:
                return None
            if self.can_move(self._current):
                return self._current
            self._current = NONE
        return None

    def _begin_step(self, direction: Direction) -> None:
        self._position = self._position.step(direction)
        self._offset_x -= direction.dx
        self._offset_y -= direction.dy
        self._current = direction
        self._animating = True
        logger.debug("Step %s -> %s", tuple(direction), tuple(self._position))

    def _reverse(self, direction: Direction) -> MotionEvent:
        if not self.can_move(direction):
            return MotionEvent()
        self._position = self._position.step(direction)
        self._offset_x -= direction.dx
        self._offset_y -= direction.dy
        self._current = direction
        logger.debug("Reversed towards %s", tuple(self._position))
        return MotionEvent(reversed=True)
