from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from mataha.core.config import GameSettings
from mataha.core.controls import KeyState
from mataha.core.feedback import AudioFeedback, SilentFeedback
from mataha.core.levels import TierTable
from mataha.core.maze import Direction, Maze, Position, generate_maze
from mataha.core.motion import MotionController, MotionEvent
from mataha.core.pathfinding import shortest_path
from mataha.core.progress import ProgressTracker
from mataha.core.stars import place_stars

logger = logging.getLogger(__name__)

START_POSITION = Position(0, 0)
DEFAULT_CELL_SIZE = 20.0


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    CELEBRATING = "celebrating"
    WON = "celebrating"


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame. Built fresh on every call."""

    level: int
    maze: Maze
    player: Position
    render_x: float
    render_y: float
    exit: Position
    stars: Tuple[Position, ...]
    collected: int
    total_stars: int
    state: GameState
    frame_count: int
    animating: bool
    moving: bool
    cell_size: float
    board_size: float


class LevelSession:
    """Owns one game: the current level's maze, player, exit and stars.

    The session is driven by ``tick`` once per frame. Input arrives through
    the ``set_desired_direction``/``press_step``/``handle_key_*`` entry
    points and is ignored outside the playing state. Winning a level sets a
    fires-at time for the next one; ``tick`` starts it once the clock passes
    that time. Starting any level clears the pending advance, so an advance
    meant for an earlier level can never fire.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        tiers: Optional[TierTable] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        audio: Optional[AudioFeedback] = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._tiers = tiers or TierTable.default()
        self._rng = rng or random.Random(self._settings.seed)
        self._clock = clock
        self._audio: AudioFeedback = audio or SilentFeedback()
        self._keys = KeyState()

        self._state = GameState.START
        self._level = 1
        self._frame_count = 0
        self._advance_at: Optional[float] = None
        self._viewport: Optional[Tuple[float, float]] = None
        self._cell_size = DEFAULT_CELL_SIZE
        self._board_size = 0.0

        self._maze: Maze
        self._exit: Position
        self._solution: List[Position] = []
        self._progress: ProgressTracker
        # placed on the real maze by _build_level
        self._motion = MotionController(
            Maze(1),
            policy=self._settings.motion_policy,
            speed=self._settings.animation_speed,
            epsilon=self._settings.snap_epsilon,
            start=START_POSITION,
        )
        self._build_level()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def settings(self) -> GameSettings:
        """Settings the session was built with."""
        return self._settings

    @property
    def level(self) -> int:
        """Current level number (1-based)."""
        return self._level

    @property
    def state(self) -> GameState:
        """Lifecycle state: start, playing or celebrating."""
        return self._state

    @property
    def maze(self) -> Maze:
        """Maze of the current level."""
        return self._maze

    @property
    def exit(self) -> Position:
        """Exit cell, always in the rightmost column."""
        return self._exit

    @property
    def solution(self) -> List[Position]:
        """Shortest path from the start cell to the exit for this level."""
        return list(self._solution)

    @property
    def stars(self) -> List[Position]:
        """Stars still waiting to be collected."""
        return self._progress.stars

    @property
    def collected(self) -> int:
        """Stars collected on this level."""
        return self._progress.collected

    @property
    def player(self) -> Position:
        """Logical grid position of the player."""
        return self.motion.position

    @property
    def motion(self) -> MotionController:
        """Controller moving the player through the current maze."""
        return self._motion

    @property
    def progress(self) -> ProgressTracker:
        """Star and exit tracker for this level."""
        return self._progress

    @property
    def advance_at(self) -> Optional[float]:
        """Clock time at which the next level starts, or None."""
        return self._advance_at

    @property
    def frame_count(self) -> int:
        """Number of ticks run since the session was created."""
        return self._frame_count

    @property
    def cell_size(self) -> float:
        """Side of one cell in pixels."""
        return self._cell_size

    @property
    def board_size(self) -> float:
        """Side of the whole board in pixels."""
        return self._board_size

    def snapshot(self) -> Snapshot:
        render_x, render_y = self.motion.render_position
        return Snapshot(
            level=self._level,
            maze=self._maze,
            player=self.motion.position,
            render_x=render_x,
            render_y=render_y,
            exit=self._exit,
            stars=tuple(self._progress.stars),
            collected=self._progress.collected,
            total_stars=self._progress.total_stars,
            state=self._state,
            frame_count=self._frame_count,
            animating=self.motion.animating,
            moving=self.motion.moving,
            cell_size=self._cell_size,
            board_size=self._board_size,
        )

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def start_level(self, level: int) -> None:
        """Replace every piece of level state with a fresh level ``level``."""
        if level < 1:
            raise ValueError(f"levels start at 1, got {level}")
        self._level = level
        self._build_level()
        self._state = GameState.PLAYING
        logger.info(
            "Level %d started: %dx%d maze, exit at %s, %d stars",
            level,
            self._maze.size,
            self._maze.size,
            tuple(self._exit),
            len(self._progress.stars),
        )

    def resize(self, width: float, height: float) -> None:
        """Fit the board into a ``width`` x ``height`` viewport."""
        self._viewport = (float(width), float(height))
        if self._settings.regenerate_on_resize and self._state is not GameState.CELEBRATING:
            if self._state is GameState.PLAYING:
                self.start_level(self._level)
            else:
                self._build_level()
            return
        self._update_scale()

    def _build_level(self) -> None:
        size = self._tiers.maze_size_for(self._level)
        self._exit = Position(size - 1, self._rng.randrange(size))
        self._maze = generate_maze(size, self._rng)

        self._solution = shortest_path(self._maze, START_POSITION, self._exit)
        if not self._solution:
            logger.warning("Level %d has no route to the exit; placing no stars", self._level)
        stars = place_stars(self._solution, self._rng, self._settings.total_stars)
        self._progress = ProgressTracker(stars, self._exit, self._settings.total_stars)

        self._motion.reset(self._maze, START_POSITION)
        self._keys.clear()
        self._advance_at = None
        self._update_scale()

    def _update_scale(self) -> None:
        size = self._maze.size
        if self._viewport is None:
            self._cell_size = DEFAULT_CELL_SIZE
            self._board_size = DEFAULT_CELL_SIZE * size
            return
        width, height = self._viewport
        board = max(
            0.0,
            min(width * self._settings.viewport_width_ratio, height * self._settings.viewport_height_ratio),
        )
        self._board_size = board
        self._cell_size = board / size

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_desired_direction(self, dx: int, dy: int) -> bool:
        if self._state is not GameState.PLAYING:
            return False
        return self._handle_motion(self.motion.set_desired_direction(Direction.from_vector(dx, dy)))

    def press_step(self, dx: int, dy: int) -> bool:
        if self._state is not GameState.PLAYING:
            return False
        return self._handle_motion(self.motion.press_step(Direction.from_vector(dx, dy)))

    def release_direction(self, dx: int, dy: int) -> None:
        self.motion.release_direction(Direction.from_vector(dx, dy))

    def handle_key_down(self, key: str) -> bool:
        """Feed a key press; returns True when the key is bound to a direction."""
        if self._state is not GameState.PLAYING:
            return False
        direction = self._keys.press(key)
        if direction is None:
            return False
        self._handle_motion(self.motion.set_desired_direction(direction))
        return True

    def handle_key_up(self, key: str) -> bool:
        direction, released = self._keys.release(key)
        if direction is None:
            return False
        if released:
            self.motion.release_direction(direction)
        return True

    def _handle_motion(self, event: MotionEvent) -> bool:
        if event.stepped or event.reversed:
            self._audio.on_move()
        return event.stepped or event.reversed

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def tick(self, now: Optional[float] = None) -> None:
        """Run one frame of game logic."""
        if now is None:
            now = self._clock()
        self._frame_count += 1

        if self._state is GameState.CELEBRATING:
            if self._advance_at is not None and now >= self._advance_at:
                self.start_level(self._level + 1)
            return
        if self._state is not GameState.PLAYING:
            return

        event = self.motion.update()
        if event.stepped:
            self._audio.on_move()
        if event.arrived:
            self._check_progress(now)

    def _check_progress(self, now: float) -> None:
        result = self._progress.check(self.motion.position)
        if result.star_collected:
            self._audio.on_star()
        if result.all_collected:
            logger.info("All %d stars collected on level %d", self._progress.total_stars, self._level)
        if result.reached_exit:
            self._state = GameState.CELEBRATING
            self._advance_at = now + self._settings.advance_delay
            self._audio.on_win()
            logger.info("Level %d complete with %d/%d stars", self._level, self.collected, self._progress.total_stars)
