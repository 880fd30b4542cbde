"""Maze grid model and randomized depth-first maze generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional


class Direction(NamedTuple):
    """Unit movement vector on the grid (y grows downwards)."""

    dx: int
    dy: int

    def opposite(self) -> "Direction":
        return Direction(-self.dx, -self.dy)

    @property
    def is_none(self) -> bool:
        return self.dx == 0 and self.dy == 0

    @classmethod
    def from_vector(cls, dx: int, dy: int) -> "Direction":
        """Validate (dx, dy) as a unit vector or the zero vector."""
        if (dx, dy) not in _VALID_VECTORS:
            raise ValueError(f"not a unit direction: ({dx}, {dy})")
        return cls(int(dx), int(dy))


UP = Direction(0, -1)
RIGHT = Direction(1, 0)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
NONE = Direction(0, 0)

# Neighbour enumeration order used by generation and search.
DIRECTIONS = (UP, RIGHT, DOWN, LEFT)

_VALID_VECTORS = {tuple(d) for d in DIRECTIONS} | {(0, 0)}

_WALL_NAMES = {UP: "top", RIGHT: "right", DOWN: "bottom", LEFT: "left"}


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass
class Cell:
    """One maze cell: True on a side means there is a wall."""

    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True
    visited: bool = False

    def has_wall(self, direction: Direction) -> bool:
        name = _WALL_NAMES.get(direction)
        if name is None:
            return True
        return getattr(self, name)

    def set_wall(self, direction: Direction, present: bool) -> None:
        setattr(self, _WALL_NAMES[direction], present)


class Maze:
    """Square grid of cells indexed as ``cells[y][x]``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"maze size must be at least 1, got {size}")
        self._size = size
        self.cells: List[List[Cell]] = [[Cell() for _ in range(size)] for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self._size and 0 <= pos.y < self._size

    def cell(self, pos: Position) -> Optional[Cell]:
        """Return the cell at ``pos`` or None when it lies outside the grid."""
        if not self.in_bounds(pos):
            return None
        return self.cells[pos.y][pos.x]

    def can_move(self, pos: Position, direction: Direction) -> bool:
        """True iff the wall on ``direction`` is open and the target is on the grid."""
        cell = self.cell(pos)
        if cell is None or direction.is_none:
            return False
        if cell.has_wall(direction):
            return False
        return self.in_bounds(pos.step(direction))

    def open_neighbors(self, pos: Position) -> List[Position]:
        return [pos.step(d) for d in DIRECTIONS if self.can_move(pos, d)]

    def carve(self, pos: Position, direction: Direction) -> None:
        """Remove the wall between ``pos`` and its neighbour on both sides."""
        target = pos.step(direction)
        if not (self.in_bounds(pos) and self.in_bounds(target)):
            raise ValueError(f"cannot carve from {pos} towards {direction}: outside the grid")
        self.cells[pos.y][pos.x].set_wall(direction, False)
        self.cells[target.y][target.x].set_wall(direction.opposite(), False)

    def positions(self) -> Iterator[Position]:
        for y in range(self._size):
            for x in range(self._size):
                yield Position(x, y)

    def passage_count(self) -> int:
        """Number of carved openings between adjacent cells, each counted once."""
        count = 0
        for pos in self.positions():
            cell = self.cells[pos.y][pos.x]
            if pos.x < self._size - 1 and not cell.right:
                count += 1
            if pos.y < self._size - 1 and not cell.bottom:
                count += 1
        return count


def _unvisited_neighbors(maze: Maze, pos: Position) -> List[Direction]:
    found = []
    for direction in DIRECTIONS:
        cell = maze.cell(pos.step(direction))
        if cell is not None and not cell.visited:
            found.append(direction)
    return found


def generate_maze(size: int, rng: Optional[random.Random] = None) -> Maze:
    """Build a perfect maze with the iterative recursive-backtracker.

    Carving starts at (0, 0). An explicit stack replaces recursion so the
    largest boards stay well clear of the interpreter's recursion limit.
    Only the neighbour choice draws from ``rng``; a seeded generator gives
    the same maze every time.
    """
    rng = rng or random.Random()
    maze = Maze(size)

    start = Position(0, 0)
    maze.cells[start.y][start.x].visited = True
    stack = [start]

    while stack:
        current = stack[-1]
        candidates = _unvisited_neighbors(maze, current)
        if candidates:
            direction = rng.choice(candidates)
            nxt = current.step(direction)
            maze.carve(current, direction)
            maze.cells[nxt.y][nxt.x].visited = True
            stack.append(nxt)
        else:
            stack.pop()

    return maze
