"""Tests for mataha.core.maze – grid model and maze generation."""

from __future__ import annotations

import random
from collections import deque

import pytest

from mataha.core.maze import (
    DOWN,
    LEFT,
    NONE,
    RIGHT,
    UP,
    Cell,
    Direction,
    Maze,
    Position,
    generate_maze,
)


def _open_edges(maze: Maze) -> set[frozenset[Position]]:
    edges = set()
    for pos in maze.positions():
        for neighbor in maze.open_neighbors(pos):
            edges.add(frozenset((pos, neighbor)))
    return edges


def _reachable(maze: Maze, start: Position) -> set[Position]:
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in maze.open_neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


# ---------------------------------------------------------------------------
# Direction / Position
# ---------------------------------------------------------------------------

class TestDirection:
    def test_opposites(self):
        assert UP.opposite() == DOWN
        assert LEFT.opposite() == RIGHT
        assert NONE.opposite() == NONE

    def test_from_vector_valid(self):
        assert Direction.from_vector(1, 0) == RIGHT
        assert Direction.from_vector(0, -1) == UP
        assert Direction.from_vector(0, 0).is_none

    @pytest.mark.parametrize("vector", [(1, 1), (2, 0), (0, -3), (-1, 1)])
    def test_from_vector_rejects_non_unit(self, vector):
        with pytest.raises(ValueError):
            Direction.from_vector(*vector)

    def test_position_step(self):
        assert Position(2, 3).step(RIGHT) == Position(3, 3)
        assert Position(2, 3).step(UP) == Position(2, 2)


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------

class TestCell:
    def test_starts_fully_walled(self):
        cell = Cell()
        assert cell.top and cell.right and cell.bottom and cell.left
        assert cell.visited is False

    def test_has_wall_by_direction(self):
        cell = Cell(right=False)
        assert cell.has_wall(RIGHT) is False
        assert cell.has_wall(LEFT) is True

    def test_no_direction_counts_as_wall(self):
        assert Cell(top=False, right=False, bottom=False, left=False).has_wall(NONE) is True


# ---------------------------------------------------------------------------
# Maze
# ---------------------------------------------------------------------------

class TestMaze:
    def test_rejects_empty_size(self):
        with pytest.raises(ValueError):
            Maze(0)

    def test_cell_outside_grid_is_none(self):
        maze = Maze(3)
        assert maze.cell(Position(-1, 0)) is None
        assert maze.cell(Position(0, 3)) is None
        assert maze.cell(Position(2, 2)) is maze.cells[2][2]

    def test_fresh_maze_is_closed(self):
        maze = Maze(3)
        assert maze.passage_count() == 0
        assert not maze.can_move(Position(1, 1), RIGHT)

    def test_carve_opens_both_sides(self):
        maze = Maze(3)
        maze.carve(Position(1, 1), DOWN)
        assert maze.cells[1][1].bottom is False
        assert maze.cells[2][1].top is False
        assert maze.can_move(Position(1, 1), DOWN)
        assert maze.can_move(Position(1, 2), UP)
        assert maze.passage_count() == 1

    def test_carve_outside_grid_raises(self):
        maze = Maze(3)
        with pytest.raises(ValueError):
            maze.carve(Position(0, 0), LEFT)

    def test_can_move_needs_target_in_bounds(self):
        maze = Maze(3)
        maze.cells[0][0].left = False
        assert maze.can_move(Position(0, 0), LEFT) is False

    def test_can_move_from_outside_grid_is_blocked(self):
        maze = Maze(3)
        assert maze.can_move(Position(-1, 0), RIGHT) is False
        assert maze.can_move(Position(5, 5), LEFT) is False

    def test_can_move_without_direction_is_blocked(self):
        maze = Maze(3)
        maze.carve(Position(0, 0), RIGHT)
        assert maze.can_move(Position(0, 0), NONE) is False


# ---------------------------------------------------------------------------
# generate_maze
# ---------------------------------------------------------------------------

class TestGenerateMaze:
    @pytest.mark.parametrize("size", [1, 2, 5, 10, 15, 25])
    def test_spanning_tree_edge_count(self, size):
        maze = generate_maze(size, random.Random(size))
        assert maze.passage_count() == size * size - 1
        assert len(_open_edges(maze)) == size * size - 1

    @pytest.mark.parametrize("seed", range(5))
    def test_fully_connected(self, seed):
        maze = generate_maze(10, random.Random(seed))
        assert len(_reachable(maze, Position(0, 0))) == 100

    @pytest.mark.parametrize("seed", range(5))
    def test_walls_consistent_between_neighbors(self, seed):
        maze = generate_maze(8, random.Random(seed))
        for pos in maze.positions():
            cell = maze.cell(pos)
            if pos.x < maze.size - 1:
                assert cell.right == maze.cell(pos.step(RIGHT)).left
            if pos.y < maze.size - 1:
                assert cell.bottom == maze.cell(pos.step(DOWN)).top

    def test_outer_border_stays_closed(self):
        maze = generate_maze(10, random.Random(3))
        for i in range(10):
            assert maze.cells[0][i].top
            assert maze.cells[9][i].bottom
            assert maze.cells[i][0].left
            assert maze.cells[i][9].right

    def test_every_cell_visited(self):
        maze = generate_maze(6, random.Random(1))
        assert all(maze.cell(p).visited for p in maze.positions())

    def test_same_seed_same_maze(self):
        a = generate_maze(10, random.Random(42))
        b = generate_maze(10, random.Random(42))
        assert a.cells == b.cells

    def test_different_seeds_differ(self):
        a = generate_maze(10, random.Random(1))
        b = generate_maze(10, random.Random(2))
        assert a.cells != b.cells

    def test_default_rng(self):
        maze = generate_maze(4)
        assert maze.passage_count() == 15

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            generate_maze(0, random.Random(0))
