from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List

from mataha.core.maze import Maze, Position

logger = logging.getLogger(__name__)


def shortest_path(maze: Maze, start: Position, end: Position) -> List[Position]:
    """Breadth-first search from ``start`` to ``end`` through open walls.

    Returns the cells from start to end inclusive, or an empty list when
    ``end`` cannot be reached.
    """
    if not (maze.in_bounds(start) and maze.in_bounds(end)):
        logger.warning("Path endpoints outside a %dx%d maze: %s -> %s", maze.size, maze.size, start, end)
        return []

    queue = deque([start])
    visited = {start}
    parents: Dict[Position, Position] = {}

    while queue:
        current = queue.popleft()
        if current == end:
            path = [current]
            while current in parents:
                current = parents[current]
                path.append(current)
            path.reverse()
            return path

        for neighbor in maze.open_neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                parents[neighbor] = current
                queue.append(neighbor)

    logger.warning("No path from %s to %s", start, end)
    return []
