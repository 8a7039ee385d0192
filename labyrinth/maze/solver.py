"""A* shortest-path search over a maze grid, plus a breadth-first reference."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from ..base import AbstractMazeSolver, CoordinatePath
from ..grid import Coordinate, CoordinateLike, Grid

logger = logging.getLogger(__name__)


def manhattan(a: Coordinate, b: Coordinate) -> int:
    """Admissible, consistent heuristic for 4-connected unit-cost grids."""

    return abs(a.x - b.x) + abs(a.y - b.y)


class AStarSolver(AbstractMazeSolver):
    """Find a minimum-length 4-connected path from entrance to exit.

    The frontier is a binary heap of ``(f, sequence, g, cell)`` entries. The
    insertion sequence breaks ties between equal ``f`` values in FIFO order,
    and neighbours are always expanded left, right, up, down, so the returned
    path is reproducible for a given grid. A cell may be pushed several times
    as its ``g`` improves; entries whose ``g`` no longer matches the best known
    value are skipped when popped.
    """

    def __init__(self) -> None:
        self.expanded = 0

    def find_path(self, grid: Grid) -> Optional[CoordinatePath]:
        start = grid.entrance
        goal = grid.exit
        sequence = itertools.count()

        frontier: List[Tuple[int, int, int, Coordinate]] = []
        heapq.heappush(frontier, (manhattan(start, goal), next(sequence), 0, start))
        g_score: Dict[Coordinate, int] = {start: 0}
        came_from: Dict[Coordinate, Coordinate] = {}
        self.expanded = 0

        while frontier:
            _, _, g, current = heapq.heappop(frontier)
            if g > g_score[current]:
                continue
            if current == goal:
                path = _reconstruct(came_from, current)
                logger.debug(
                    "A* reached %s in %d moves after expanding %d cells",
                    goal,
                    len(path) - 1,
                    self.expanded,
                )
                return path

            self.expanded += 1
            tentative = g + 1
            for neighbor in current.neighbors():
                if not grid.is_valid_move(neighbor):
                    continue
                best = g_score.get(neighbor)
                if best is None or tentative < best:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f = tentative + manhattan(neighbor, goal)
                    heapq.heappush(frontier, (f, next(sequence), tentative, neighbor))

        logger.debug("A* exhausted the frontier after expanding %d cells; no path", self.expanded)
        return None


def solve(grid: Grid) -> Optional[CoordinatePath]:
    """Solve ``grid`` with A*; ``None`` means the exit is unreachable."""

    return AStarSolver().find_path(grid)


def bfs_path(
    grid: Grid,
    start: Optional[CoordinateLike] = None,
    goal: Optional[CoordinateLike] = None,
) -> Optional[CoordinatePath]:
    """Breadth-first shortest path, defaulting to the grid's own endpoints."""

    start = grid.entrance if start is None else Coordinate.of(start)
    goal = grid.exit if goal is None else Coordinate.of(goal)
    if not grid.is_valid_move(start):
        return None

    queue: Deque[Coordinate] = deque([start])
    parents: Dict[Coordinate, Optional[Coordinate]] = {start: None}
    while queue:
        current = queue.popleft()
        if current == goal:
            break
        for neighbor in current.neighbors():
            if neighbor not in parents and grid.is_valid_move(neighbor):
                parents[neighbor] = current
                queue.append(neighbor)

    if goal not in parents:
        return None
    node: Optional[Coordinate] = goal
    result: CoordinatePath = []
    while node is not None:
        result.append(node)
        node = parents[node]
    result.reverse()
    return result


def _reconstruct(came_from: Dict[Coordinate, Coordinate], current: Coordinate) -> CoordinatePath:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


__all__ = ["AStarSolver", "solve", "bfs_path", "manhattan"]
