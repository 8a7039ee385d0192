"""Check candidate paths against a maze grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..grid import Coordinate, CoordinateLike, Grid
from .solver import bfs_path


@dataclass
class MazeEvaluationResult:
    starts_at_entrance: bool
    touches_goal: bool
    connected: bool
    stray_in_walls: bool
    length: int
    optimal_length: Optional[int]
    message: str

    @property
    def is_valid_solution(self) -> bool:
        return (
            self.starts_at_entrance
            and self.touches_goal
            and self.connected
            and not self.stray_in_walls
        )

    @property
    def is_optimal(self) -> bool:
        return self.is_valid_solution and self.length == self.optimal_length

    def to_dict(self) -> dict:
        return {
            "starts_at_entrance": self.starts_at_entrance,
            "touches_goal": self.touches_goal,
            "connected": self.connected,
            "stray_in_walls": self.stray_in_walls,
            "length": self.length,
            "optimal_length": self.optimal_length,
            "is_valid_solution": self.is_valid_solution,
            "is_optimal": self.is_optimal,
            "message": self.message,
        }


class MazeEvaluator:
    """Evaluate a coordinate path by walking it across the grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._optimal: Optional[int] = None
        self._optimal_known = False

    @property
    def optimal_length(self) -> Optional[int]:
        """Breadth-first distance between entrance and exit, cached."""

        if not self._optimal_known:
            reference = bfs_path(self.grid)
            self._optimal = None if reference is None else len(reference) - 1
            self._optimal_known = True
        return self._optimal

    def evaluate(self, candidate: Iterable[CoordinateLike]) -> MazeEvaluationResult:
        path: List[Coordinate] = [Coordinate.of(step) for step in candidate]
        optimal = self.optimal_length
        if not path:
            return MazeEvaluationResult(
                starts_at_entrance=False,
                touches_goal=False,
                connected=False,
                stray_in_walls=False,
                length=0,
                optimal_length=optimal,
                message="No path provided.",
            )

        starts_at_entrance = path[0] == self.grid.entrance
        touches_goal = path[-1] == self.grid.exit
        stray_in_walls = any(not self.grid.is_valid_move(step) for step in path)
        connected = all(prev.manhattan(step) == 1 for prev, step in zip(path, path[1:]))
        length = len(path) - 1

        if stray_in_walls:
            message = "Path crosses walls or leaves the grid."
        elif not starts_at_entrance:
            message = "Path does not start at the entrance."
        elif not touches_goal:
            message = "Path does not reach the exit."
        elif not connected:
            message = "Path is not continuous from entrance to exit."
        elif length != optimal:
            message = f"Path connects entrance to exit in {length} moves; shortest is {optimal}."
        else:
            message = "Path is a shortest route from entrance to exit."

        return MazeEvaluationResult(
            starts_at_entrance=starts_at_entrance,
            touches_goal=touches_goal,
            connected=connected,
            stray_in_walls=stray_in_walls,
            length=length,
            optimal_length=optimal,
            message=message,
        )


__all__ = ["MazeEvaluator", "MazeEvaluationResult"]
