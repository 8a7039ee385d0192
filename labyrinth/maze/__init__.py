"""Maze generation, solving and path evaluation package."""

__all__ = [
    "MazeGenerator",
    "AStarSolver",
    "MazeEvaluator",
    "MazeEvaluationResult",
    "bfs_path",
    "round_up_to_odd",
    "solve",
]

from .generator import MazeGenerator, round_up_to_odd
from .solver import AStarSolver, bfs_path, solve
from .evaluator import MazeEvaluator, MazeEvaluationResult
