"""Perfect-maze generation and A* shortest-path toolkit."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeSolver",
    "Coordinate",
    "Grid",
    "PASSABLE",
    "WALL",
    "MazeError",
    "ValidationError",
    "InvalidBoundaryError",
    "MazeFormatError",
    "GenerationError",
    "MazeGenerator",
    "AStarSolver",
    "MazeEvaluator",
    "MazeEvaluationResult",
    "bfs_path",
    "solve",
    "parse_maze",
    "load_maze",
    "dump_maze",
]

from .errors import (
    MazeError,
    ValidationError,
    InvalidBoundaryError,
    MazeFormatError,
    GenerationError,
)
from .grid import PASSABLE, WALL, Coordinate, Grid
from .base import AbstractMazeGenerator, AbstractMazeSolver
from .maze import (
    MazeGenerator,
    AStarSolver,
    MazeEvaluator,
    MazeEvaluationResult,
    bfs_path,
    solve,
)
from .loader import parse_maze, load_maze, dump_maze
