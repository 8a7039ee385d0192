"""Abstract interfaces for maze generation and solving."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from .grid import Coordinate, Grid

PathLike = Union[str, Path]
CoordinatePath = List[Coordinate]


class AbstractMazeGenerator(ABC):
    """Base class for builders that emit validated grids."""

    @abstractmethod
    def generate(self) -> Grid:
        """Create a single randomized maze."""

    def generate_many(self, count: int) -> List[Grid]:
        """Generate a batch of independent mazes."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.generate() for _ in range(count)]


class AbstractMazeSolver(ABC):
    """Base class for solvers that connect a grid's entrance to its exit."""

    @abstractmethod
    def find_path(self, grid: Grid) -> Optional[CoordinatePath]:
        """Return the path from entrance to exit, or ``None`` if unreachable."""

    def path_length(self, grid: Grid) -> Optional[int]:
        """Number of moves on the solved path, or ``None`` when unsolvable."""

        path = self.find_path(grid)
        if path is None:
            return None
        return len(path) - 1


__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeSolver",
    "CoordinatePath",
    "PathLike",
]
