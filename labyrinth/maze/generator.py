"""Randomized depth-first maze generator with boundary entrance/exit placement."""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from ..base import AbstractMazeGenerator
from ..errors import GenerationError
from ..grid import NEIGHBOR_OFFSETS, PASSABLE, WALL, Coordinate, Grid

logger = logging.getLogger(__name__)

SIDES: Tuple[str, ...] = ("top", "right", "bottom", "left")
DEFAULT_MAX_ATTEMPTS = 100

# Carving steps are two cells long so walls stay between carved cells.
_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def round_up_to_odd(value: int) -> int:
    """Return ``value`` if odd, otherwise the next odd integer."""

    return value if value % 2 == 1 else value + 1


class MazeGenerator(AbstractMazeGenerator):
    """Generate perfect mazes by recursive backtracking on the odd lattice.

    Every cell whose coordinates are both odd ends up carved and connected to
    the others by exactly one route, so the interior is a spanning tree. The
    entrance and exit are then opened on two distinct sides of the outer wall.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if value < 3:
                raise ValueError(f"{name} must be at least 3, got {value}")
            if value % 2 == 0:
                raise ValueError(f"{name} must be odd, got {value}")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.width = width
        self.height = height
        self.max_attempts = max_attempts
        self._rng = random.Random(seed)

    def generate(self) -> Grid:
        cells = [[WALL for _ in range(self.width)] for _ in range(self.height)]
        start = Coordinate(
            1 + self._rng.randrange((self.width - 1) // 2) * 2,
            1 + self._rng.randrange((self.height - 1) // 2) * 2,
        )
        logger.debug("Carving %dx%d maze from %s", self.width, self.height, start)
        self._carve(cells, start)

        entrance, exit = self._place_entrance_and_exit(cells)
        cells[entrance.y][entrance.x] = PASSABLE
        cells[exit.y][exit.x] = PASSABLE
        return Grid.create(cells, entrance, exit)

    # ------------------------------------------------------------------

    def _carve(self, cells: List[List[int]], start: Coordinate) -> None:
        cells[start.y][start.x] = PASSABLE
        stack: List[Tuple[Coordinate, Iterator[Tuple[int, int]]]] = [
            (start, self._shuffled_directions())
        ]
        while stack:
            current, directions = stack[-1]
            for dx, dy in directions:
                nx, ny = current.x + dx * 2, current.y + dy * 2
                if self._is_interior(nx, ny) and cells[ny][nx] == WALL:
                    cells[current.y + dy][current.x + dx] = PASSABLE
                    cells[ny][nx] = PASSABLE
                    stack.append((Coordinate(nx, ny), self._shuffled_directions()))
                    break
            else:
                stack.pop()

    def _shuffled_directions(self) -> Iterator[Tuple[int, int]]:
        directions = list(_DIRECTIONS)
        self._rng.shuffle(directions)
        return iter(directions)

    def _is_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def _place_entrance_and_exit(self, cells: List[List[int]]) -> Tuple[Coordinate, Coordinate]:
        entrance_side, exit_side = self._rng.sample(SIDES, 2)
        logger.debug("Placing entrance on %s side and exit on %s side", entrance_side, exit_side)
        entrance = self._place_on_side(cells, entrance_side)
        exit = self._place_on_side(cells, exit_side)
        return entrance, exit

    def _place_on_side(self, cells: List[List[int]], side: str) -> Coordinate:
        for attempt in range(1, self.max_attempts + 1):
            coord = self._random_side_coordinate(side)
            if self._wall_neighbors(cells, coord) <= 2:
                logger.debug("Accepted %s on %s side after %d attempt(s)", coord, side, attempt)
                return coord
        logger.warning(
            "No usable %s-side cell found in %d attempts for %dx%d maze",
            side,
            self.max_attempts,
            self.width,
            self.height,
        )
        raise GenerationError(
            f"unable to place entrance/exit on the {side} side after {self.max_attempts} attempts"
        )

    def _random_side_coordinate(self, side: str) -> Coordinate:
        if side == "top":
            return Coordinate(1 + self._rng.randrange(self.width - 2), 0)
        if side == "right":
            return Coordinate(self.width - 1, 1 + self._rng.randrange(self.height - 2))
        if side == "bottom":
            return Coordinate(1 + self._rng.randrange(self.width - 2), self.height - 1)
        if side == "left":
            return Coordinate(0, 1 + self._rng.randrange(self.height - 2))
        raise ValueError(f"Invalid side: {side}")

    def _wall_neighbors(self, cells: List[List[int]], coord: Coordinate) -> int:
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            x, y = coord.x + dx, coord.y + dy
            if 0 <= x < self.width and 0 <= y < self.height and cells[y][x] == WALL:
                count += 1
        return count


__all__ = ["MazeGenerator", "round_up_to_odd", "SIDES", "DEFAULT_MAX_ATTEMPTS"]
