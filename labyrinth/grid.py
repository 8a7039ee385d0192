"""Immutable maze grid model with validated entrance and exit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidBoundaryError, ValidationError

logger = logging.getLogger(__name__)

PASSABLE = 0
WALL = 1

# left, right, up, down
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, order=True)
class Coordinate:
    """A cell position; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    @classmethod
    def of(cls, value: CoordinateLike) -> "Coordinate":
        """Coerce a Coordinate or an ``(x, y)`` pair into a Coordinate."""

        if isinstance(value, Coordinate):
            return value
        try:
            x, y = value
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Expected a Coordinate or an (x, y) pair, got {value!r}") from exc
        return cls(int(x), int(y))

    def neighbors(self) -> Iterator["Coordinate"]:
        for dx, dy in NEIGHBOR_OFFSETS:
            yield Coordinate(self.x + dx, self.y + dy)

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


CoordinateLike = Union[Coordinate, Tuple[int, int], Sequence[int]]
CellsLike = Union[np.ndarray, Sequence[Sequence[int]]]

_CREATE_TOKEN = object()


class Grid:
    """A rectangular matrix of passable/wall cells plus entrance and exit.

    Instances are only built through :meth:`create`, which validates the
    matrix shape and both endpoints and then freezes the underlying array.
    Cells are indexed ``cells[y][x]``. Once constructed a grid never changes,
    so it can be shared freely between solvers and threads.
    """

    __slots__ = ("_cells", "_entrance", "_exit")

    def __init__(
        self,
        cells: np.ndarray,
        entrance: Coordinate,
        exit: Coordinate,
        *,
        _token: object = None,
    ) -> None:
        if _token is not _CREATE_TOKEN:
            raise TypeError("Grid instances must be built with Grid.create()")
        self._cells = cells
        self._entrance = entrance
        self._exit = exit

    @classmethod
    def create(cls, cells: CellsLike, entrance: CoordinateLike, exit: CoordinateLike) -> "Grid":
        """Validate ``cells`` and both endpoints, returning a frozen grid."""

        array = _to_cell_array(cells)
        entrance = Coordinate.of(entrance)
        exit = Coordinate.of(exit)
        for which, coord in (("entrance", entrance), ("exit", exit)):
            if not _within(array, coord):
                raise InvalidBoundaryError(which, coord, "outside the grid")
            if array[coord.y, coord.x] != PASSABLE:
                raise InvalidBoundaryError(which, coord, "cell is a wall")
        array.flags.writeable = False
        logger.debug(
            "Created %dx%d grid with entrance %s and exit %s",
            array.shape[1],
            array.shape[0],
            entrance,
            exit,
        )
        return cls(array, entrance, exit, _token=_CREATE_TOKEN)

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def entrance(self) -> Coordinate:
        return self._entrance

    @property
    def exit(self) -> Coordinate:
        return self._exit

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell matrix."""

        return self._cells.view()

    def in_bounds(self, coord: CoordinateLike) -> bool:
        return _within(self._cells, Coordinate.of(coord))

    def is_valid_move(self, coord: CoordinateLike) -> bool:
        """True when ``coord`` lies inside the grid on a passable cell."""

        coord = Coordinate.of(coord)
        return _within(self._cells, coord) and bool(self._cells[coord.y, coord.x] == PASSABLE)

    def passable_count(self) -> int:
        return int(np.count_nonzero(self._cells == PASSABLE))

    def to_list(self) -> List[List[int]]:
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._entrance == other._entrance
            and self._exit == other._exit
            and np.array_equal(self._cells, other._cells)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Grid(width={self.width}, height={self.height}, "
            f"entrance={self._entrance}, exit={self._exit})"
        )


def _within(cells: np.ndarray, coord: Coordinate) -> bool:
    height, width = cells.shape
    return 0 <= coord.x < width and 0 <= coord.y < height


def _to_cell_array(cells: CellsLike) -> np.ndarray:
    if isinstance(cells, np.ndarray):
        array = np.array(cells, copy=True)
    else:
        try:
            rows = [list(row) for row in cells]
        except TypeError as exc:
            raise ValidationError("Maze cells must form a two-dimensional matrix") from exc
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValidationError("All rows of the maze must have the same length")
        try:
            array = np.array(rows)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Maze cells could not be read as a matrix: {exc}") from exc

    if array.ndim != 2:
        raise ValidationError("Maze cells must form a two-dimensional matrix")
    height, width = array.shape
    if height < 2 or width < 2:
        raise ValidationError(f"Maze must be at least 2x2, got {width}x{height}")
    if array.dtype.kind not in "biu" or not np.isin(array, (PASSABLE, WALL)).all():
        raise ValidationError("Maze cells must be 0 (passable) or 1 (wall)")
    return array.astype(np.uint8)


__all__ = [
    "PASSABLE",
    "WALL",
    "NEIGHBOR_OFFSETS",
    "Coordinate",
    "CoordinateLike",
    "Grid",
]
