"""Read and write mazes in the ``S``/``E``/``0``/``1`` text layout."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .base import PathLike
from .errors import MazeFormatError
from .grid import PASSABLE, WALL, Coordinate, Grid

logger = logging.getLogger(__name__)

ENTRANCE_CHAR = "S"
EXIT_CHAR = "E"
_CELL_CHARS = {"0": PASSABLE, "1": WALL}


def parse_maze(text: str) -> Grid:
    """Parse a maze layout, one row per line.

    ``S`` marks the entrance and ``E`` the exit (both passable), ``0`` is a
    passage and ``1`` a wall. Rows must be equal length and the maze at least
    2x2.
    """

    lines = [line.rstrip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        raise MazeFormatError("Maze cannot be empty")
    width = len(lines[0])
    for number, line in enumerate(lines, start=1):
        if len(line) != width:
            raise MazeFormatError("All lines in the maze must have the same length", line=number)
    if len(lines) < 2 or width < 2:
        raise MazeFormatError("Maze must be at least 2x2")

    cells: List[List[int]] = []
    entrance: Optional[Coordinate] = None
    exit: Optional[Coordinate] = None
    for y, line in enumerate(lines):
        row: List[int] = []
        for x, char in enumerate(line):
            if char == ENTRANCE_CHAR:
                entrance = _claim(entrance, Coordinate(x, y), "entrance")
                row.append(PASSABLE)
            elif char == EXIT_CHAR:
                exit = _claim(exit, Coordinate(x, y), "exit")
                row.append(PASSABLE)
            elif char in _CELL_CHARS:
                row.append(_CELL_CHARS[char])
            else:
                raise MazeFormatError(f"Invalid character {char!r}", line=y + 1, column=x + 1)
        cells.append(row)

    if entrance is None or exit is None:
        raise MazeFormatError("Start or end position not found in the maze")
    return Grid.create(cells, entrance, exit)


def load_maze(path: PathLike) -> Grid:
    source = Path(path)
    logger.debug("Loading maze from %s", source)
    return parse_maze(source.read_text(encoding="utf-8"))


def dump_maze(grid: Grid) -> str:
    """Serialize ``grid`` back into the layout accepted by :func:`parse_maze`."""

    rows: List[str] = []
    for y, row in enumerate(grid.to_list()):
        chars = []
        for x, value in enumerate(row):
            if (x, y) == grid.entrance.as_tuple():
                chars.append(ENTRANCE_CHAR)
            elif (x, y) == grid.exit.as_tuple():
                chars.append(EXIT_CHAR)
            else:
                chars.append(str(value))
        rows.append("".join(chars))
    return "\n".join(rows) + "\n"


def _claim(existing: Optional[Coordinate], found: Coordinate, which: str) -> Coordinate:
    if existing is not None:
        raise MazeFormatError(
            f"Maze has more than one {which} (first at {existing}, again at {found})"
        )
    return found


__all__ = ["parse_maze", "load_maze", "dump_maze", "ENTRANCE_CHAR", "EXIT_CHAR"]
