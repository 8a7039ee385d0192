"""Terminal and image renderings of a grid and an optional path."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Set, Tuple

from PIL import Image, ImageDraw
from rich.text import Text

from .base import PathLike
from .grid import PASSABLE, Coordinate, CoordinateLike, Grid

ENTRANCE_GLYPH = "S"
EXIT_GLYPH = "E"
PATH_GLYPH = "*"
WALL_GLYPH = "█"
OPEN_GLYPH = " "

ENDPOINT_STYLE = "white on red"
PATH_STYLE = "white on blue"

WALL_COLOR = (0, 0, 0)
PASSAGE_COLOR = (255, 255, 255)
ENTRANCE_COLOR = (220, 30, 30)
EXIT_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)


def _path_cells(path: Optional[Iterable[CoordinateLike]]) -> Set[Coordinate]:
    if not path:
        return set()
    return {Coordinate.of(step) for step in path}


def _glyphs(grid: Grid, path: Optional[Iterable[CoordinateLike]]):
    on_path = _path_cells(path)
    cells = grid.cells
    for y in range(grid.height):
        for x in range(grid.width):
            coord = Coordinate(x, y)
            if coord == grid.entrance:
                yield ENTRANCE_GLYPH, ENDPOINT_STYLE
            elif coord == grid.exit:
                yield EXIT_GLYPH, ENDPOINT_STYLE
            elif coord in on_path:
                yield PATH_GLYPH, PATH_STYLE
            elif cells[y, x] == PASSABLE:
                yield OPEN_GLYPH, None
            else:
                yield WALL_GLYPH, None
        yield "\n", None


def draw_text(grid: Grid, path: Optional[Iterable[CoordinateLike]] = None) -> str:
    """Plain text drawing: S/E endpoints, ``*`` path, block walls, blank passages."""

    return "".join(glyph for glyph, _ in _glyphs(grid, path))


def draw_rich(grid: Grid, path: Optional[Iterable[CoordinateLike]] = None) -> Text:
    """Same drawing as :func:`draw_text`, styled for a rich console."""

    text = Text()
    for glyph, style in _glyphs(grid, path):
        text.append(glyph, style=style)
    return text


class MazeImageRenderer:
    """Render a grid as a raster image with the solution drawn as a line."""

    def __init__(self, cell_size: int = 16) -> None:
        if cell_size < 2:
            raise ValueError("cell_size must be at least 2")
        self.cell_size = cell_size

    def render(
        self,
        grid: Grid,
        path: Optional[Sequence[CoordinateLike]] = None,
    ) -> Image.Image:
        size = self.cell_size
        canvas = Image.new("RGB", (grid.width * size, grid.height * size), WALL_COLOR)
        draw = ImageDraw.Draw(canvas)

        cells = grid.cells
        for y in range(grid.height):
            for x in range(grid.width):
                if cells[y, x] == PASSABLE:
                    self._draw_cell(draw, Coordinate(x, y), PASSAGE_COLOR)
        self._draw_cell(draw, grid.entrance, ENTRANCE_COLOR)
        self._draw_cell(draw, grid.exit, EXIT_COLOR)

        if path:
            thickness = max(2, size // 3)
            points = [self._center(Coordinate.of(step)) for step in path]
            if len(points) >= 2:
                draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
            else:
                cx, cy = points[0]
                radius = thickness / 2
                draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=LINE_COLOR)
        return canvas

    def save(
        self,
        grid: Grid,
        destination: PathLike,
        path: Optional[Sequence[CoordinateLike]] = None,
    ) -> Path:
        target = Path(destination)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, path).save(target)
        return target

    def _center(self, cell: Coordinate) -> Tuple[float, float]:
        return (
            cell.x * self.cell_size + self.cell_size / 2,
            cell.y * self.cell_size + self.cell_size / 2,
        )

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        cell: Coordinate,
        color: Tuple[int, int, int],
    ) -> None:
        left = cell.x * self.cell_size
        top = cell.y * self.cell_size
        draw.rectangle(
            (left, top, left + self.cell_size - 1, top + self.cell_size - 1),
            fill=color,
        )


__all__ = ["draw_text", "draw_rich", "MazeImageRenderer"]
