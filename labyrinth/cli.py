"""Command-line entry point: generate or load a maze and print its solution."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console

from .errors import MazeError
from .grid import Grid
from .loader import dump_maze, load_maze
from .logging_config import configure_logging
from .maze import AStarSolver, MazeGenerator, round_up_to_odd
from .render import MazeImageRenderer, draw_rich, draw_text

logger = logging.getLogger(__name__)

EXIT_NO_SOLUTION = 1
EXIT_ERROR = 2


def parse_dimensions(value: str) -> Tuple[int, int]:
    """Parse ``"W,H"``, rounding even sizes up to the next odd value."""

    try:
        width, height = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            "Invalid dimensions. Dimensions should be in width,height form, ie. 31,31"
        ) from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("Dimensions must be positive integers")
    width, height = round_up_to_odd(width), round_up_to_odd(height)
    if width < 3 or height < 3:
        raise argparse.ArgumentTypeError("Dimensions must be at least 3,3")
    return width, height


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Generate or load a maze and print its shortest solution",
        epilog="Examples: labyrinth --dim 13,17    labyrinth --file maze.txt",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--dim",
        type=parse_dimensions,
        metavar="WIDTH,HEIGHT",
        help="Generate a maze of this size (even values are rounded up to odd)",
    )
    source.add_argument("--file", type=Path, help="Load a maze written with S, E, 0 and 1")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for generation")
    parser.add_argument("--image", type=Path, default=None, help="Also write the solved maze as an image")
    parser.add_argument("--cell-size", type=int, default=16, help="Pixel size of one cell in --image output")
    parser.add_argument("--dump", action="store_true", help="Print the maze in file format instead of drawing it")
    parser.add_argument("--no-color", action="store_true", help="Disable colored terminal output")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging verbosity (defaults to $LABYRINTH_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)
    if args.dump and args.image is not None:
        parser.error("--dump prints the maze layout only; it cannot be combined with --image")
    return args


def _build_grid(args: argparse.Namespace) -> Grid:
    if args.dim is not None:
        width, height = args.dim
        return MazeGenerator(width, height, seed=args.seed).generate()
    return load_maze(args.file)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    try:
        grid = _build_grid(args)
        if args.dump:
            sys.stdout.write(dump_maze(grid))
            return 0
        path = AStarSolver().find_path(grid)
        if args.image is not None:
            target = MazeImageRenderer(cell_size=args.cell_size).save(grid, args.image, path)
            logger.info("Wrote maze image to %s", target)
    except (MazeError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if path is None:
        print("No solution found", file=sys.stderr)
        return EXIT_NO_SOLUTION

    if args.no_color:
        sys.stdout.write(draw_text(grid, path))
    else:
        Console(file=sys.stdout, highlight=False).print(draw_rich(grid, path), end="", soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
