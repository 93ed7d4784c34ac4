"""Generate a maze, optionally solve it, and print or save the result."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .masks import MASKS
from .maze.grid import Maze
from .maze.render import DEFAULT_CELL_SIZE, MIN_CELL_SIZE, ImageWriteError, RenderStyle, save_image
from .router import ROUTERS
from .solver import BreadthFirstSolver


def _coords(value: str) -> Tuple[int, int]:
    try:
        row, column = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL with integers, got {value!r}")
    return row, column


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridmaze", description=__doc__)
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--cols", type=int, default=8)
    parser.add_argument("--algorithm", choices=sorted(ROUTERS), default="binarytree")
    parser.add_argument("--mask", choices=sorted(MASKS), default="none")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--solve-from",
        type=_coords,
        default=None,
        metavar="ROW,COL",
        help="Compute distances from this cell and show them in the output",
    )
    parser.add_argument("--image", type=Path, default=None, help="Also write the maze as a PNG")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--json", action="store_true", help="Print distances as JSON after the maze")
    args = parser.parse_args(argv)
    if args.rows <= 0 or args.cols <= 0:
        parser.error("--rows and --cols must be positive")
    if args.json and args.solve_from is None:
        parser.error("--json requires --solve-from")
    if args.cell_size < MIN_CELL_SIZE:
        parser.error(f"--cell-size must be at least {MIN_CELL_SIZE}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    router = ROUTERS[args.algorithm](rng)
    maze = Maze.grid(args.rows, args.cols, MASKS[args.mask](args.rows, args.cols), router)

    distances = None
    if args.solve_from is not None:
        try:
            distances = BreadthFirstSolver().solve(maze, args.solve_from)
        except ValueError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 2
        maze.apply_distances(distances)

    print(maze, end="")

    if args.image is not None:
        try:
            written = save_image(maze, args.image, RenderStyle(cell_size=args.cell_size))
        except ImageWriteError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
        print(f"Wrote {written}")

    if args.json and distances is not None:
        print(json.dumps(distances.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
