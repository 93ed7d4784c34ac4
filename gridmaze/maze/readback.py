"""Recover link state from a rendered maze image."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, FrozenSet, Optional, Set, Union

import numpy as np
from PIL import Image

from ..base import PathLike
from .grid import Compass, Coord, Maze
from .render import RenderStyle


def _is_wall(pixels: np.ndarray, y: int, x: int, wall: np.ndarray) -> bool:
    return bool(np.array_equal(pixels[y, x], wall))


def links_from_image(
    image: Union[Image.Image, PathLike],
    rows: int,
    columns: int,
    style: Optional[RenderStyle] = None,
) -> Dict[Coord, FrozenSet[Compass]]:
    """Read back which slots hold cells and which walls are open.

    Returns a mapping from the coordinates of every unmasked slot to the set
    of directions whose wall has been cut away. Masked slots are absent.
    """

    style = style or RenderStyle()
    if not isinstance(image, Image.Image):
        with Image.open(Path(image)) as opened:
            image = opened.convert("RGB")
    else:
        image = image.convert("RGB")

    expected = (style.cell_size * (columns + 2), style.cell_size * (rows + 2))
    if image.size != expected:
        raise ValueError(f"Image size {image.size} does not match a {rows}x{columns} maze {expected}")

    pixels = np.asarray(image)
    wall = np.asarray(style.wall, dtype=pixels.dtype)
    size = style.cell_size
    centre = 1 + (size - 3) // 2
    along = 3 + (size - 8) // 2

    found: Dict[Coord, Set[Compass]] = {
        (row, column): set()
        for row in range(rows)
        for column in range(columns)
        if not _is_wall(pixels, size * (row + 1) + centre, size * (column + 1) + centre, wall)
    }
    for (row, column), directions in found.items():
        top = size * (row + 1)
        left = size * (column + 1)
        east = found.get((row, column + 1))
        if east is not None and not _is_wall(pixels, top + along, left + size - 1, wall):
            directions.add(Compass.EAST)
            east.add(Compass.WEST)
        south = found.get((row + 1, column))
        if south is not None and not _is_wall(pixels, top + size - 1, left + along, wall):
            directions.add(Compass.SOUTH)
            south.add(Compass.NORTH)
    return {coords: frozenset(directions) for coords, directions in found.items()}


def links_of(maze: Maze) -> Dict[Coord, FrozenSet[Compass]]:
    """The same mapping as :func:`links_from_image`, taken from the maze itself."""

    return {cell.coords(): maze.links(cell) for cell in maze.cells()}


__all__ = ["links_from_image", "links_of"]
