"""Text and raster renderings of a maze, driven only by its link state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..base import PathLike
from .grid import Cell, Compass, Maze

Colour = Tuple[int, int, int]

WHITE: Colour = (255, 255, 255)
BLACK: Colour = (0, 0, 0)
GREY: Colour = (128, 128, 128)
BLUE: Colour = (0, 0, 255)

DEFAULT_CELL_SIZE = 10
MIN_CELL_SIZE = 8

VDIV = "|"
HDIV = "-"
CORNER = "+"
BLANK = " "
MASKED = "█"
CELL_WIDTH = 3

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class ImageWriteError(OSError):
    """Raised when a rendered maze cannot be encoded or written."""


@dataclass
class RenderStyle:
    cell_size: int = DEFAULT_CELL_SIZE
    background: Colour = GREY
    wall: Colour = BLACK
    floor: Colour = WHITE
    far: Colour = BLUE

    def __post_init__(self) -> None:
        if self.cell_size < MIN_CELL_SIZE:
            raise ValueError(f"cell_size must be at least {MIN_CELL_SIZE}")
        if tuple(self.wall) in (tuple(self.floor), tuple(self.far)):
            raise ValueError("floor and far colours must differ from the wall colour")

    def canvas_size(self, maze: Maze) -> Tuple[int, int]:
        return self.cell_size * (maze.columns + 2), self.cell_size * (maze.rows + 2)


def gradient_colour(start: Colour, end: Colour, ratio: float) -> Colour:
    """Linear interpolation between two colours, truncated to integers."""

    return tuple(int(a * (1.0 - ratio) + b * ratio) for a, b in zip(start, end))  # type: ignore[return-value]


def base36(value: int) -> Optional[str]:
    if 0 <= value < len(DIGITS):
        return DIGITS[value]
    return None


# ------------------------------------------------------------------
# Text


def _write_row(
    out: List[str],
    row: Sequence[Optional[Cell]],
    divider: Callable[[Optional[Cell]], str],
    body: Callable[[Optional[Cell]], Tuple[str, str]],
) -> None:
    parts = [divider(None)]
    for cell in row:
        ch, pad = body(cell)
        parts.extend(ch if i == CELL_WIDTH // 2 else pad for i in range(CELL_WIDTH))
        parts.append(divider(cell))
    out.append("".join(parts))


def render_text(maze: Maze) -> str:
    """Draw the maze as ASCII art, one trailing newline per line."""

    def cell_body(cell: Optional[Cell]) -> Tuple[str, str]:
        if cell is None:
            return MASKED, MASKED
        distance = maze.distance(cell)
        if distance is not None:
            digit = base36(distance)
            if digit is not None:
                return digit, BLANK
        return BLANK, BLANK

    def east_divider(cell: Optional[Cell]) -> str:
        return BLANK if maze.has_link(cell, Compass.EAST) else VDIV

    def south_divider(cell: Optional[Cell]) -> Tuple[str, str]:
        return (BLANK, BLANK) if maze.has_link(cell, Compass.SOUTH) else (HDIV, HDIV)

    lines: List[str] = []
    for index in range(maze.rows):
        row = maze.row(index)
        if index == 0:
            _write_row(lines, row, lambda _: CORNER, lambda _: (HDIV, HDIV))
        _write_row(lines, row, east_divider, cell_body)
        _write_row(lines, row, lambda _: CORNER, south_divider)
    return "".join(line + "\n" for line in lines)


# ------------------------------------------------------------------
# Raster


def _fill(draw: ImageDraw.ImageDraw, x: int, y: int, width: int, height: int, colour: Colour) -> None:
    draw.rectangle((x, y, x + width - 1, y + height - 1), fill=colour)


def cell_colour(maze: Maze, cell: Cell, style: RenderStyle) -> Colour:
    distance = maze.distance(cell)
    if distance is None:
        return style.floor
    if not maze.max_distance:
        return style.floor
    return gradient_colour(style.floor, style.far, distance / maze.max_distance)


def draw_image(maze: Maze, style: Optional[RenderStyle] = None) -> Image.Image:
    """Render the maze as an RGB image with one ``cell_size`` square per slot.

    A one-cell margin of background surrounds a wall-coloured block; each
    unmasked cell is cut out of the block, and its East and South walls are
    cut away where the corresponding link exists.
    """

    style = style or RenderStyle()
    size = style.cell_size
    canvas = Image.new("RGB", style.canvas_size(maze), style.background)
    draw = ImageDraw.Draw(canvas)

    _fill(draw, size - 1, size - 1, size * maze.columns + 1, size * maze.rows + 1, style.wall)

    for cell in maze.cells():
        colour = cell_colour(maze, cell, style)
        left = size * (cell.column + 1)
        top = size * (cell.row + 1)
        _fill(draw, left + 1, top + 1, size - 3, size - 3, colour)
        if maze.has_link(cell, Compass.EAST):
            _fill(draw, left + size - 2, top + 3, 3, size - 7, colour)
        if maze.has_link(cell, Compass.SOUTH):
            _fill(draw, left + 3, top + size - 2, size - 7, 3, colour)
    return canvas


def save_image(maze: Maze, path: PathLike, style: Optional[RenderStyle] = None) -> Path:
    """Write the rendered maze as a PNG and return the path written."""

    target = Path(path)
    image = draw_image(maze, style)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        image.save(target, format="PNG")
    except (OSError, ValueError) as exc:
        raise ImageWriteError(f"Could not write maze image to {target}: {exc}") from exc
    return target


__all__ = [
    "ImageWriteError",
    "RenderStyle",
    "base36",
    "cell_colour",
    "draw_image",
    "gradient_colour",
    "render_text",
    "save_image",
]
