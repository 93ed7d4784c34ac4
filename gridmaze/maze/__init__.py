"""Maze grid model and its renderings."""

__all__ = [
    "Attributes",
    "Cell",
    "Compass",
    "Maze",
    "ImageWriteError",
    "RenderStyle",
    "draw_image",
    "render_text",
    "save_image",
    "links_from_image",
]

from .grid import Attributes, Cell, Compass, Maze
from .render import ImageWriteError, RenderStyle, draw_image, render_text, save_image
from .readback import links_from_image
