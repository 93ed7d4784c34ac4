"""Maze generation, solving and rendering toolkit."""

__all__ = [
    "Router",
    "Solver",
    "RandomSource",
    "NoOp",
    "Cell",
    "Compass",
    "Maze",
    "RenderStyle",
    "ImageWriteError",
    "BinaryTree",
    "SideWinder",
    "BreadthFirstSolver",
    "ManhattanSolver",
    "Distances",
    "SeriesRandom",
    "StepRandom",
]

from .base import NoOp, RandomSource, Router, Solver
from .maze import Cell, Compass, ImageWriteError, Maze, RenderStyle
from .router import BinaryTree, SideWinder
from .solver import BreadthFirstSolver, Distances, ManhattanSolver
from .rng import SeriesRandom, StepRandom
