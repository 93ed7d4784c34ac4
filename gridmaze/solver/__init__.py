"""Distance solvers."""

__all__ = [
    "BreadthFirstSolver",
    "Distances",
    "ManhattanSolver",
    "solve",
]

from .distances import Distances
from .breadth_first import BreadthFirstSolver, ManhattanSolver, solve
