"""Abstract interfaces for maze carving and solving."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence, Tuple, Union

if TYPE_CHECKING:
    from .maze.grid import Cell, Maze
    from .solver.distances import Distances

PathLike = Union[str, Path]


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in ``[0, stop)``.

    ``random.Random`` satisfies this, as do the deterministic sources in
    :mod:`gridmaze.rng`.
    """

    def randrange(self, stop: int) -> int:
        ...


class Router(ABC):
    """Base class for carving policies that open passages in a maze."""

    @abstractmethod
    def carve(self, maze: "Maze", cells: Sequence[Optional["Cell"]]) -> None:
        """Link cells of ``maze`` in place.

        ``cells`` is the row-major slot list, ``None`` marking masked slots.
        """


class NoOp(Router):
    """Leave every wall standing."""

    def carve(self, maze: "Maze", cells: Sequence[Optional["Cell"]]) -> None:
        return None


class CellRouter(Router):
    """Visit every unmasked cell once, in row-major order."""

    def carve(self, maze: "Maze", cells: Sequence[Optional["Cell"]]) -> None:
        for cell in cells:
            if cell is not None:
                self.visit_cell(maze, cell)

    def visit_cell(self, maze: "Maze", cell: "Cell") -> None:
        """Per-cell hook."""


class RowRouter(Router):
    """Visit the maze one row at a time, top to bottom."""

    def carve(self, maze: "Maze", cells: Sequence[Optional["Cell"]]) -> None:
        for row in range(maze.rows):
            start = row * maze.columns
            row_cells: List["Cell"] = [
                cell for cell in cells[start:start + maze.columns] if cell is not None
            ]
            self.start_row(maze, row)
            self.visit_row(maze, row, row_cells)

    def start_row(self, maze: "Maze", row: int) -> None:
        """Reset any per-row state before ``visit_row`` runs."""

    def visit_row(self, maze: "Maze", row: int, cells: Sequence["Cell"]) -> None:
        """Per-row hook; ``cells`` holds the unmasked cells of ``row``."""


class Solver(ABC):
    """Base class for distance solvers over a carved maze."""

    @abstractmethod
    def solve(self, maze: "Maze", start: Tuple[int, int]) -> "Distances":
        """Return distances from the cell at ``start`` (row, column)."""


__all__ = [
    "CellRouter",
    "NoOp",
    "PathLike",
    "RandomSource",
    "Router",
    "RowRouter",
    "Solver",
]
