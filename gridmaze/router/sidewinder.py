"""Sidewinder carving: horizontal runs, each closed by one upward passage."""

from __future__ import annotations

from typing import List, Sequence

from ..base import RandomSource, RowRouter
from ..maze.grid import Cell, Compass, Maze


class SideWinder(RowRouter):
    """Carve row by row, building runs eastwards and closing them upwards.

    A run closes when its last cell has no East neighbour or, away from the
    ``ceiling`` edge, on a coin flip. Closing links one random member of the
    run towards ``ceiling``; along the edge that link has nowhere to go, so the
    edge row stays one open corridor.
    """

    side = Compass.EAST

    def __init__(self, rng: RandomSource, *, ceiling: Compass = Compass.NORTH) -> None:
        if ceiling not in (Compass.NORTH, Compass.SOUTH):
            raise ValueError("ceiling must be NORTH or SOUTH")
        self.rng = rng
        self.ceiling = ceiling
        self.run: List[Cell] = []

    def start_row(self, maze: Maze, row: int) -> None:
        self.run = []

    def close_run(self, maze: Maze, cell: Cell) -> bool:
        if maze.neighbour(cell, self.side) is None:
            return True
        on_edge = self.ceiling.checked_neighbour(maze.rows, maze.columns, cell.row, cell.column) is None
        return not on_edge and self.rng.randrange(2) == 0

    def visit_row(self, maze: Maze, row: int, cells: Sequence[Cell]) -> None:
        for cell in cells:
            self.run.append(cell)
            if self.close_run(maze, cell):
                chosen = self.run[self.rng.randrange(len(self.run))]
                maze.link_cell(chosen, self.ceiling)
                self.run = []
            else:
                maze.link_cell(cell, self.side)


__all__ = ["SideWinder"]
