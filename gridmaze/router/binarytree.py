"""Binary tree carving: every cell opens towards one of two preferred sides."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..base import CellRouter, RandomSource
from ..maze.grid import Cell, Compass, Maze


class BinaryTree(CellRouter):
    """Link each cell to a random one of ``directions`` that has a neighbour.

    With the default North/East preference the top row and the east column
    end up as unbroken corridors.
    """

    def __init__(
        self,
        rng: RandomSource,
        *,
        directions: Sequence[Compass] = (Compass.NORTH, Compass.EAST),
    ) -> None:
        if not directions:
            raise ValueError("BinaryTree needs at least one direction")
        self.rng = rng
        self.directions = tuple(directions)

    def direction(self, maze: Maze, cell: Cell) -> Optional[Compass]:
        candidates: List[Compass] = [
            direction for direction in self.directions if maze.neighbour(cell, direction) is not None
        ]
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]
        return candidates[self.rng.randrange(len(candidates))]

    def visit_cell(self, maze: Maze, cell: Cell) -> None:
        direction = self.direction(maze, cell)
        if direction is not None:
            maze.link_cell(cell, direction)


__all__ = ["BinaryTree"]
