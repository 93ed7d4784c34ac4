"""Hop-count solvers over a maze's carved links."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Tuple

from ..base import Solver
from ..maze.grid import Cell, Maze
from .distances import Distances


def _start_cell(maze: Maze, start: Tuple[int, int]) -> Cell:
    cell = maze.cell(*start)
    if cell is None:
        raise ValueError(f"Invalid starting cell {start}: out of range or masked")
    return cell


class BreadthFirstSolver(Solver):
    """Shortest-hop distance to every cell reachable through open walls.

    Unreachable cells are left out of the result.
    """

    def solve(self, maze: Maze, start: Tuple[int, int]) -> Distances:
        origin = _start_cell(maze, start)
        seen: Dict[Cell, int] = {origin: 0}
        queue: Deque[Cell] = deque([origin])
        while queue:
            cell = queue.popleft()
            depth = seen[cell] + 1
            for nxt in maze.linked_neighbours(cell):
                if nxt not in seen:
                    seen[nxt] = depth
                    queue.append(nxt)
        return Distances(seen)


class ManhattanSolver(Solver):
    """Grid distance to every cell, ignoring walls entirely."""

    def solve(self, maze: Maze, start: Tuple[int, int]) -> Distances:
        origin = _start_cell(maze, start)
        return Distances(
            {
                cell: abs(cell.row - origin.row) + abs(cell.column - origin.column)
                for cell in maze.cells()
            }
        )


def solve(maze: Maze, start: Tuple[int, int]) -> Distances:
    return BreadthFirstSolver().solve(maze, start)


__all__ = ["BreadthFirstSolver", "ManhattanSolver", "solve"]
