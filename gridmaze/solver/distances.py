"""Distance lookups produced by a solver."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from ..maze.grid import Cell


class Distances:
    """Hop counts from a start cell, indexed both by cell and by distance."""

    def __init__(self, cells: Mapping[Cell, int]) -> None:
        self._cells: Dict[Cell, int] = dict(cells)
        self._by_distance: Dict[int, List[Cell]] = {}
        for cell, distance in self._cells.items():
            self._by_distance.setdefault(distance, []).append(cell)

    def start(self) -> Cell:
        cells = self._by_distance.get(0)
        if not cells:
            raise LookupError("No cell at distance zero")
        return cells[0]

    def cells(self, distance: int) -> List[Cell]:
        return list(self._by_distance.get(distance, []))

    def distance(self, cell: Cell) -> int:
        try:
            return self._cells[cell]
        except KeyError as exc:
            raise KeyError(f"Missing distance for {cell!r}") from exc

    def all_cells(self) -> Dict[Cell, int]:
        return dict(self._cells)

    def max_distance(self) -> Optional[int]:
        return max(self._cells.values(), default=None)

    def furthest(self) -> List[Cell]:
        """Cells at the greatest distance from the start."""

        maximum = self.max_distance()
        return [] if maximum is None else self.cells(maximum)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def to_dict(self) -> dict:
        return {
            "start": list(self.start().coords()),
            "max_distance": self.max_distance(),
            "cells": [
                {"row": cell.row, "column": cell.column, "distance": distance}
                for cell, distance in sorted(self._cells.items(), key=lambda item: item[0].coords())
            ],
        }


__all__ = ["Distances"]
