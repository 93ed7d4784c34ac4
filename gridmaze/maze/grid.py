"""Masked rectangular grid with symmetric passage links."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Set, Tuple

from ..base import NoOp, Router
from ..masks import allow_all

if TYPE_CHECKING:
    from PIL import Image

    from ..solver.distances import Distances
    from .render import RenderStyle

Coord = Tuple[int, int]
Mask = Callable[[int, int], bool]


class Compass(Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @classmethod
    def all(cls) -> List["Compass"]:
        """Every direction, always in N, E, S, W order."""

        return list(cls)

    def reverse(self) -> "Compass":
        return _REVERSE[self]

    def neighbour(self, row: int, column: int) -> Coord:
        """Coordinates one step away; the caller must know the move is legal."""

        dr, dc = _STEP[self]
        return row + dr, column + dc

    def checked_neighbour(self, rows: int, columns: int, row: int, column: int) -> Optional[Coord]:
        nr, nc = self.neighbour(row, column)
        if 0 <= nr < rows and 0 <= nc < columns:
            return nr, nc
        return None

    @staticmethod
    def offset(rows: int, columns: int, row: int, column: int) -> Optional[int]:
        """Row-major index of ``(row, column)`` or None when out of bounds."""

        if not (0 <= row < rows and 0 <= column < columns):
            return None
        return row * columns + column


_REVERSE = {
    Compass.NORTH: Compass.SOUTH,
    Compass.EAST: Compass.WEST,
    Compass.SOUTH: Compass.NORTH,
    Compass.WEST: Compass.EAST,
}

_STEP = {
    Compass.NORTH: (-1, 0),
    Compass.EAST: (0, 1),
    Compass.SOUTH: (1, 0),
    Compass.WEST: (0, -1),
}


@dataclass(frozen=True)
class Cell:
    row: int
    column: int

    def coords(self) -> Coord:
        return self.row, self.column


@dataclass
class Attributes:
    """Per-cell state: fixed adjacency, carved links and an optional distance."""

    neighbours: Mapping[Compass, Cell]
    links: Set[Compass] = field(default_factory=set)
    distance: Optional[int] = None


class Maze:
    """A rows x columns grid of cells, some of which may be masked out.

    Neighbours are computed once at construction; afterwards only the link
    overlay (and applied distances) change. Use :meth:`grid` to build one.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        cells: List[Optional[Cell]],
        attributes: List[Optional[Attributes]],
    ) -> None:
        if len(cells) != rows * columns or len(attributes) != rows * columns:
            raise ValueError("cells and attributes must have rows * columns slots")
        self.rows = rows
        self.columns = columns
        self._cells = cells
        self._attributes = attributes
        self.max_distance: Optional[int] = None

    @classmethod
    def grid(
        cls,
        rows: int,
        columns: int,
        allowed: Mask = allow_all,
        router: Optional[Router] = None,
    ) -> "Maze":
        """Build a masked grid and let ``router`` carve its passages.

        ``allowed(row, column)`` is asked once per slot; a False answer masks
        the slot. Without a router the maze keeps all of its walls.
        """

        if rows <= 0 or columns <= 0:
            raise ValueError("rows and columns must be positive")
        cells = cls._build_cells(rows, columns, allowed)
        attributes = cls._build_attributes(cells, rows, columns)
        maze = cls(rows, columns, cells, attributes)
        (router or NoOp()).carve(maze, list(cells))
        return maze

    @classmethod
    def square(cls, size: int) -> "Maze":
        return cls.grid(size, size)

    @staticmethod
    def _build_cells(rows: int, columns: int, allowed: Mask) -> List[Optional[Cell]]:
        return [
            Cell(row, column) if allowed(row, column) else None
            for row in range(rows)
            for column in range(columns)
        ]

    @staticmethod
    def _build_attributes(
        cells: Sequence[Optional[Cell]], rows: int, columns: int
    ) -> List[Optional[Attributes]]:
        attributes: List[Optional[Attributes]] = []
        for cell in cells:
            if cell is None:
                attributes.append(None)
                continue
            neighbours: Dict[Compass, Cell] = {}
            for direction in Compass.all():
                target = direction.checked_neighbour(rows, columns, cell.row, cell.column)
                if target is None:
                    continue
                other = cells[target[0] * columns + target[1]]
                if other is not None:
                    neighbours[direction] = other
            attributes.append(Attributes(neighbours=MappingProxyType(neighbours)))
        return attributes

    # ------------------------------------------------------------------

    def _attrs(self, cell: Cell) -> Attributes:
        index = Compass.offset(self.rows, self.columns, cell.row, cell.column)
        attrs = self._attributes[index] if index is not None else None
        if attrs is None or self._cells[index] != cell:
            raise KeyError(f"Missing attributes for {cell!r}")
        return attrs

    def raw_cells(self) -> List[Optional[Cell]]:
        """Row-major slots, None where masked."""

        return list(self._cells)

    def cells(self) -> List[Cell]:
        return [cell for cell in self._cells if cell is not None]

    def row(self, index: int) -> List[Optional[Cell]]:
        start = index * self.columns
        return self._cells[start:start + self.columns]

    def cell(self, row: int, column: int) -> Optional[Cell]:
        index = Compass.offset(self.rows, self.columns, row, column)
        if index is None:
            return None
        return self._cells[index]

    def neighbours(self, cell: Cell) -> Mapping[Compass, Cell]:
        return self._attrs(cell).neighbours

    def neighbour(self, cell: Cell, direction: Compass) -> Optional[Cell]:
        return self._attrs(cell).neighbours.get(direction)

    def links(self, cell: Cell) -> FrozenSet[Compass]:
        return frozenset(self._attrs(cell).links)

    def has_link(self, cell: Optional[Cell], direction: Compass) -> bool:
        if cell is None:
            return False
        return direction in self._attrs(cell).links

    def link_cell(self, cell: Cell, direction: Compass) -> Optional[Cell]:
        """Open the wall towards ``direction``; a no-op without a neighbour there."""

        other = self.neighbour(cell, direction)
        if other is None:
            return None
        self._attrs(cell).links.add(direction)
        self._attrs(other).links.add(direction.reverse())
        return other

    def unlink_cell(self, cell: Cell, direction: Compass) -> Optional[Cell]:
        other = self.neighbour(cell, direction)
        if other is None:
            return None
        self._attrs(cell).links.discard(direction)
        self._attrs(other).links.discard(direction.reverse())
        return other

    def linked_neighbours(self, cell: Cell) -> List[Cell]:
        """Neighbours reachable through an open wall, in compass order."""

        attrs = self._attrs(cell)
        return [attrs.neighbours[d] for d in Compass.all() if d in attrs.links]

    # ------------------------------------------------------------------

    def apply_distances(self, distances: "Distances") -> None:
        """Attach solver distances, replacing any applied earlier."""

        values = distances.all_cells()
        targets = [(self._attrs(cell), value) for cell, value in values.items()]
        for attrs in self._attributes:
            if attrs is not None:
                attrs.distance = None
        for attrs, value in targets:
            attrs.distance = value
        self.max_distance = max(values.values(), default=None)

    def distance(self, cell: Cell) -> Optional[int]:
        return self._attrs(cell).distance

    # ------------------------------------------------------------------

    def draw_image(self, style: Optional["RenderStyle"] = None) -> "Image.Image":
        from .render import draw_image

        return draw_image(self, style)

    def __str__(self) -> str:
        from .render import render_text

        return render_text(self)

    def __repr__(self) -> str:
        return f"Maze(rows={self.rows}, columns={self.columns}, cells={len(self.cells())})"


__all__ = ["Attributes", "Cell", "Compass", "Coord", "Mask", "Maze"]
