"""Masking predicates deciding which grid slots become cells.

A mask is any ``(row, column) -> bool`` callable; False masks the slot out.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Sequence, Tuple

MASKED_GLYPHS = "#█"


def allow_all(row: int, column: int) -> bool:
    return True


def alternate(row: int, column: int) -> bool:
    """Checkerboard: keep slots whose row and column parity differ."""

    return row % 2 != column % 2


def mask_corners(rows: int, columns: int) -> Callable[[int, int], bool]:
    def allowed(row: int, column: int) -> bool:
        return not ((row == 0 or row == rows - 1) and (column == 0 or column == columns - 1))

    return allowed


def mask_cells(coords: Iterable[Tuple[int, int]]) -> Callable[[int, int], bool]:
    masked = frozenset((int(r), int(c)) for r, c in coords)

    def allowed(row: int, column: int) -> bool:
        return (row, column) not in masked

    return allowed


def from_text(lines: Sequence[str]) -> Callable[[int, int], bool]:
    """Build a mask from a picture, one line per row.

    ``#`` or ``█`` masks a slot; anything else (or running off the end of a
    short line) keeps it.
    """

    masked = [
        (row, column)
        for row, line in enumerate(lines)
        for column, ch in enumerate(line)
        if ch in MASKED_GLYPHS
    ]
    return mask_cells(masked)


# Named masks for the command line; each factory receives (rows, columns).
MASKS: Dict[str, Callable[[int, int], Callable[[int, int], bool]]] = {
    "none": lambda rows, columns: allow_all,
    "corners": mask_corners,
    "alternate": lambda rows, columns: alternate,
}


__all__ = [
    "MASKS",
    "allow_all",
    "alternate",
    "from_text",
    "mask_cells",
    "mask_corners",
]
