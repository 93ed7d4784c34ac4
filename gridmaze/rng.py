"""Deterministic random sources for reproducible carving.

Both classes satisfy :class:`gridmaze.base.RandomSource`: every draw takes the
next raw value and reduces it modulo the requested bound.
"""

from __future__ import annotations

from itertools import count, cycle
from typing import Iterable, Iterator


class _SequenceRandom:
    _values: Iterator[int]

    def next_value(self) -> int:
        return next(self._values)

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError("empty range for randrange()")
        return self.next_value() % stop


class StepRandom(_SequenceRandom):
    """Yields ``initial``, ``initial + increment``, ... forever."""

    def __init__(self, initial: int = 0, increment: int = 1) -> None:
        self.initial = initial
        self.increment = increment
        self._values = count(initial, increment)


class SeriesRandom(_SequenceRandom):
    """Cycles through a fixed series of values."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        if not self.values:
            raise ValueError("SeriesRandom needs at least one value")
        self._values = cycle(self.values)


__all__ = ["SeriesRandom", "StepRandom"]
