"""Iterative backtracking solver.

The search tree is explored with an explicit stack of :class:`SearchFrame`
objects instead of recursive calls, so the solver can stop after each
solution and pick up exactly where it left off on the next request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional

from .constraints import candidates
from .grid import Grid
from .model import EMPTY, SIZE, Cell, Location

_LOGGER = logging.getLogger(__name__)


@dataclass
class SearchFrame:
    """A location under trial and the digits not yet tried there."""
    location: Location
    candidates: List[int]


@dataclass
class SearchStats:
    placements: int = 0
    backtracks: int = 0
    solutions: int = 0


def _after(loc: Location) -> Optional[Location]:
    index = loc.row * SIZE + loc.col + 1
    if index >= SIZE * SIZE:
        return None
    return Location(*divmod(index, SIZE))


class Solver:
    """Lazy, finite and non-restartable iterator over the solutions of a grid.

    The input grid must already be valid; it is copied, so the caller's grid
    is never modified. Each yielded grid is an independent copy that stays
    valid after the solver moves on.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid.copy()
        self._stack: List[SearchFrame] = []
        self._complete_pending = False
        self._finished = False
        self.stats = SearchStats()

        first = self._grid.next_empty()
        if first is None:
            self._complete_pending = True
        else:
            self._push(first)
        _LOGGER.debug("search started with %d empty cells", SIZE * SIZE - self._grid.filled_count)

    def _push(self, loc: Location) -> None:
        self._stack.append(SearchFrame(loc, candidates(self._grid, loc)))

    @property
    def exhausted(self) -> bool:
        return not self._stack and not self._complete_pending

    def __iter__(self) -> Iterator[Grid]:
        return self

    def __next__(self) -> Grid:
        if self._complete_pending:
            self._complete_pending = False
            return self._emit()

        stack = self._stack
        while stack:
            frame = stack[-1]
            if not frame.candidates:
                stack.pop()
                self._grid.set(frame.location, EMPTY)
                self.stats.backtracks += 1
                continue

            digit = frame.candidates.pop()
            self._grid.set(frame.location, Cell.filled(digit))
            self.stats.placements += 1

            start = _after(frame.location)
            nxt = None if start is None else self._grid.next_empty(start)
            if nxt is None:
                return self._emit()
            self._push(nxt)

        if not self._finished:
            self._finished = True
            _LOGGER.debug(
                "search exhausted after %d solutions (%d placements, %d backtracks)",
                self.stats.solutions,
                self.stats.placements,
                self.stats.backtracks,
            )
        raise StopIteration

    def _emit(self) -> Grid:
        self.stats.solutions += 1
        _LOGGER.debug("solution %d found", self.stats.solutions)
        return self._grid.copy()


def solve(grid: Grid) -> Optional[Grid]:
    """First solution of ``grid`` or ``None`` if it has none."""
    return next(Solver(grid), None)


def count_solutions(grid: Grid, limit: Optional[int] = None) -> int:
    """Number of solutions of ``grid``, counting at most ``limit`` of them."""
    return sum(1 for _ in islice(Solver(grid), limit))
