from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from . import constraints
from .model import BOX_SIZE, EMPTY, SIZE, Cell, Location, locations


class Grid:
    """Mutable 9x9 board mapping each location to a cell, in row-major order."""

    def __init__(self, cells: Optional[Dict[Location, Cell]] = None) -> None:
        self._cells: Dict[Location, Cell] = {loc: EMPTY for loc in locations()}
        if cells:
            for loc, cell in cells.items():
                self._cells[loc] = cell

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> "Grid":
        """Build a grid from nine rows of digits, ``0`` or ``None`` meaning empty."""
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("expected 9 rows of 9 values")
        grid = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value:
                    grid.set(Location(r, c), Cell.filled(value))
        return grid

    def get(self, loc: Location) -> Cell:
        return self._cells[loc]

    def set(self, loc: Location, cell: Cell) -> None:
        self._cells[loc] = cell

    __getitem__ = get
    __setitem__ = set

    def copy(self) -> "Grid":
        return Grid(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def key(self) -> str:
        """Hashable snapshot of the grid contents."""
        return "".join(str(cell) for cell in self._cells.values())

    def is_valid(self) -> bool:
        return all(constraints.are_distinct(self, unit) for unit in constraints.units())

    def is_complete(self) -> bool:
        return not any(cell.is_empty for cell in self._cells.values())

    @property
    def filled_count(self) -> int:
        return sum(1 for cell in self._cells.values() if not cell.is_empty)

    def empty_locations(self) -> Iterator[Location]:
        return (loc for loc, cell in self._cells.items() if cell.is_empty)

    def next_empty(self, start: Optional[Location] = None) -> Optional[Location]:
        """First empty location at or after ``start`` in row-major order."""
        for loc in locations(start):
            if self._cells[loc].is_empty:
                return loc
        return None

    def rows(self) -> List[List[Cell]]:
        return [[self._cells[Location(r, c)] for c in range(SIZE)] for r in range(SIZE)]

    def render(self, boxed: bool = False) -> str:
        lines = ["".join(str(cell) for cell in row) for row in self.rows()]
        if not boxed:
            return "\n".join(lines)
        return "\n".join(_boxed_lines(lines))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid({self.key()!r})"


def _boxed_lines(lines: Iterable[str]) -> Iterator[str]:
    border = "+" + "+".join(["-" * (2 * BOX_SIZE + 1)] * (SIZE // BOX_SIZE)) + "+"
    for r, line in enumerate(lines):
        if r % BOX_SIZE == 0:
            yield border
        chunks = [line[i:i + BOX_SIZE] for i in range(0, SIZE, BOX_SIZE)]
        yield "| " + " | ".join(" ".join(chunk) for chunk in chunks) + " |"
    yield border
