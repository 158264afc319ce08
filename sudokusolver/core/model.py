from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, SIZE + 1)
EMPTY_CHAR = "X"


@dataclass(frozen=True)
class Cell:
    """Content of one grid position: empty, or a digit from 1 to 9."""
    digit: Optional[int] = None

    @classmethod
    def filled(cls, digit: int) -> "Cell":
        if digit not in DIGITS:
            raise ValueError(f"digit out of range: {digit!r}")
        return cls(digit)

    @property
    def is_empty(self) -> bool:
        return self.digit is None

    def __str__(self) -> str:
        return EMPTY_CHAR if self.digit is None else str(self.digit)


EMPTY = Cell()


@dataclass(frozen=True)
class Location:
    """Row/column address of a cell, both zero-based."""
    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.col < SIZE):
            raise ValueError(f"location out of range: ({self.row}, {self.col})")

    @property
    def box(self) -> Tuple[int, int]:
        return self.row // BOX_SIZE, self.col // BOX_SIZE


_ROW_MAJOR = tuple(Location(r, c) for r in range(SIZE) for c in range(SIZE))


def locations(start: Optional[Location] = None) -> Iterator[Location]:
    """Yield locations in row-major order, beginning at ``start`` inclusive."""
    first = 0 if start is None else start.row * SIZE + start.col
    return iter(_ROW_MAJOR[first:])
