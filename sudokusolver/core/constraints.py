"""Row, column and box constraints expressed as digit presence tables."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .model import BOX_SIZE, SIZE, Location

PresenceTable = List[bool]

_ROWS = [tuple(Location(r, c) for c in range(SIZE)) for r in range(SIZE)]
_COLS = [tuple(Location(r, c) for r in range(SIZE)) for c in range(SIZE)]
_BOXES = {
    (br, bc): tuple(
        Location(br * BOX_SIZE + i, bc * BOX_SIZE + j)
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    )
    for br in range(SIZE // BOX_SIZE)
    for bc in range(SIZE // BOX_SIZE)
}


def row_locations(row: int) -> Sequence[Location]:
    return _ROWS[row]


def col_locations(col: int) -> Sequence[Location]:
    return _COLS[col]


def box_locations(box_row: int, box_col: int) -> Sequence[Location]:
    return _BOXES[box_row, box_col]


def units() -> List[Sequence[Location]]:
    """All 27 units: rows first, then columns, then boxes."""
    return _ROWS + _COLS + list(_BOXES.values())


def new_table() -> PresenceTable:
    return [False] * SIZE


def mark_present(grid, cells: Iterable[Location], table: PresenceTable) -> PresenceTable:
    """Mark the digits of every filled cell among ``cells`` in ``table``."""
    for loc in cells:
        digit = grid.get(loc).digit
        if digit is not None:
            table[digit - 1] = True
    return table


def are_distinct(grid, cells: Iterable[Location]) -> bool:
    """True if no digit occurs twice among the filled cells of ``cells``."""
    table = new_table()
    for loc in cells:
        digit = grid.get(loc).digit
        if digit is None:
            continue
        if table[digit - 1]:
            return False
        table[digit - 1] = True
    return True


def candidates(grid, loc: Location) -> List[int]:
    """Digits, ascending, that do not clash with the row, column or box of ``loc``."""
    table = new_table()
    mark_present(grid, row_locations(loc.row), table)
    mark_present(grid, col_locations(loc.col), table)
    mark_present(grid, box_locations(*loc.box), table)
    return [i + 1 for i, present in enumerate(table) if not present]
