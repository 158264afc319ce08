import pytest

from sudokusolver.core.model import EMPTY, Cell, Location, locations


def test_cell_hash_and_eq():
    c1 = Cell.filled(5)
    c2 = Cell.filled(5)
    assert c1 == c2
    assert hash(c1) == hash(c2)
    assert c1 != EMPTY
    assert EMPTY.is_empty
    assert str(EMPTY) == "X"
    assert str(c1) == "5"


@pytest.mark.parametrize("digit", [0, 10, -1])
def test_cell_rejects_out_of_range_digit(digit):
    with pytest.raises(ValueError):
        Cell.filled(digit)


def test_location_box_and_bounds():
    assert Location(0, 0).box == (0, 0)
    assert Location(4, 8).box == (1, 2)
    assert Location(8, 3).box == (2, 1)
    with pytest.raises(ValueError):
        Location(9, 0)
    with pytest.raises(ValueError):
        Location(0, -1)


def test_locations_row_major():
    locs = list(locations())
    assert len(locs) == 81
    assert locs[0] == Location(0, 0)
    assert locs[1] == Location(0, 1)
    assert locs[9] == Location(1, 0)
    assert list(locations(Location(8, 7))) == [Location(8, 7), Location(8, 8)]
