from pathlib import Path

import pytest

from sudokusolver.core.model import Cell, Location
from sudokusolver.io.errors import (
    BadLineLength,
    IllegalCharacter,
    InvalidPuzzle,
    ParseError,
    TooFewLines,
    TooManyLines,
)
from sudokusolver.io.parser import load_puzzle, parse_grid, parse_text

PUZZLES = Path(__file__).resolve().parents[1] / "puzzles"

VALID = [
    "3X65X84XX",
    "52XXXXXXX",
    "X87XXXX31",
    "XX3X1XX8X",
    "9XX863XX5",
    "X5XX9X6XX",
    "13XXXX25X",
    "XXXXXXX74",
    "XX52X63XX",
]


def test_parse_valid_grid():
    grid = parse_grid(VALID)
    assert grid.filled_count == 81 - 49
    assert grid.get(Location(0, 0)) == Cell.filled(3)
    assert grid.get(Location(0, 1)).is_empty
    assert grid.render() == "\n".join(VALID)


def test_parse_text_strips_line_endings():
    grid = parse_text("\r\n".join(VALID) + "\r\n")
    assert grid.render().splitlines() == VALID


def test_short_line_is_bad_length():
    lines = list(VALID)
    lines[4] = lines[4][:8]
    with pytest.raises(BadLineLength) as info:
        parse_grid(lines)
    assert info.value.line_number == 5
    assert info.value.length == 8
    assert "exactly 9 characters" in str(info.value)


def test_length_checked_before_characters():
    lines = list(VALID)
    lines[0] = "3X65X84?"
    with pytest.raises(BadLineLength):
        parse_grid(lines)


def test_errors_reported_in_scan_order():
    lines = list(VALID)
    lines[1] = "52XXXX0XX"
    lines[6] = "13XX"
    with pytest.raises(IllegalCharacter) as info:
        parse_grid(lines)
    assert info.value.char == "0"
    assert (info.value.line_number, info.value.column) == (2, 7)


def test_lowercase_x_is_illegal():
    lines = list(VALID)
    lines[8] = "xX52X63XX"
    with pytest.raises(IllegalCharacter, match="Illegal character: x"):
        parse_grid(lines)


def test_too_few_lines():
    with pytest.raises(TooFewLines) as info:
        parse_grid(VALID[:8])
    assert info.value.count == 8


def test_too_many_lines_stops_reading():
    def lines():
        yield from VALID
        yield "7XXXXXXXX"
        raise AssertionError("read past the tenth line")

    with pytest.raises(TooManyLines):
        parse_grid(lines())


def test_repeated_digit_is_invalid_puzzle():
    lines = list(VALID)
    lines[8] = "5X52X63XX"
    with pytest.raises(InvalidPuzzle, match="invalid"):
        parse_grid(lines)


def test_all_errors_are_parse_errors():
    for exc in (BadLineLength(1, 3), IllegalCharacter("a", 1, 1), TooFewLines(0), TooManyLines(), InvalidPuzzle()):
        assert isinstance(exc, ParseError)
        assert isinstance(exc, ValueError)


def test_load_text_puzzle():
    puzzle = load_puzzle(PUZZLES / "classic.txt")
    assert puzzle.grid.filled_count == 22
    assert puzzle.options == {}
    assert puzzle.source.endswith("classic.txt")


def test_load_yaml_puzzle():
    puzzle = load_puzzle(PUZZLES / "classic.yaml")
    assert puzzle.grid == load_puzzle(PUZZLES / "classic.txt").grid
    assert puzzle.options == {"boxed": True}


def test_load_yaml_block_string():
    puzzle = load_puzzle(PUZZLES / "two_solutions.yaml")
    assert puzzle.grid.filled_count == 77
    assert puzzle.options["max_solutions"] == 10


def test_yaml_without_puzzle_key(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("options:\n  boxed: true\n", encoding="utf-8")
    with pytest.raises(ParseError, match="missing 'puzzle'"):
        load_puzzle(path)


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_puzzle(tmp_path / "nope.txt")


def _write_yaml(tmp_path, options):
    rows = "".join(f"  - {row}\n" for row in VALID)
    path = tmp_path / "puzzle.yaml"
    path.write_text(f"puzzle:\n{rows}options:\n{options}", encoding="utf-8")
    return path


def test_yaml_options_accepted(tmp_path):
    path = _write_yaml(tmp_path, "  max_solutions: 0\n  boxed: false\n  log_level: debug\n")
    assert load_puzzle(path).options == {"max_solutions": 0, "boxed": False, "log_level": "debug"}


@pytest.mark.parametrize(
    "options, message",
    [
        ("  max_solutions: all\n", "max_solutions"),
        ("  max_solutions: -2\n", "max_solutions"),
        ("  max_solutions: true\n", "max_solutions"),
        ('  boxed: "no"\n', "boxed"),
        ("  log_level: loud\n", "log_level"),
        ("  log_level: 10\n", "log_level"),
        ("  - boxed\n", "mapping"),
    ],
)
def test_yaml_options_rejected(tmp_path, options, message):
    with pytest.raises(ParseError, match=message):
        load_puzzle(_write_yaml(tmp_path, options))


def test_yaml_puzzle_must_be_rows(tmp_path):
    path = tmp_path / "scalar.yaml"
    path.write_text("puzzle: 5\n", encoding="utf-8")
    with pytest.raises(ParseError, match="list of rows"):
        load_puzzle(path)


def test_malformed_yaml_is_parse_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("puzzle: [unclosed\n", encoding="utf-8")
    with pytest.raises(ParseError, match="Error reading file"):
        load_puzzle(path)


@pytest.mark.parametrize("name", ["bad.txt", "bad.yaml"])
def test_undecodable_file_is_parse_error(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"puzzle: \xff\n")
    with pytest.raises(ParseError, match="Error reading file"):
        load_puzzle(path)
