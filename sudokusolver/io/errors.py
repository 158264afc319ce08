"""Errors raised while reading a puzzle."""

from __future__ import annotations


class ParseError(ValueError):
    """Puzzle text could not be turned into a valid grid."""


class BadLineLength(ParseError):
    def __init__(self, line_number: int, length: int) -> None:
        super().__init__("Malformed line: line should have exactly 9 characters")
        self.line_number = line_number
        self.length = length


class IllegalCharacter(ParseError):
    def __init__(self, char: str, line_number: int, column: int) -> None:
        super().__init__(f"Illegal character: {char}")
        self.char = char
        self.line_number = line_number
        self.column = column


class TooFewLines(ParseError):
    def __init__(self, count: int) -> None:
        super().__init__("Malformed string: too few lines")
        self.count = count


class TooManyLines(ParseError):
    def __init__(self) -> None:
        super().__init__("Malformed string: too many lines")


class InvalidPuzzle(ParseError):
    def __init__(self) -> None:
        super().__init__("Input sudoku table is invalid")


__all__ = [
    "ParseError",
    "BadLineLength",
    "IllegalCharacter",
    "TooFewLines",
    "TooManyLines",
    "InvalidPuzzle",
]
