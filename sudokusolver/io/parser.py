from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable

import yaml

from ..core.grid import Grid
from ..core.model import EMPTY_CHAR, SIZE, Cell, Location
from .errors import (
    BadLineLength,
    IllegalCharacter,
    InvalidPuzzle,
    ParseError,
    TooFewLines,
    TooManyLines,
)

_LOGGER = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
OPTION_KEYS = {"max_solutions", "boxed", "log_level"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PuzzleFile:
    grid: Grid
    options: Dict[str, Any] = field(default_factory=dict)
    source: str | None = None


def parse_grid(lines: Iterable[str]) -> Grid:
    """Parse nine lines of ``1``-``9``/``X`` into a validated grid.

    ``lines`` is consumed lazily and reading stops at the first error, so an
    open file can be handed in directly.
    """
    grid = Grid()
    count = 0
    for row, line in enumerate(lines):
        if row >= SIZE:
            raise TooManyLines()
        line = line.rstrip("\r\n")
        if len(line) != SIZE:
            raise BadLineLength(row + 1, len(line))
        for col, char in enumerate(line):
            if char == EMPTY_CHAR:
                continue
            if not ("1" <= char <= "9"):
                raise IllegalCharacter(char, row + 1, col + 1)
            grid.set(Location(row, col), Cell.filled(int(char)))
        count += 1

    if count < SIZE:
        raise TooFewLines(count)
    if not grid.is_valid():
        raise InvalidPuzzle()
    _LOGGER.debug("parsed puzzle with %d given cells", grid.filled_count)
    return grid


def parse_text(text: str) -> Grid:
    return parse_grid(text.splitlines())


def _check_options(path: Path, options: Any) -> Dict[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, dict):
        raise ParseError(f"{path}: 'options' must be a mapping")
    limit = options.get("max_solutions")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        raise ParseError(f"{path}: 'max_solutions' must be a non-negative integer, got {limit!r}")
    boxed = options.get("boxed")
    if boxed is not None and not isinstance(boxed, bool):
        raise ParseError(f"{path}: 'boxed' must be true or false, got {boxed!r}")
    level = options.get("log_level")
    if level is not None and (not isinstance(level, str) or level.upper() not in LOG_LEVELS):
        raise ParseError(f"{path}: 'log_level' must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    for key in options.keys() - OPTION_KEYS:
        _LOGGER.warning("%s: ignoring unknown option %r", path, key)
    return dict(options)


def load_puzzle(path: str | Path) -> PuzzleFile:
    """Load a puzzle from a plain text file or a YAML document.

    Undecodable or malformed content is reported as :class:`ParseError`;
    failures to open the file propagate as :class:`OSError`.
    """
    path = Path(path)
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict) or "puzzle" not in data:
                raise ParseError(f"{path}: missing 'puzzle' key")
            rows = data["puzzle"]
            if isinstance(rows, str):
                rows = rows.splitlines()
            elif not isinstance(rows, list):
                raise ParseError(f"{path}: 'puzzle' must be a list of rows or a block of text")
            grid = parse_grid(str(row) for row in rows)
            options = _check_options(path, data.get("options"))
        else:
            with open(path, "r", encoding="utf-8") as f:
                grid = parse_grid(f)
            options = {}
    except (UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ParseError(f"Error reading file: {exc}") from exc

    return PuzzleFile(grid=grid, options=options, source=str(path))
