"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from itertools import islice

from ..core.solver import Solver
from . import parser
from .errors import ParseError

PACKAGE_NAME = "sudoku-solver"

_LOGGER = logging.getLogger(__name__)


class CliError(Exception):
    """Fatal condition reported to the user before exiting."""


def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        # running from a source checkout that was never installed
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=PACKAGE_NAME, description="Enumerate every solution of a 9x9 Sudoku")
    ap.add_argument("puzzle", nargs="?", help="Path to a puzzle file (text or YAML), '-' for stdin")
    ap.add_argument("--version", action="store_true", help="Print the version and exit")
    ap.add_argument("--max-solutions", type=int, default=None, help="Stop after this many solutions")
    ap.add_argument(
        "--boxed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw box borders around solutions (overrides the puzzle file's 'boxed' option)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("sudokusolver")
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())


def _load(path: str) -> parser.PuzzleFile:
    if path == "-":
        try:
            return parser.PuzzleFile(grid=parser.parse_grid(sys.stdin), source="<stdin>")
        except UnicodeDecodeError as exc:
            raise CliError(f"Error reading file: {exc}") from exc
    try:
        return parser.load_puzzle(path)
    except OSError as exc:
        raise CliError(f"Cannot open {path}: {exc.strerror or exc}") from exc


def run(args: argparse.Namespace) -> None:
    if args.puzzle is None:
        raise CliError("Input file name not specified")
    if args.max_solutions is not None and args.max_solutions < 0:
        raise CliError(f"--max-solutions must not be negative, got {args.max_solutions}")

    if args.verbose:
        _configure_logging("DEBUG")
    puz = _load(args.puzzle)
    if not args.verbose:
        _configure_logging(puz.options.get("log_level", "WARNING"))

    limit = args.max_solutions if args.max_solutions is not None else puz.options.get("max_solutions")
    boxed = args.boxed if args.boxed is not None else puz.options.get("boxed", False)
    _LOGGER.info("solving %s (%d given cells)", puz.source, puz.grid.filled_count)

    found = 0
    for i, solution in enumerate(islice(Solver(puz.grid), limit), start=1):
        print(f" => Solution {i}:\n{solution.render(boxed=boxed)}\n")
        found = i
    _LOGGER.info("%d solution(s) printed", found)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.version:
        print(f"{PACKAGE_NAME} v{package_version()}")
        return 0

    try:
        run(args)
    except (CliError, ParseError) as exc:
        print(f" !=> Error:\n\t{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
