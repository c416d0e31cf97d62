"""Shared helpers for the puzzle solvers: input reading, arguments and grids."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from os import PathLike
from typing import NamedTuple

VALID_PARTS = ("a", "b")
BAD_PART_MESSAGE = "Bad part choice. Available choices are 'a' and 'b'"


class PuzzleArgs(NamedTuple):
    """Command-line choices shared by the solvers."""

    file: str
    part: str | None
    debug: bool


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def parse_puzzle_args(argv: Sequence[str] | None = None) -> PuzzleArgs:
    """Parse the file, part and debug options.

    The part is ``"a"`` or ``"b"``; any other choice comes back as ``None``.
    """
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-file", "--file", dest="file", default="input",
        help="Filename containing the program to run",
    )
    parser.add_argument(
        "-part", "--part", dest="part", default="a",
        help="Which part of the puzzle do you want to calc (a or b)",
    )
    parser.add_argument(
        "-debug", "--debug", dest="debug", action="store_true",
        help="Turn debug on",
    )
    namespace = parser.parse_args(argv)
    part = namespace.part if namespace.part in VALID_PARTS else None
    return PuzzleArgs(namespace.file, part, namespace.debug)


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def to_ints(strings: Iterable[str]) -> list[int]:
    """Convert strings to integers; anything unparseable becomes 0."""
    return [_to_int(text) for text in strings]


def format_grid(rows: Iterable[Iterable[str]]) -> str:
    """Render rows of characters as text, one line per row."""
    return "".join("".join(row) + "\n" for row in rows)


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance between two points on a 2D grid."""
    return abs(x1 - x2) + abs(y1 - y2)