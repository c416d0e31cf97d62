"""Settlers of the north pole: a game of life over open ground, trees and lumberyards."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence

from adventsolve.common import read_lines

OPEN = "."
TREES = "|"
LUMBERYARD = "#"
EMPTY = " "

Area = list[list[str]]


def parse_area(lines: Iterable[str], size: int) -> Area:
    """A ``size`` by ``size`` area; cells the input does not reach stay empty."""
    if size < 0:
        raise ValueError("area size must not be negative")
    area = [[EMPTY] * size for _ in range(size)]
    for row, line in enumerate(lines):
        if not line:
            continue
        if row >= size or len(line) > size:
            raise ValueError(f"input does not fit in a {size}x{size} area")
        area[row][: len(line)] = list(line)
    return area


def count_neighbours(area: Area, row: int, col: int) -> tuple[int, int]:
    """Lumberyards and trees among the up to eight cells around ``(row, col)``."""
    lumberyards = trees = 0
    for r in range(max(row - 1, 0), min(row + 2, len(area))):
        cells = area[r]
        for c in range(max(col - 1, 0), min(col + 2, len(cells))):
            if r == row and c == col:
                continue
            if cells[c] == TREES:
                trees += 1
            elif cells[c] == LUMBERYARD:
                lumberyards += 1
    return lumberyards, trees


def _next_cell(cell: str, lumberyards: int, trees: int) -> str:
    if cell == OPEN:
        return TREES if trees > 2 else OPEN
    if cell == TREES:
        return LUMBERYARD if lumberyards > 2 else TREES
    if cell == LUMBERYARD:
        return LUMBERYARD if lumberyards > 0 and trees > 0 else OPEN
    return cell


def step(area: Area) -> Area:
    """The area one minute later; every cell changes at the same time."""
    return [
        [_next_cell(cell, *count_neighbours(area, row, col)) for col, cell in enumerate(cells)]
        for row, cells in enumerate(area)
    ]


def _counts(area: Area) -> tuple[int, int, int]:
    cells = [cell for row in area for cell in row]
    return cells.count(OPEN), cells.count(TREES), cells.count(LUMBERYARD)


def _simulate(area: Area, minutes: int) -> Iterator[Area]:
    for _ in range(minutes):
        area = step(area)
        yield area


def resource_value(lines: Iterable[str], size: int, minutes: int) -> int:
    """Wooded acres times lumberyards after the given number of minutes."""
    area = parse_area(lines, size)
    for area in _simulate(area, minutes):
        pass
    _, trees, lumberyards = _counts(area)
    return trees * lumberyards


def _report_repeats(area: Area, minutes: int) -> Area:
    seen: dict[int, int] = {}
    for minute, area in enumerate(_simulate(area, minutes)):
        open_acres, trees, lumberyards = _counts(area)
        fingerprint = open_acres * lumberyards * trees
        previous = seen.get(fingerprint, 0)
        if previous > 0:
            print("We have a match at:", minute, previous)
        seen[fingerprint] = minute
    return area


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-grid", "--grid", type=int, default=10,
                        help="Size of the grid in squares")
    parser.add_argument("-minutes", "--minutes", type=int, default=10,
                        help="Number of minutes to play")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day18 do you want to calc (a or b)")
    args = parser.parse_args(argv)

    if args.part == "a":
        value = resource_value(read_lines(args.file), args.grid, args.minutes)
        print("Part a - Lumber Resource Value:", value)
    elif args.part == "b":
        area = parse_area(read_lines(args.file), args.grid)
        final = _report_repeats(area, args.minutes)
        _, trees, lumberyards = _counts(final)
        print("Part b - Lumber Resource Value:", trees * lumberyards)
    else:
        print("Bad part choice. Available choices are 'a' and 'b'")