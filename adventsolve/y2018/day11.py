"""Chronal charge: find the fuel cell square with the most power."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

# Square sizes in part b never reach past this coordinate.
_SQUARE_LIMIT = 300


@contextmanager
def _cpu_timer(path: str) -> Iterator[None]:
    """Write the CPU time spent inside the block to ``path`` when given."""
    if not path:
        yield
        return
    start = time.process_time()
    try:
        yield
    finally:
        elapsed = time.process_time() - start
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"cpu seconds: {elapsed:.6f}\n")


def power_level(x: int, y: int, serial: int) -> int:
    """Power of the fuel cell at ``(x, y)`` for the grid serial number."""
    rack = x + 10
    level = (rack * y + serial) * rack
    hundreds = abs(level) // 100 % 10
    return (hundreds if level >= 0 else -hundreds) - 5


def power_grid(serial: int, grid_size: int) -> list[list[int]]:
    """Power levels indexed ``[x][y]``; row and column 0 are unused and zero."""
    return [
        [power_level(x, y, serial) if x and y else 0 for y in range(grid_size)]
        for x in range(grid_size)
    ]


def _summed_area(grid: list[list[int]]) -> list[list[int]]:
    size = len(grid)
    sums = [[0] * (size + 1) for _ in range(size + 1)]
    for x, column in enumerate(grid):
        running = 0
        for y, value in enumerate(column):
            running += value
            sums[x + 1][y + 1] = sums[x][y + 1] + running
    return sums


def _square_power(sums: list[list[int]], x: int, y: int, size: int) -> int:
    return sums[x + size][y + size] - sums[x][y + size] - sums[x + size][y] + sums[x][y]


def _best_size(sums: list[list[int]], x: int, y: int, limit: int) -> tuple[int, int]:
    best_power = best_size = 0
    size = 3
    while x + size < limit and y + size < limit:
        power = _square_power(sums, x, y, size)
        if power > best_power:
            best_power, best_size = power, size
        size += 1
    return best_power, best_size


def best_square(serial: int, grid_size: int, part: str) -> tuple[int, int, int]:
    """Top-left ``x``, ``y`` and size of the most powerful square.

    Part ``"a"`` looks at 3x3 squares only; any other part tries every size
    from 3 up. Only squares with positive power count; with none, the result
    is ``(0, 0, size)``.
    """
    grid = power_grid(serial, grid_size)
    sums = _summed_area(grid)
    limit = min(_SQUARE_LIMIT, grid_size)
    best_x = best_y = 0
    best_power = 0
    best_size = 3 if part == "a" else 0
    for y in range(1, grid_size - 2):
        for x in range(1, grid_size - 2):
            if part == "a":
                power, size = _square_power(sums, x, y, 3), 3
            else:
                power, size = _best_size(sums, x, y, limit)
            if power > best_power:
                best_x, best_y, best_power, best_size = x, y, power, size
    return best_x, best_y, best_size


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-puzzle", "--puzzle", type=int, default=7165,
                        help="Puzzle input value")
    parser.add_argument("-grid", "--grid", type=int, default=300,
                        help="Size of grid to calc power values for")
    parser.add_argument("-x", "--x", type=int, default=10, help="xcoord to print")
    parser.add_argument("-y", "--y", type=int, default=10, help="y coord to print")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day11 do you want to calc (a or b)")
    parser.add_argument("-cpuprofile", "--cpuprofile", default="",
                        help="write cpu time to file")
    args = parser.parse_args(argv)

    with _cpu_timer(args.cpuprofile):
        if args.part == "a":
            x, y, _ = best_square(args.puzzle, args.grid, "a")
            print("Part a - Coords of the highest power 3x3:", x, y)
        elif args.part == "b":
            x, y, size = best_square(args.puzzle, args.grid, "b")
            print("Part b - Coords of the highest power 3x3:", x, y, size)
        else:
            print("Bad part choice. Available choices are 'a' and 'b'")