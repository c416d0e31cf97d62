"""Spiral memory: distances and neighbour sums on a square spiral."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import islice

from adventsolve.common import BAD_PART_MESSAGE, manhattan_distance, parse_puzzle_args

PUZZLE_INPUT = 368078

# Right, up, left, down; y grows downwards.
_DIRECTIONS = ((1, 0), (0, -1), (-1, 0), (0, 1))


def _spiral() -> Iterator[tuple[int, int]]:
    """Yield the squares of the spiral in allocation order, starting at the origin."""
    x = y = 0
    visited = {(x, y)}
    yield x, y
    heading = 0
    while True:
        dx, dy = _DIRECTIONS[heading]
        x, y = x + dx, y + dy
        visited.add((x, y))
        yield x, y
        tx, ty = _DIRECTIONS[(heading + 1) % 4]
        if (x + tx, y + ty) not in visited:
            heading = (heading + 1) % 4


def spiral_distance(value: int) -> int:
    """Steps from square ``value`` back to square 1."""
    if value < 1:
        return 0
    x, y = next(islice(_spiral(), value - 1, None))
    return manhattan_distance(0, 0, x, y)


def first_larger_adjacent_sum(value: int) -> int:
    """First neighbour-sum written to the spiral that exceeds ``value``."""
    squares = _spiral()
    written = {next(squares): 1}
    for x, y in squares:
        total = sum(
            written.get((x + dx, y + dy), 0)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx or dy
        )
        written[x, y] = total
        if total > value:
            return total
    raise AssertionError("spiral is infinite")


def solve(value: int, part: str) -> int:
    return spiral_distance(value) if part == "a" else first_larger_adjacent_sum(value)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {solve(PUZZLE_INPUT, args.part)}")