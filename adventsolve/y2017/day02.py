"""Corruption checksum over rows of whitespace-separated numbers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from os import PathLike

from adventsolve.common import BAD_PART_MESSAGE, parse_puzzle_args, read_lines, to_ints


def row_difference(row: str) -> int:
    """Difference between the largest and smallest value of a row."""
    values = to_ints(row.split())
    if not values:
        return 0
    return max(values) - min(values)


def row_divisor_quotient(row: str) -> int:
    """Quotient of the first pair of distinct values where one divides the other."""
    fields = row.split()
    for first, second in product(fields, repeat=2):
        if first == second:
            continue
        big, small = to_ints([first, second])
        if big <= small:
            big, small = small, big
        if big % small == 0:
            return big // small
    return 0


def checksum(path: str | PathLike[str], part: str) -> int:
    """Sum the per-row result for every line of the input file."""
    per_row = row_difference if part == "a" else row_divisor_quotient
    return sum(per_row(line) for line in read_lines(path))


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {checksum(args.file, args.part)}")