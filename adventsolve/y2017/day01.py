"""Inverse captcha: sum digits that match a digit further round the circle."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike

from adventsolve.common import BAD_PART_MESSAGE, parse_puzzle_args, read_lines


def captcha_sum(digits: str, offset: int) -> int:
    """Sum each digit that equals the digit ``offset`` places ahead (circular)."""
    if not digits:
        return 0
    size = len(digits)
    return sum(
        int(digit)
        for index, digit in enumerate(digits)
        if digit == digits[(index + offset) % size]
    )


def solve(path: str | PathLike[str], part: str) -> int:
    """Solve the puzzle for the first line of the input file."""
    digits = read_lines(path)[0]
    offset = 1 if part == "a" else len(digits) // 2
    return captcha_sum(digits, offset)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {solve(args.file, args.part)}")