"""A maze of twisty trampolines: count the jumps needed to leave the list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike

from adventsolve.common import BAD_PART_MESSAGE, parse_puzzle_args, read_lines, to_ints


def escape_steps(offsets: Iterable[int], part: str) -> int:
    """Number of jumps taken before the position leaves the end of the list.

    In part ``"a"`` every offset grows by one after it is used. In any other
    part an offset of three or more shrinks by one instead. The caller's
    offsets are left untouched.
    """
    jumps = list(offsets)
    if not jumps:
        raise ValueError("no jump offsets given")
    position = 0
    steps = 0
    while position < len(jumps):
        if position < 0:
            raise IndexError(f"jumped before the start of the list to {position}")
        movement = jumps[position]
        if part != "a" and movement >= 3:
            jumps[position] -= 1
        else:
            jumps[position] += 1
        position += movement
        steps += 1
    return steps


def solve(path: str | PathLike[str], part: str) -> int:
    """Read one offset per line and count the jumps to escape."""
    return escape_steps(to_ints(read_lines(path)), part)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {solve(args.file, args.part)}")