"""Chronal calibration: sum frequency changes and find the first repeat."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import accumulate

from adventsolve.common import read_lines, to_ints


def total_frequency(changes: Iterable[int]) -> int:
    """Frequency reached after applying every change once, starting from 0."""
    return sum(changes)


def _check_repeat_possible(deltas: list[int]) -> None:
    running = list(accumulate(deltas))
    drift = running[-1]
    if drift and len({value % abs(drift) for value in running}) == len(running):
        raise ValueError("the frequency never repeats")


def first_repeated_frequency(changes: Iterable[int]) -> int:
    """First non-zero running frequency reached twice while cycling the changes.

    The starting frequency of 0 is not counted as seen. Reaching a repeated 0
    restarts the list of changes from its beginning.
    """
    deltas = list(changes)
    if not deltas:
        raise ValueError("no frequency changes given")
    _check_repeat_possible(deltas)
    frequency = 0
    seen: set[int] = set()
    while True:
        for delta in deltas:
            frequency += delta
            if frequency in seen:
                if frequency != 0:
                    return frequency
                break
            seen.add(frequency)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input numbers")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day01 do you want to calc (a or b)")
    args = parser.parse_args(argv)
    changes = to_ints(read_lines(args.file))
    if args.part == "a":
        print("Part A - Resulting Frequency:", total_frequency(changes))
    else:
        print("Part B - Resulting Frequency:", first_repeated_frequency(changes))