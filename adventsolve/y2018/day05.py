"""Alchemical reduction: react polymers of units with opposite polarity."""

from __future__ import annotations

import argparse
import string
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from adventsolve.common import read_lines


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


def _reacts(first: str, second: str) -> bool:
    return first != second and first.lower() == second.lower()


def react_once(polymer: str) -> tuple[bool, str]:
    """One left-to-right pass removing reacting neighbour pairs.

    Returns whether anything was destroyed and the remaining polymer.
    """
    remaining: list[str] = []
    destroyed = False
    index = 0
    while index < len(polymer):
        if index + 1 < len(polymer) and _reacts(polymer[index], polymer[index + 1]):
            destroyed = True
            index += 2
        else:
            remaining.append(polymer[index])
            index += 1
    return destroyed, "".join(remaining)


def react(polymer: str) -> str:
    """The polymer left once no more units can react."""
    stack: list[str] = []
    for unit in polymer:
        if stack and _reacts(stack[-1], unit):
            stack.pop()
        else:
            stack.append(unit)
    return "".join(stack)


def remove_unit(polymer: str, unit: str) -> str:
    """Remove every unit of the given type, in either polarity."""
    return polymer.replace(unit.lower(), "").replace(unit.upper(), "")


def shortest_improved(polymer: str) -> int:
    """Shortest fully reacted length after removing one unit type."""
    return min(
        [len(polymer)]
        + [len(react(remove_unit(polymer, letter))) for letter in string.ascii_lowercase]
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day05 do you want to calc (a or b)")
    parser.add_argument("-cpuprofile", "--cpuprofile", default="",
                        help="write cpu time to file")
    args = parser.parse_args(argv)

    with _cpu_timer(args.cpuprofile):
        if args.part == "a":
            polymer = read_lines(args.file)[0]
            print("Part a - Length of Polymer:", len(react(polymer)))
        elif args.part == "b":
            polymer = read_lines(args.file)[0]
            print("Part b - After removing one type, shortest polymer:",
                  shortest_improved(polymer))
        else:
            print("Bad part choice. Available choices are 'a' and 'b'")