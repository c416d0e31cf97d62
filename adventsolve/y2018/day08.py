"""Memory maneuver: walk the licence tree for metadata sums and node values."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence

from adventsolve.common import read_lines, to_ints


def parse_license(text: str) -> list[int]:
    """Split the licence text into its numbers."""
    return to_ints(text.split())


def _take(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError("licence data ends in the middle of a node") from None


def _metadata_total(numbers: Iterator[int]) -> int:
    children, entries = _take(numbers), _take(numbers)
    total = sum(_metadata_total(numbers) for _ in range(children))
    return total + sum(_take(numbers) for _ in range(entries))


def _value(numbers: Iterator[int]) -> int:
    children, entries = _take(numbers), _take(numbers)
    if children <= 0:
        return sum(_take(numbers) for _ in range(entries))
    child_values = [_value(numbers) for _ in range(children)]
    metadata = [_take(numbers) for _ in range(entries)]
    return sum(child_values[ref - 1] for ref in metadata if 0 < ref <= children)


def metadata_sum(numbers: Iterable[int]) -> int:
    """Sum of every metadata entry in the tree rooted at the first node."""
    return _metadata_total(iter(numbers))


def node_value(numbers: Iterable[int]) -> int:
    """Value of the root node.

    A node without children is worth the sum of its metadata; otherwise each
    metadata entry refers to a child (from 1) whose value is added, and entries
    that refer to no child are skipped.
    """
    return _value(iter(numbers))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day08 do you want to calc (a or b)")
    args = parser.parse_args(argv)

    if args.part == "a":
        numbers = parse_license(read_lines(args.file)[0])
        print("Part a - License File checksum:", metadata_sum(numbers))
    elif args.part == "b":
        numbers = parse_license(read_lines(args.file)[0])
        print("Part b - License File checksum:", node_value(numbers))
    else:
        print("Bad part choice. Available choices are 'a' and 'b'")