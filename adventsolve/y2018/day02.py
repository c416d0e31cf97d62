"""Inventory management: box ID checksum and the two nearly identical IDs."""

from __future__ import annotations

import argparse
import string
from collections import Counter
from collections.abc import Iterable, Sequence

from adventsolve.common import read_lines

NOT_FOUND = "No IDs Found"


def box_checksum(ids: Iterable[str]) -> int:
    """IDs with some letter exactly twice times IDs with some letter exactly thrice."""
    doubles = triples = 0
    for box_id in ids:
        counts = Counter(c for c in box_id if c in string.ascii_lowercase).values()
        doubles += 2 in counts
        triples += 3 in counts
    return doubles * triples


def find_close_ids(ids: Iterable[str]) -> tuple[str, str] | None:
    """First pair of IDs differing in exactly one position, or ``None``."""
    boxes = list(ids)
    for first in boxes:
        for second in boxes:
            if first == second:
                continue
            if len(second) < len(first):
                raise ValueError(f"box id {second!r} is shorter than {first!r}")
            if sum(a != b for a, b in zip(first, second)) == 1:
                return first, second
    return None


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day02 do you want to calc (a or b)")
    args = parser.parse_args(argv)
    ids = read_lines(args.file)
    if args.part == "a":
        print("Part A - CheckSum is:", box_checksum(ids))
    else:
        pair = find_close_ids(ids) or (NOT_FOUND, NOT_FOUND)
        print("Part B - Prototype Clothing is in:", *pair)