"""Fabric claims: count doubly claimed squares and find the intact claim."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import product

from adventsolve.common import read_lines

_CLAIM = re.compile(r"\s*#(\d+)\s*@\s*(\d+),(\d+):\s*(\d+)x(\d+)\s*$")


@dataclass(frozen=True)
class Claim:
    """A rectangle of fabric claimed by one elf."""

    id: int
    left: int
    top: int
    width: int
    height: int


def parse_claim(line: str) -> Claim:
    """Parse a claim such as ``#123 @ 3,2: 5x4``."""
    match = _CLAIM.match(line)
    if match is None:
        raise ValueError(f"malformed claim: {line!r}")
    return Claim(*(int(group) for group in match.groups()))


def _squares(claim: Claim) -> Iterator[tuple[int, int]]:
    return product(
        range(claim.left, claim.left + claim.width),
        range(claim.top, claim.top + claim.height),
    )


def _coverage(claims: Iterable[Claim]) -> Counter[tuple[int, int]]:
    coverage: Counter[tuple[int, int]] = Counter()
    for claim in claims:
        coverage.update(_squares(claim))
    return coverage


def overlap_area(claims: Iterable[Claim]) -> int:
    """Number of square inches covered by two or more claims."""
    return sum(1 for count in _coverage(claims).values() if count > 1)


def intact_claim(claims: Iterable[Claim]) -> int | None:
    """Highest id of a claim that overlaps no other claim, or ``None``."""
    claim_list = list(claims)
    coverage = _coverage(claim_list)
    intact = [
        claim.id
        for claim in claim_list
        if all(coverage[square] == 1 for square in _squares(claim))
    ]
    return max(intact, default=None)


def _load_claims(path: str) -> list[Claim]:
    return [parse_claim(line) for line in read_lines(path) if line.strip()]


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day03 do you want to calc (a or b)")
    args = parser.parse_args(argv)
    if args.part == "a":
        print("Square inches in two or more claims:", overlap_area(_load_claims(args.file)))
    elif args.part == "b":
        print("The only good Elf is:", intact_claim(_load_claims(args.file)))