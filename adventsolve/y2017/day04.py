"""High-entropy passphrases: reject repeated words and, in part b, anagrams."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations
from os import PathLike

from adventsolve.common import BAD_PART_MESSAGE, parse_puzzle_args, read_lines


def is_anagram(first: str, second: str) -> bool:
    """True when every letter of ``first`` occurs as often in ``second``."""
    second_counts = Counter(second)
    return all(second_counts[letter] == count for letter, count in Counter(first).items())


def is_valid_passphrase(passphrase: str, part: str) -> bool:
    """Check a space-separated passphrase against the rules of the given part."""
    words = passphrase.split(" ")
    if len(set(words)) != len(words):
        return False
    if part == "a":
        return True
    return not any(
        len(first) == len(second) and second != "" and is_anagram(first, second)
        for first, second in combinations(words, 2)
    )


def count_valid(path: str | PathLike[str], part: str) -> int:
    """Number of valid passphrases in the input file."""
    return sum(is_valid_passphrase(line, part) for line in read_lines(path))


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {count_valid(args.file, args.part)}")