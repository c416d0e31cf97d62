"""Chocolate charts: the elves' recipe scoreboard."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from itertools import islice


def _recipes() -> Iterator[int]:
    """Yield every recipe score on the scoreboard, in order, forever."""
    board = [3, 7]
    yield from board
    first, second = 0, 1
    while True:
        total = board[first] + board[second]
        new = divmod(total, 10) if total >= 10 else (total,)
        for digit in new:
            board.append(digit)
            yield digit
        first = (first + 1 + board[first]) % len(board)
        second = (second + 1 + board[second]) % len(board)


def _format_board(scores: Sequence[int]) -> str:
    return " ".join(str(score) for score in scores)


def scores_after(recipes: int, count: int) -> str:
    """Digits of the ``count`` recipe scores that follow the first ``recipes``."""
    if recipes < 0 or count < 0:
        raise ValueError("recipe counts must not be negative")
    return "".join(str(score) for score in islice(_recipes(), recipes, recipes + count))


def recipes_before(pattern: str) -> int:
    """Number of recipes on the board before ``pattern`` first appears."""
    if not pattern or not pattern.isdigit():
        raise ValueError(f"pattern must be a non-empty string of digits: {pattern!r}")
    target = [int(char) for char in pattern]
    window: deque[int] = deque(maxlen=len(target))
    for index, score in enumerate(_recipes()):
        window.append(score)
        if len(window) == len(target) and list(window) == target:
            return index - len(target) + 1
    raise AssertionError("scoreboard is infinite")


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-recipes", "--recipes", type=int, default=10,
                        help="Number of recipes to make prior to answer")
    parser.add_argument("-answers", "--answers", type=int, default=10,
                        help="Number of answers to make following the recipes")
    parser.add_argument("-result", "--result", default="51589",
                        help="part b ONLY: this is the answer to look for")
    parser.add_argument("-print", "--print", dest="print_board", action="store_true",
                        help="Print the recipe board")
    parser.add_argument("-part", "--part", default="a",
                        help="Part of the puzzle to work on. a or b")
    args = parser.parse_args(argv)

    if args.part == "a":
        if args.print_board:
            total = args.recipes + args.answers
            print(_format_board(list(islice(_recipes(), total))))
        print("Part a - Ten recipes following on:",
              scores_after(args.recipes, args.answers))
    elif args.part == "b":
        print("Part b - Recipes before given answer:", recipes_before(args.result))
    else:
        print("Bad part choice. Available choices are 'a' and 'b'")