"""Marble mania: play the elves' marble game and report the winning score."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

TurnHook = Callable[[int, list[int], int], None]


def _format_board(elf: int, board: list[int], current: int) -> str:
    cells = "".join(
        f" ({marble}) " if index == current else f"  {marble}  "
        for index, marble in enumerate(board)
    )
    return f"[{elf}] {cells}"


def _play(players: int, last_marble: int, on_turn: TurnHook | None = None) -> int:
    if players < 1:
        raise ValueError("Minimum players: 1")
    scores = [0] * players
    board = [0]
    current = 0
    elf = 0
    for marble in range(1, last_marble + 1):
        if marble % 23 == 0:
            scores[elf] += marble
            position = current - 7
            if position < 0:
                position += len(board)
            scores[elf] += board.pop(position)
            current = position
        else:
            placed = (current + 2) % (len(board) + 1) or 1
            board.insert(placed, marble)
            current = placed
        if on_turn is not None:
            on_turn(elf + 1, board, current)
        elf = (elf + 1) % players
    return max(0, *scores)


def play_marbles(players: int, last_marble: int) -> int:
    """Highest score once the marble numbered ``last_marble`` has been played."""
    return _play(players, last_marble)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-players", "--players", type=int, default=9,
                        help="Number of players in the game")
    parser.add_argument("-marble", "--marble", type=int, default=25,
                        help="Value of last marble in the game")
    parser.add_argument("-print", "--print", dest="print_board", action="store_true",
                        help="Print the marble board as we go")
    parser.add_argument("-part", "--part", default="a",
                        help="Part of the puzzle to work on. a or b")
    args = parser.parse_args(argv)

    if args.players < 1:
        print("Minimum players: 1")
        return
    if args.part not in ("a", "b"):
        print("Bad part choice. Available choices are 'a' and 'b'")
        return
    hook = None
    if args.print_board:
        def hook(elf: int, board: list[int], current: int) -> None:
            print(_format_board(elf, board, current))
    score = _play(args.players, args.marble, hook)
    print(f"Part {args.part} - Winning Elf's score: {score}")