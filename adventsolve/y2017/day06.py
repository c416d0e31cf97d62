"""Memory reallocation: redistribute blocks until a configuration repeats."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from adventsolve.common import BAD_PART_MESSAGE, parse_puzzle_args, read_lines, to_ints


def redistribute(banks: Iterable[int]) -> tuple[int, ...]:
    """Empty the fullest bank (first on ties) and deal its blocks out one by one."""
    state = list(banks)
    if not state:
        raise ValueError("no memory banks given")
    source = max(range(len(state)), key=state.__getitem__)
    blocks = state[source]
    if blocks <= 0:
        source, blocks = 0, 0
    state[source] = 0
    for offset in range(1, blocks + 1):
        state[(source + offset) % len(state)] += 1
    return tuple(state)


def _states(banks: Iterable[int]) -> Iterator[tuple[int, ...]]:
    state = tuple(banks)
    while True:
        state = redistribute(state)
        yield state


def cycles_until_repeat(banks: Iterable[int]) -> int:
    """Redistribution cycles until a configuration produced before appears again."""
    seen: set[tuple[int, ...]] = set()
    for count, state in enumerate(_states(banks), 1):
        if state in seen:
            return count
        seen.add(state)
    raise AssertionError("redistribution never ends")


def loop_size(banks: Iterable[int]) -> int:
    """Cycles between the first repeated configuration and its next appearance."""
    seen: set[tuple[int, ...]] = set()
    states = _states(banks)
    for state in states:
        if state in seen:
            repeated = state
            break
        seen.add(state)
    for count, state in enumerate(states, 1):
        if state == repeated:
            return count
    raise AssertionError("redistribution never ends")


def solve(path: str | PathLike[str], part: str) -> int:
    """Read the banks from the first line of the file and solve the given part."""
    banks = to_ints(read_lines(path)[0].split())
    return cycles_until_repeat(banks) if part == "a" else loop_size(banks)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {solve(args.file, args.part)}")