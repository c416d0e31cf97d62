"""Recursive circus: find the bottom program and fix the unbalanced weight."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike

from adventsolve.common import BAD_PART_MESSAGE, parse_puzzle_args, read_lines

_HEAD = re.compile(r"\s*(\S+)\s+\((-?\d+)\)")


@dataclass
class Program:
    """One program in the tower and the programs standing on it."""

    name: str
    weight: int = 0
    parent: str | None = None
    children: list[str] = field(default_factory=list)


def parse_tower(lines: Iterable[str]) -> dict[str, Program]:
    """Build the tower from lines like ``name (weight) -> child, child``."""
    tower: dict[str, Program] = {}
    for line in lines:
        head, _, tail = line.partition("->")
        match = _HEAD.match(head)
        if match is None:
            raise ValueError(f"malformed program line: {line!r}")
        name, weight = match.group(1), int(match.group(2))
        children = [child.strip(",") for child in tail.split()]
        for child in children:
            if child in tower:
                tower[child].parent = name
            else:
                tower[child] = Program(child, parent=name)
        program = tower.setdefault(name, Program(name))
        program.weight = weight
        program.children = children
    return tower


def find_bottom(tower: dict[str, Program]) -> str:
    """Name of the program that stands on no other."""
    for program in tower.values():
        if program.parent is None:
            return program.name
    raise ValueError("no bottom program found")


def stack_weight(name: str, tower: dict[str, Program]) -> int:
    """Weight of a program plus everything standing on it."""
    program = tower[name]
    return program.weight + sum(stack_weight(child, tower) for child in program.children)


def unbalanced_child(name: str, tower: dict[str, Program]) -> tuple[str | None, int]:
    """The child whose stack weight is unique, and the change that would balance it.

    The child is ``None`` when no child stands out.
    """
    counts: Counter[int] = Counter()
    holders: dict[int, str] = {}
    for child in tower[name].children:
        total = stack_weight(child, tower)
        counts[total] += 1
        holders[total] = child
    odd_child: str | None = None
    odd = normal = 0
    for total, count in counts.items():
        if count == 1:
            odd_child = holders[total]
            odd = total
        else:
            normal = total
    if odd_child is None:
        return None, 0
    return odd_child, normal - odd


def corrected_weight(name: str, tower: dict[str, Program]) -> int:
    """Weight the single wrong program needs for the tower to balance, or 0."""
    wrong, difference = unbalanced_child(name, tower)
    if wrong is None:
        return 0
    deeper = corrected_weight(wrong, tower)
    return tower[wrong].weight + difference if deeper == 0 else deeper


def solve(path: str | PathLike[str], part: str) -> str | int:
    """Bottom program name for part ``"a"``, corrected weight otherwise."""
    tower = parse_tower(read_lines(path))
    bottom = find_bottom(tower)
    return bottom if part == "a" else corrected_weight(bottom, tower)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_puzzle_args(argv)
    if args.part is None:
        print(BAD_PART_MESSAGE)
        return
    result = solve(args.file, args.part)
    if args.part == "a":
        print(f"Bottom Program is: {result}")
    else:
        print(f"Revised weight is: {result}")