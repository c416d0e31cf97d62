"""The sum of its parts: order steps by prerequisites, alone or with workers."""

from __future__ import annotations

import argparse
import heapq
import re
from collections.abc import Iterable, Sequence

from adventsolve.common import read_lines

_STEP = re.compile(r"\s*Step (\S+) must be finished before step (\S+) can begin\.")


def parse_steps(lines: Iterable[str]) -> dict[str, set[str]]:
    """Map every step to the set of steps that must be finished before it."""
    requirements: dict[str, set[str]] = {}
    for line in lines:
        if not line.strip():
            continue
        match = _STEP.match(line)
        if match is None:
            raise ValueError(f"malformed step line: {line!r}")
        before, after = match.groups()
        requirements.setdefault(before, set())
        requirements.setdefault(after, set()).add(before)
    return requirements


class _Schedule:
    """Steps waiting on prerequisites and those ready, smallest first."""

    def __init__(self, requirements: dict[str, set[str]]) -> None:
        self._waiting = {step: set(reqs) for step, reqs in requirements.items() if reqs}
        self._ready = [step for step, reqs in requirements.items() if not reqs]
        heapq.heapify(self._ready)

    def take(self) -> str | None:
        return heapq.heappop(self._ready) if self._ready else None

    def complete(self, step: str) -> None:
        for waiting, reqs in list(self._waiting.items()):
            reqs.discard(step)
            if not reqs:
                del self._waiting[waiting]
                heapq.heappush(self._ready, waiting)


def step_order(lines: Iterable[str]) -> str:
    """Order in which one worker completes the steps, alphabetical on ties."""
    schedule = _Schedule(parse_steps(lines))
    order: list[str] = []
    while (step := schedule.take()) is not None:
        order.append(step)
        schedule.complete(step)
    return "".join(order)


def _duration(step: str, base_time: int) -> int:
    duration = ord(step[0]) - 64 + base_time
    if duration < 1:
        raise ValueError(f"step {step!r} would take no time")
    return duration


def timed_order(lines: Iterable[str], base_time: int, workers: int) -> tuple[str, int]:
    """Completion order and time counter when several workers share the steps.

    Each step takes its letter's position in the alphabet plus ``base_time``.
    """
    if workers < 1:
        raise ValueError("at least one worker is needed")
    schedule = _Schedule(parse_steps(lines))
    jobs: list[tuple[str, int] | None] = [None] * workers
    order: list[str] = []
    work_left = True
    in_progress = 0
    now = 0
    while work_left or in_progress > 0:
        for index in range(workers):
            job = jobs[index]
            if job is not None and job[1] == now and now > 0:
                order.append(job[0])
                schedule.complete(job[0])
                jobs[index] = None
                in_progress -= 1
            if jobs[index] is None:
                step = schedule.take()
                if step is None:
                    work_left = False
                else:
                    jobs[index] = (step, now + _duration(step, base_time))
                    in_progress += 1
        now += 1
    return "".join(order), now - 2


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day07 do you want to calc (a or b)")
    parser.add_argument("-const", "--const", type=int, default=0,
                        help="Time constant to add to each task for part b")
    parser.add_argument("-workers", "--workers", type=int, default=1,
                        help="Number of workers to use in part b")
    args = parser.parse_args(argv)

    if args.part == "a":
        print("Part a - Order of steps:", step_order(read_lines(args.file)))
    elif args.part == "b":
        workers = max(args.workers, 1)
        order, time = timed_order(read_lines(args.file), args.const, workers)
        print(f"Part b - Order of steps: {order} Time: {time}")
    else:
        print("Bad part choice. Available choices are 'a' and 'b'")