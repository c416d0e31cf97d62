"""Repose record: find the sleepiest guard and the minute they sleep most."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from adventsolve.common import read_lines

_ENTRY = re.compile(r"\[\d+-(\S+) (\d+):(\d+)\] (\S+) (\S+)")


@dataclass
class SleepRecord:
    """The minutes after midnight a guard spent asleep on one date."""

    date: str
    guard: str
    asleep: set[int] = field(default_factory=set)


def parse_guard_log(lines: Iterable[str]) -> list[SleepRecord]:
    """Sort the log chronologically and collect the sleep periods per date."""
    records: list[SleepRecord] = []
    guard = ""
    start = 0
    for line in sorted(lines):
        if not line.strip():
            continue
        match = _ENTRY.match(line)
        if match is None:
            raise ValueError(f"malformed log entry: {line!r}")
        date, _hour, minute_text, action, extra = match.groups()
        minute = int(minute_text)
        if action == "Guard":
            guard = extra
        elif action == "falls":
            start = minute
        elif action == "wakes":
            if records and records[-1].date == date:
                record = records[-1]
                record.guard = guard
            else:
                record = SleepRecord(date, guard)
                records.append(record)
            record.asleep.update(range(start, minute))
    return records


def _minute_counts(records: Iterable[SleepRecord]) -> dict[str, Counter[int]]:
    counts: dict[str, Counter[int]] = {}
    for record in records:
        counts.setdefault(record.guard, Counter()).update(record.asleep)
    return counts


def sleepiest_guard(records: Iterable[SleepRecord]) -> tuple[str, int]:
    """The guard asleep the most minutes, and the minute they sleep most often."""
    counts = _minute_counts(records)
    best_guard = None
    best_total = 0
    for guard, minutes in counts.items():
        total = sum(minutes.values())
        if total > best_total:
            best_guard, best_total = guard, total
    if best_guard is None:
        raise ValueError("no guard ever fell asleep")
    minutes = counts[best_guard]
    minute = min(minutes, key=lambda m: (-minutes[m], m))
    return best_guard, minute


def sleepiest_minute(records: Iterable[SleepRecord]) -> tuple[str, int]:
    """The guard and minute with the most sleeps on that same minute."""
    best_guard = None
    best_minute = 0
    best_count = 0
    for guard, minutes in _minute_counts(records).items():
        for minute in range(60):
            if minutes[minute] > best_count:
                best_guard, best_minute, best_count = guard, minute, minutes[minute]
    if best_guard is None:
        raise ValueError("no guard ever fell asleep")
    return best_guard, best_minute


def _guard_number(guard: str) -> int:
    return int(guard.lstrip("#"))


def solve(lines: Iterable[str], part: str) -> int:
    """Guard number multiplied by the chosen minute for the given part."""
    records = parse_guard_log(lines)
    chooser = sleepiest_guard if part == "a" else sleepiest_minute
    guard, minute = chooser(records)
    return _guard_number(guard) * minute


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day04 do you want to calc (a or b)")
    args = parser.parse_args(argv)
    if args.part in ("a", "b"):
        result = solve(read_lines(args.file), args.part)
        print(f"Part {args.part} - Guard ID multiplied by minute chosen: {result}")