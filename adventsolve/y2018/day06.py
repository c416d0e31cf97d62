"""Chronal coordinates: areas closest to each point and the safe region."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adventsolve.common import manhattan_distance, read_lines

_POINT = re.compile(r"\s*(-?\d+)\s*,\s*(-?\d+)")
_MARGIN = 2
_UNREACHABLE = 10000
_TIE = -1


@dataclass(frozen=True)
class Point:
    """A coordinate on the grid."""

    x: int
    y: int

    def distance(self, x: int, y: int) -> int:
        """Manhattan distance from this point to ``(x, y)``."""
        return manhattan_distance(x, y, self.x, self.y)


def parse_points(lines: Iterable[str]) -> list[Point]:
    """Parse lines of the form ``x, y``; blank lines are skipped."""
    points: list[Point] = []
    for line in lines:
        if not line.strip():
            continue
        match = _POINT.match(line)
        if match is None:
            raise ValueError(f"malformed coordinate: {line!r}")
        points.append(Point(int(match.group(1)), int(match.group(2))))
    return points


def bounds(points: Iterable[Point], margin: int) -> tuple[int, int, int, int]:
    """Extremes of the points widened by ``margin``: min x, max x, min y, max y.

    A minimum is only lowered when it is at least ``margin``.
    """
    pts = list(points)
    if not pts:
        raise ValueError("no points given")
    min_x = min(point.x for point in pts)
    max_x = max(point.x for point in pts)
    min_y = min(point.y for point in pts)
    max_y = max(point.y for point in pts)
    if min_x >= margin:
        min_x -= margin
    if min_y >= margin:
        min_y -= margin
    return min_x, max_x + margin, min_y, max_y + margin


def largest_finite_area(points: Iterable[Point]) -> int:
    """Size of the largest area closest to one point that does not touch the edge."""
    pts = list(points)
    _, width, _, height = bounds(pts, _MARGIN)
    counts: Counter[int | None] = Counter()
    infinite: set[int | None] = set()
    owner: int | None = None
    for y in range(height):
        for x in range(width):
            nearest = _UNREACHABLE
            for index, point in enumerate(pts):
                distance = point.distance(x, y)
                if distance < nearest:
                    nearest = distance
                    owner = index
                elif distance == nearest:
                    owner = _TIE
            if x in (0, width - 1) or y in (0, height - 1):
                infinite.add(owner)
            counts[owner] += 1
    return max(
        (count for key, count in counts.items() if key not in infinite),
        default=0,
    )


def safe_region_size(points: Iterable[Point], total_distance: int) -> int:
    """Number of grid cells whose summed distance to all points is below the limit."""
    pts = list(points)
    _, width, _, height = bounds(pts, _MARGIN)
    return sum(
        1
        for y in range(height)
        for x in range(width)
        if sum(point.distance(x, y) for point in pts) < total_distance
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("-file", "--file", default="input1.txt",
                        help="A filename containing input strings")
    parser.add_argument("-debug", "--debug", action="store_true",
                        help="turns print debugging on")
    parser.add_argument("-distance", "--distance", type=int, default=10000,
                        help="sum of distance to all points")
    parser.add_argument("-part", "--part", default="a",
                        help="Which part of day06 do you want to calc (a or b)")
    args = parser.parse_args(argv)

    if args.part not in ("a", "b"):
        print("Bad part choice. Available choices are 'a' and 'b'")
        return
    points = parse_points(read_lines(args.file))
    if args.debug:
        print(points)
        min_x, max_x, min_y, max_y = bounds(points, _MARGIN)
        print(f"MinX: {min_x} MaxX: {max_x}")
        print(f"MinY: {min_y} MaxY: {max_y}")
    if args.part == "a":
        print("Part a - Largest non-infinite area:", largest_finite_area(points))
    else:
        size = safe_region_size(points, args.distance)
        print(f"Part b - Region size with distance less than {args.distance} is: {size}")