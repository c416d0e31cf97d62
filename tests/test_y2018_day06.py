import pytest

from adventsolve.y2018.day06 import (
    Point,
    bounds,
    largest_finite_area,
    main,
    parse_points,
    safe_region_size,
)

EXAMPLE = ["1, 1", "1, 6", "8, 3", "3, 4", "5, 5", "8, 9"]


def test_parse_points_reads_coordinates():
    points = parse_points(EXAMPLE)
    assert points[0] == Point(1, 1)
    assert points[-1] == Point(8, 9)
    assert len(points) == len(EXAMPLE)


def test_parse_points_skips_blank_lines():
    assert parse_points(["3, 4", "", "  "]) == [Point(3, 4)]


def test_parse_points_rejects_garbage():
    with pytest.raises(ValueError):
        parse_points(["not a point"])


def test_bounds_without_margin_are_extremes():
    assert bounds([Point(5, 7), Point(9, 3)], 0) == (5, 9, 3, 7)


def test_bounds_margin_widens_maximum():
    pts = [Point(5, 7), Point(9, 3)]
    _, max_x0, _, max_y0 = bounds(pts, 0)
    _, max_x2, _, max_y2 = bounds(pts, 2)
    assert max_x2 == max_x0 + 2
    assert max_y2 == max_y0 + 2


def test_bounds_small_minimum_not_lowered():
    min_x, _, min_y, _ = bounds([Point(1, 1), Point(6, 6)], 2)
    assert (min_x, min_y) == (1, 1)


def test_bounds_empty_raises():
    with pytest.raises(ValueError):
        bounds([], 2)


def test_largest_finite_area_example():
    assert largest_finite_area(parse_points(EXAMPLE)) == 17


def test_single_point_area_is_infinite():
    assert largest_finite_area([Point(3, 3)]) == 0


def test_safe_region_example():
    assert safe_region_size(parse_points(EXAMPLE), 32) == 16


def test_safe_region_with_huge_limit_is_whole_grid():
    pts = parse_points(EXAMPLE)
    _, width, _, height = bounds(pts, 2)
    assert safe_region_size(pts, 10**9) == width * height


def test_safe_region_with_zero_limit_is_empty():
    assert safe_region_size(parse_points(EXAMPLE), 0) == 0


def test_main_prints_area(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    main(["-file", str(path), "-part", "a"])
    assert "Largest non-infinite area: 17" in capsys.readouterr().out


def test_main_bad_part(tmp_path, capsys):
    main(["-part", "z"])
    assert "Bad part choice" in capsys.readouterr().out