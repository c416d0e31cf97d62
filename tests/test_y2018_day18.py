import pytest

from adventsolve.y2018.day18 import count_neighbours, parse_area, resource_value, step

EXAMPLE = [
    ".#.#...|#.",
    ".....#|##|",
    ".|..|...#.",
    "..|#.....#",
    "#.#|||#|#|",
    "...#.||...",
    ".|....|...",
    "||...#|.#|",
    "|.||||..|.",
    "...#.|..|.",
]


def test_worked_example():
    assert resource_value(EXAMPLE, 10, 10) == 1147


def test_zero_minutes_counts_initial_area():
    area = parse_area(EXAMPLE, 10)
    cells = "".join("".join(row) for row in area)
    assert resource_value(EXAMPLE, 10, 0) == cells.count("|") * cells.count("#")


def test_parse_area_round_trip():
    area = parse_area(EXAMPLE, 10)
    assert ["".join(row) for row in area] == EXAMPLE


def test_parse_area_pads_small_input():
    area = parse_area(["|#"], 3)
    assert len(area) == 3
    assert all(len(row) == 3 for row in area)
    assert area[0][:2] == ["|", "#"]


def test_parse_area_rejects_oversized_input():
    with pytest.raises(ValueError):
        parse_area(["....."], 3)


def test_count_neighbours_in_corner():
    area = [["|", "#"], ["#", "|"]]
    assert count_neighbours(area, 0, 0) == (2, 1)


def test_open_acre_becomes_trees():
    area = [[".", "|"], ["|", "|"]]
    assert step(area)[0][0] == "|"


def test_trees_become_lumberyard():
    area = [["|", "#"], ["#", "#"]]
    assert step(area)[0][0] == "#"


def test_lonely_lumberyard_becomes_open():
    area = [["#", "."], [".", "."]]
    assert step(area)[0][0] == "."


def test_open_ground_stays_open():
    area = parse_area(["....", "....", "....", "...."], 4)
    assert step(area) == area


def test_step_leaves_input_untouched():
    area = parse_area(EXAMPLE, 10)
    before = [row[:] for row in area]
    step(area)
    assert area == before
    assert len(step(area)) == 10