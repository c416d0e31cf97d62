import pytest

from adventsolve.common import (
    PuzzleArgs,
    format_grid,
    manhattan_distance,
    parse_puzzle_args,
    read_lines,
    to_ints,
)


def test_read_lines_strips_endings(tmp_path):
    path = tmp_path / "input"
    path.write_text("first\nsecond\nthird", encoding="utf-8")
    assert read_lines(path) == ["first", "second", "third"]


def test_read_lines_handles_crlf(tmp_path):
    path = tmp_path / "input"
    path.write_bytes(b"one\r\ntwo\r\n")
    assert read_lines(path) == ["one", "two"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "input"
    path.write_text("", encoding="utf-8")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope")


def test_parse_defaults():
    assert parse_puzzle_args([]) == PuzzleArgs("input", "a", False)


def test_parse_all_options():
    args = parse_puzzle_args(["-file", "data.txt", "-part", "b", "-debug"])
    assert args == PuzzleArgs("data.txt", "b", True)


def test_parse_double_dash_options():
    args = parse_puzzle_args(["--file", "x", "--part", "a"])
    assert args.file == "x"
    assert args.part == "a"


def test_parse_bad_part_is_none():
    assert parse_puzzle_args(["-part", "c"]).part is None


def test_to_ints_round_trip():
    values = [5, -3, 0, 42]
    assert to_ints([str(v) for v in values]) == values


def test_to_ints_unparseable_becomes_zero():
    assert to_ints(["7", "x", ""]) == [7, 0, 0]


def test_format_grid_lines():
    text = format_grid(["ab", "cd"])
    assert text.splitlines() == ["ab", "cd"]
    assert text.endswith("\n")


def test_format_grid_accepts_char_lists():
    assert format_grid([["#", "."], [".", "#"]]) == format_grid(["#.", ".#"])


def test_manhattan_zero_for_same_point():
    assert manhattan_distance(3, -4, 3, -4) == 0


@pytest.mark.parametrize("a,b", [((0, 0), (3, 4)), ((-2, 5), (7, -1)), ((1, 1), (1, 9))])
def test_manhattan_symmetric(a, b):
    assert manhattan_distance(*a, *b) == manhattan_distance(*b, *a)


def test_manhattan_along_axis():
    assert manhattan_distance(0, 0, 6, 0) == 6