import pytest

from adventsolve.y2017.day01 import captcha_sum, main, solve


@pytest.mark.parametrize(
    "digits,expected",
    [("1122", 3), ("1111", 4), ("1234", 0), ("91212129", 9)],
)
def test_part_a(digits, expected):
    assert captcha_sum(digits, 1) == expected


@pytest.mark.parametrize(
    "digits,expected",
    [("1212", 6), ("1221", 0), ("123425", 4), ("123123", 12), ("12131415", 4)],
)
def test_part_b(digits, expected):
    assert captcha_sum(digits, len(digits) // 2) == expected


def test_empty_input():
    assert captcha_sum("", 1) == 0


def test_solve_reads_first_line(tmp_path):
    path = tmp_path / "input"
    path.write_text("1122\n", encoding="utf-8")
    assert solve(path, "a") == 3
    path.write_text("123123\n", encoding="utf-8")
    assert solve(path, "b") == 12


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("91212129\n", encoding="utf-8")
    main(["-file", str(path), "-part", "a"])
    assert capsys.readouterr().out == "Result is: 9\n"


def test_main_bad_part(capsys):
    main(["-part", "q"])
    assert "Bad part choice" in capsys.readouterr().out