import pytest

from adventsolve.y2017.day04 import count_valid, is_anagram, is_valid_passphrase, main


@pytest.mark.parametrize(
    "passphrase,expected",
    [
        ("aa bb cc dd ee", True),
        ("aa bb cc dd aa", False),
        ("aa bb cc dd aaa", True),
    ],
)
def test_part_a(passphrase, expected):
    assert is_valid_passphrase(passphrase, "a") is expected


@pytest.mark.parametrize(
    "passphrase,expected",
    [
        ("abcde fghij", True),
        ("abcde xyz ecdab", False),
        ("a ab abc abd abf abj", True),
        ("iiii oiii ooii oooi oooo", True),
        ("oiii ioii iioi iiio", False),
    ],
)
def test_part_b(passphrase, expected):
    assert is_valid_passphrase(passphrase, "b") is expected


def test_is_anagram():
    assert is_anagram("abcde", "ecdab") is True
    assert is_anagram("abcde", "abcdf") is False


def test_count_valid(tmp_path):
    path = tmp_path / "input"
    path.write_text("aa bb cc dd ee\naa bb cc dd aa\naa bb cc dd aaa\n", encoding="utf-8")
    assert count_valid(path, "a") == 2


def test_count_valid_part_b(tmp_path):
    path = tmp_path / "input"
    path.write_text("abcde fghij\nabcde xyz ecdab\noiii ioii iioi iiio\n", encoding="utf-8")
    assert count_valid(path, "b") == 1


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("aa bb cc dd ee\naa bb cc dd aa\n", encoding="utf-8")
    main(["-file", str(path), "-part", "a"])
    assert capsys.readouterr().out == "Result is: 1\n"