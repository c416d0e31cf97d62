import pytest

from adventsolve.y2018.day02 import box_checksum, find_close_ids, main

CHECKSUM_IDS = ["abcdef", "bababc", "abbcde", "abcccd", "aabcdd", "abcdee", "ababab"]
CLOSE_IDS = ["abcde", "fghij", "klmno", "pqrst", "fguij", "axcye", "wvxyz"]


def _write(tmp_path, lines):
    path = tmp_path / "input1.txt"
    path.write_text("\n".join(lines) + "\n")
    return path


def test_checksum_example():
    assert box_checksum(CHECKSUM_IDS) == 12


def test_checksum_ignores_order():
    assert box_checksum(reversed(CHECKSUM_IDS)) == box_checksum(CHECKSUM_IDS)


def test_checksum_without_triples_is_zero():
    assert box_checksum(["aabb", "ccdd"]) == 0


def test_checksum_counts_lowercase_only():
    assert box_checksum(["AAbb", "ccc"]) == box_checksum(["bb", "ccc"])


def test_close_ids_example():
    assert find_close_ids(CLOSE_IDS) == ("fghij", "fguij")


def test_close_ids_differ_in_one_place():
    first, second = find_close_ids(CLOSE_IDS)
    assert sum(a != b for a, b in zip(first, second)) == 1


def test_no_close_ids():
    assert find_close_ids(["abc", "xyz"]) is None


def test_identical_ids_are_not_a_match():
    assert find_close_ids(["abc", "abc"]) is None


def test_shorter_id_raises():
    with pytest.raises(ValueError):
        find_close_ids(["abcd", "ab"])


def test_main_part_a(tmp_path, capsys):
    path = _write(tmp_path, CHECKSUM_IDS)
    main(["-file", str(path), "-part", "a"])
    assert capsys.readouterr().out == f"Part A - CheckSum is: {box_checksum(CHECKSUM_IDS)}\n"


def test_main_part_b(tmp_path, capsys):
    path = _write(tmp_path, CLOSE_IDS)
    main(["-file", str(path), "-part", "b"])
    assert capsys.readouterr().out == "Part B - Prototype Clothing is in: fghij fguij\n"


def test_main_part_b_not_found(tmp_path, capsys):
    path = _write(tmp_path, ["abc", "xyz"])
    main(["-file", str(path), "-part", "b"])
    assert capsys.readouterr().out == (
        "Part B - Prototype Clothing is in: No IDs Found No IDs Found\n"
    )