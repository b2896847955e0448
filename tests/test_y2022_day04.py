import pytest

from puzzlebox.y2022_day04 import fully_contains, overlaps, parse_pair, solve

EXAMPLE = ["2-4,6-8", "2-3,4-5", "5-7,7-9", "2-8,3-7", "6-6,4-6", "2-6,4-8"]


def test_parse_pair():
    assert parse_pair("2-4,6-8\n") == ((2, 4), (6, 8))


def test_parse_pair_malformed_raises():
    with pytest.raises(ValueError):
        parse_pair("2-4")


def test_parse_pair_non_numeric_raises():
    with pytest.raises(ValueError):
        parse_pair("a-4,6-8")


def test_fully_contains_is_symmetric():
    assert fully_contains((2, 8), (3, 7)) is True
    assert fully_contains((3, 7), (2, 8)) is True
    assert fully_contains((2, 4), (3, 5)) is False


def test_identical_ranges_contain_each_other():
    assert fully_contains((4, 6), (4, 6)) is True


def test_overlaps():
    assert overlaps((5, 7), (7, 9)) is True
    assert overlaps((7, 9), (5, 7)) is True
    assert overlaps((2, 3), (4, 5)) is False


def test_containment_implies_overlap():
    for line in EXAMPLE:
        first, second = parse_pair(line)
        if fully_contains(first, second):
            assert overlaps(first, second)


def test_solve_example():
    assert solve(EXAMPLE) == (2, 4)


def test_solve_empty():
    assert solve([]) == (0, 0)