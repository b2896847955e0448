import pytest

from puzzlebox.y2022_day03 import (
    common_item,
    misplaced_items,
    part_one,
    part_two,
    priority,
    priority_total,
)

EXAMPLE = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


def test_priority_bounds():
    assert priority("a") == 1
    assert priority("A") == 27


def test_priority_ranges_have_same_width():
    assert priority("Z") - priority("A") == priority("z") - priority("a")
    assert priority("A") == priority("z") + 1


def test_misplaced_items_finds_shared_item():
    assert misplaced_items("abcb") == ["b"]


def test_misplaced_items_none_shared():
    assert misplaced_items("abcd") == []


def test_priority_total_counts_duplicates_once():
    assert priority_total(["a", "a", "b"]) == priority("a") + priority("b")


def test_common_item():
    assert common_item("abc", "xbz", "ybq") == "b"


def test_common_item_missing_raises():
    with pytest.raises(ValueError):
        common_item("abc", "def", "ghi")


def test_part_one_example():
    assert part_one(EXAMPLE) == 157


def test_part_two_example():
    assert part_two(EXAMPLE) == 70


def test_part_two_incomplete_group_raises():
    with pytest.raises(ValueError):
        part_two(EXAMPLE[:4])