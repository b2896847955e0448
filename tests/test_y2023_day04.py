import pytest

from puzzlebox.y2023_day04 import (
    match_count,
    parse_card,
    scratchcard_points,
    total_scratchcards,
)

EXAMPLE = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


def test_example_points():
    assert scratchcard_points(EXAMPLE) == 13


def test_example_total_cards():
    assert total_scratchcards(EXAMPLE) == 30


def test_parse_card():
    assert parse_card("Card 1: 41 48 | 83 41") == (["41", "48"], ["83", "41"])


def test_parse_card_without_header_raises():
    with pytest.raises(ValueError):
        parse_card("41 48 | 83")


def test_parse_card_without_separator_raises():
    with pytest.raises(ValueError):
        parse_card("Card 1: 41 48 83")


def test_match_count_symmetric_for_distinct_numbers():
    winning, yours = parse_card(EXAMPLE[0])
    assert match_count(winning, yours) == match_count(yours, winning)


def test_match_count_compares_text():
    assert match_count(["5"], ["05"]) == match_count([], ["05"])


def test_cards_without_matches():
    lines = ["Card 1: 1 2 | 3 4", "Card 2: 5 | 6"]
    assert scratchcard_points(lines) == 0
    assert total_scratchcards(lines) == len(lines)


def test_copies_past_the_end_are_counted():
    lines = ["Card 1: 7 | 7"]
    assert total_scratchcards(lines) == 2 * len(lines)


def test_total_at_least_card_count():
    assert total_scratchcards(EXAMPLE) >= len(EXAMPLE)