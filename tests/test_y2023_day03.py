import pytest

from puzzlebox.y2023_day03 import (
    Part,
    Position,
    gear_positions,
    gear_ratio_sum,
    gear_ratios,
    part_number_sum,
    scan_parts,
    symbol_positions,
    valid_parts,
)

EXAMPLE = (
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
)


def test_example_part_number_sum():
    assert part_number_sum(EXAMPLE) == 4361


def test_example_gear_ratio_sum():
    assert gear_ratio_sum(EXAMPLE) == 467835


def test_scan_parts_spans_match_text():
    parts = scan_parts(EXAMPLE)
    assert set(parts) == set(range(len(EXAMPLE)))
    for row, row_parts in parts.items():
        for part in row_parts:
            assert part.row == row
            assert EXAMPLE[row][part.start:part.end + 1] == str(part.value)


def test_scan_parts_first_row_values():
    parts = scan_parts(EXAMPLE)
    assert [part.value for part in parts[0]] == [467, 114]


def test_symbols_are_not_dots_or_digits():
    for position in symbol_positions(EXAMPLE):
        char = EXAMPLE[position.row][position.column]
        assert char != "."
        assert not char.isdigit()


def test_gear_positions_are_stars():
    gears = gear_positions(EXAMPLE)
    assert gears
    assert all(EXAMPLE[p.row][p.column] == "*" for p in gears)
    assert set(gears) <= set(symbol_positions(EXAMPLE))


def test_last_column_is_not_scanned():
    assert symbol_positions(["..*"]) == []
    assert gear_positions(["5.*"]) == []


def test_part_next_to_two_symbols_counted_twice():
    lines = ["*5*."]
    parts = scan_parts(lines)
    only = parts[0][0]
    assert valid_parts(parts, symbol_positions(lines)) == [only, only]


def test_isolated_part_is_not_valid():
    lines = ["5....", "...#."]
    assert valid_parts(scan_parts(lines), symbol_positions(lines)) == []


def test_gear_with_one_part_has_no_ratio():
    parts = {0: [Part(7, 0, 0, 0)]}
    assert gear_ratios(parts, [Position(0, 1)]) == []


def test_gear_ratio_is_product_of_neighbours():
    parts = {0: [Part(7, 0, 0, 0), Part(9, 0, 2, 2)]}
    assert gear_ratios(parts, [Position(0, 1)]) == [7 * 9]


@pytest.mark.parametrize("column", [0, 4])
def test_touches_bounds(column):
    part = Part(12, 0, 1, 3)
    assert part.touches(Position(0, column))