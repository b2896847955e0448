"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Position:
    """A cell of the schematic."""

    row: int
    column: int


@dataclass(frozen=True)
class Part:
    """A number in the schematic spanning columns ``start`` to ``end`` inclusive."""

    value: int
    row: int
    start: int
    end: int

    def touches(self, position: Position) -> bool:
        """Return True if the part is horizontally adjacent to or covers the column."""
        return self.start <= position.column + 1 and self.end >= position.column - 1


PartsByRow = Mapping[int, Sequence[Part]]


def _rows(lines: Iterable[str]) -> list[str]:
    return [line.rstrip("\r\n") for line in lines]


def scan_parts(lines: Iterable[str]) -> dict[int, list[Part]]:
    """Return the numbers of every row, keyed by row index."""
    return {
        row: [
            Part(int(match.group()), row, match.start(), match.end() - 1)
            for match in _NUMBER.finditer(line)
        ]
        for row, line in enumerate(_rows(lines))
    }


def _cells(lines: Iterable[str]) -> Iterator[tuple[Position, str]]:
    # The last column of each row is never examined.
    for row, line in enumerate(_rows(lines)):
        for column, char in enumerate(line[:-1]):
            yield Position(row, column), char


def symbol_positions(lines: Iterable[str]) -> list[Position]:
    """Return the positions of every character that is neither a dot nor a digit."""
    return [
        position
        for position, char in _cells(lines)
        if char != "." and char not in _DIGITS
    ]


def gear_positions(lines: Iterable[str]) -> list[Position]:
    """Return the positions of every ``*``."""
    return [position for position, char in _cells(lines) if char == "*"]


def _adjacent(parts: PartsByRow, position: Position) -> list[Part]:
    candidates = [
        part
        for row in (position.row, position.row - 1, position.row + 1)
        for part in parts.get(row, ())
    ]
    return [part for part in candidates if part.touches(position)]


def valid_parts(parts: PartsByRow, symbols: Iterable[Position]) -> list[Part]:
    """Return the parts next to each symbol, symbol by symbol.

    A part next to several symbols appears once for each of them.
    """
    return [part for symbol in symbols for part in _adjacent(parts, symbol)]


def gear_ratios(parts: PartsByRow, gears: Iterable[Position]) -> list[int]:
    """Return the product of the two parts of every gear with exactly two."""
    ratios = []
    for gear in gears:
        near = _adjacent(parts, gear)
        if len(near) == 2:
            ratios.append(near[0].value * near[1].value)
    return ratios


def part_number_sum(lines: Iterable[str]) -> int:
    """Sum the numbers of all parts next to a symbol."""
    rows = _rows(lines)
    return sum(part.value for part in valid_parts(scan_parts(rows), symbol_positions(rows)))


def gear_ratio_sum(lines: Iterable[str]) -> int:
    """Sum the ratios of all gears."""
    rows = _rows(lines)
    return sum(gear_ratios(scan_parts(rows), gear_positions(rows)))