"""Trebuchet calibration values from digits and spelled-out numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable

_DIGIT = re.compile(r"[0-9]")
_NUMBER_PATTERN = re.compile(
    r"[0-9]|one|two|three|four|five|six|seven|eight|nine|zero"
)

_WORD_VALUES = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "zero": 0,
}

_WRITTEN = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _as_numeral(match: str) -> str:
    if len(match) == 1:
        return match
    return str(_WORD_VALUES.get(match, 0))


def line_value(first: str, last: str) -> int:
    """Join two digit matches (numerals or words) into a two-digit number."""
    text = _as_numeral(first) + _as_numeral(last)
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"not a calibration value: {text!r}") from exc


def part_one(lines: Iterable[str]) -> int:
    """Sum first and last numeral of each line; lines without one are skipped."""
    total = 0
    for line in lines:
        digits = _DIGIT.findall(line)
        if digits:
            total += int(digits[0] + digits[-1])
    return total


def part_two(lines: Iterable[str]) -> int:
    """Sum first and last digit of each line, spelled-out words included."""
    total = 0
    for line in lines:
        numbers = _NUMBER_PATTERN.findall(line)
        if numbers:
            total += line_value(numbers[0], numbers[-1])
    return total


def extract_digits(text: str) -> list[int]:
    """Return the numerals of ``text`` in order."""
    return [int(char) for char in text if char in "0123456789"]


def translate_words(text: str) -> str:
    """Replace spelled-out digits by numerals, keeping overlapping words intact."""
    for word in _WRITTEN:
        if word in text:
            text = text.replace(word, f"{word}{_WORD_VALUES[word]}{word}")
    for word in _WRITTEN:
        text = text.replace(word, "")
    return text


def total_calibration_value(lines: Iterable[str]) -> int:
    """Sum first and last numeral of each line that has any."""
    total = 0
    for line in lines:
        digits = extract_digits(line)
        if digits:
            total += digits[0] * 10 + digits[-1]
    return total