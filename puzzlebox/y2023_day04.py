"""Scratchcards: matching numbers, points and won copies."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_NUMBER = re.compile(r"[0-9]+")


def parse_card(line: str) -> tuple[list[str], list[str]]:
    """Return the winning numbers and your numbers of a card, as strings."""
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"missing card header: {line!r}")
    numbers = parts[1].split("|")
    if len(numbers) < 2:
        raise ValueError(f"missing number separator: {line!r}")
    return _NUMBER.findall(numbers[0]), _NUMBER.findall(numbers[1])


def match_count(winning: Iterable[str], yours: Iterable[str]) -> int:
    """Count how many of your numbers are winning numbers."""
    winners = set(winning)
    return sum(1 for number in yours if number in winners)


def scratchcard_points(lines: Iterable[str]) -> int:
    """Sum the card points: one for the first match, doubled for each further one."""
    total = 0
    for line in lines:
        matches = match_count(*parse_card(line))
        if matches:
            total += 2 ** (matches - 1)
    return total


def total_scratchcards(lines: Sequence[str] | Iterable[str]) -> int:
    """Return how many cards there are once all won copies are added.

    Copies won past the last card are still counted.
    """
    matches = [match_count(*parse_card(line)) for line in lines]
    counts = [1] * len(matches)
    for index, won in enumerate(matches):
        needed = index + won + 1
        if needed > len(counts):
            counts.extend([0] * (needed - len(counts)))
        for offset in range(1, won + 1):
            counts[index + offset] += counts[index]
    return sum(counts)