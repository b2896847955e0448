"""Camp cleanup: section assignment pairs."""

from __future__ import annotations

from collections.abc import Iterable

Section = tuple[int, int]


def _parse_range(text: str) -> Section:
    bounds = text.split("-")
    if len(bounds) < 2:
        raise ValueError(f"malformed range: {text!r}")
    return int(bounds[0]), int(bounds[1])


def parse_pair(line: str) -> tuple[Section, Section]:
    """Parse ``"a-b,c-d"`` into two (low, high) ranges."""
    ranges = line.strip().split(",")
    if len(ranges) < 2:
        raise ValueError(f"malformed pair: {line!r}")
    return _parse_range(ranges[0]), _parse_range(ranges[1])


def fully_contains(first: Section, second: Section) -> bool:
    """Return True if either range lies entirely within the other."""
    (low1, high1), (low2, high2) = first, second
    return (low1 <= low2 and high1 >= high2) or (low2 <= low1 and high2 >= high1)


def overlaps(first: Section, second: Section) -> bool:
    """Return True if the two ranges share at least one section."""
    (low1, high1), (low2, high2) = first, second
    return low1 <= low2 <= high1 or low2 <= low1 <= high2


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the counts of fully contained pairs and of overlapping pairs."""
    contained = 0
    overlapping = 0
    for line in lines:
        first, second = parse_pair(line)
        contained += fully_contains(first, second)
        overlapping += overlaps(first, second)
    return contained, overlapping