"""Demonstrations of loops, lists, dictionaries and records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass
class FootballClub:
    """A club and a few figures about its staff."""

    name: str = ""
    player_count: int = 0
    staff_count: int = 0
    avg_employee_age: float = 0.0


def countdown(start: int) -> list[str]:
    """Count down from ``start`` to zero, then explode."""
    lines = [str(tick) for tick in range(start, -1, -1)]
    if start >= 0:
        lines.append("BOOM!")
    return lines


def defuse_countdown(start: int, stop: int) -> list[str]:
    """Count down from ``start``, defusing the bomb on reaching ``stop``."""
    lines: list[str] = []
    for tick in range(start, -1, -1):
        lines.append(str(tick))
        if tick == stop:
            lines.append("Bomb defused!")
            break
    return lines


def odd_countdown(start: int) -> list[int]:
    """Count down from ``start`` to zero, skipping even numbers."""
    return [tick for tick in range(start, -1, -1) if tick % 2]


def course_progress(
    courses: Iterable[str], completed: Iterable[str]
) -> list[tuple[int, str, bool]]:
    """Return each course with its index and whether it has been completed."""
    done = set(completed)
    return [(index, course, course in done) for index, course in enumerate(courses)]


def slice_growth(initial: int = 1, count: int = 16) -> list[list[int]]:
    """Append 1..count to a list of ``initial`` zeros, returning each intermediate state."""
    if initial < 0:
        raise ValueError("initial length must not be negative")
    values = [0] * initial
    snapshots = []
    for number in range(1, count + 1):
        values.append(number)
        snapshots.append(list(values))
    return snapshots


def league_table_updates(table: Mapping[str, int]) -> list[dict[str, int]]:
    """Set ``A`` to 100, add ``H`` as 8 and remove ``C``; return the table after each step."""
    current = dict(table)
    steps = []
    current["A"] = 100
    steps.append(dict(current))
    current["H"] = 8
    steps.append(dict(current))
    current.pop("C", None)
    steps.append(dict(current))
    return steps