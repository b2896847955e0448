"""Calorie counting: totals per elf and the largest of them."""

from __future__ import annotations

import re
from collections.abc import Iterable

_INTEGER = re.compile(r"[+-]?\d+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid calorie value: {text!r}")
    return int(text)


def elf_totals(lines: Iterable[str]) -> list[int]:
    """Return the calorie total of each elf, in input order.

    An elf's group is closed by a blank line; a trailing group with no
    blank line after it is not counted.
    """
    totals: list[int] = []
    current = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            totals.append(current)
            current = 0
        else:
            current += _parse_int(line)
    return totals


def top_total(totals: Iterable[int], count: int) -> int:
    """Return the sum of the ``count`` largest totals."""
    ordered = sorted(totals, reverse=True)
    if count > len(ordered):
        raise ValueError(f"need at least {count} totals, got {len(ordered)}")
    return sum(ordered[:count])


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the largest total and the sum of the three largest."""
    totals = elf_totals(lines)
    return max([0, *totals]), top_total(totals, 3)