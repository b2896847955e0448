"""Rucksack reorganisation: misplaced items and group badges."""

from __future__ import annotations

from collections.abc import Iterable


def priority(item: str) -> int:
    """Return the priority of an item: a-z are 1-26, A-Z are 27-52."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 27


def misplaced_items(rucksack: str) -> list[str]:
    """Return the first item of the second compartment also found in the first."""
    half = len(rucksack) // 2
    first = set(rucksack[:half])
    for item in rucksack[half:]:
        if item in first:
            return [item]
    return []


def priority_total(items: Iterable[str]) -> int:
    """Return the sum of priorities of the distinct items."""
    return sum(priority(item) for item in dict.fromkeys(items))


def common_item(first: str, second: str, third: str) -> str:
    """Return the first item of ``first`` carried in all three rucksacks."""
    for item in first:
        if item in second and item in third:
            return item
    raise ValueError("No common char found in ruckSack")


def part_one(lines: Iterable[str]) -> int:
    """Sum the priorities of the misplaced items in every rucksack."""
    return sum(priority_total(misplaced_items(raw.rstrip("\r\n"))) for raw in lines)


def part_two(lines: Iterable[str]) -> int:
    """Sum the priorities of the badges of each group of three rucksacks."""
    rucksacks = [raw.rstrip("\r\n") for raw in lines]
    if len(rucksacks) % 3:
        raise ValueError("rucksack count is not a multiple of three")
    groups = zip(*[iter(rucksacks)] * 3)
    return sum(priority_total([common_item(a, b, c)]) for a, b, c in groups)