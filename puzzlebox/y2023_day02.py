"""Cube conundrum: checking games against a bag of coloured cubes."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

_DETAIL = re.compile(r"[0-9]+|blue|green|red")


def extract_game_details(line: str) -> list[str]:
    """Return the game id followed by alternating counts and colours."""
    return _DETAIL.findall(line)


def _draws(details: Sequence[str]) -> Iterator[tuple[int, str]]:
    rest = list(details[1:])
    if len(rest) % 2:
        raise ValueError("game details do not pair counts with colours")
    for count, color in zip(rest[::2], rest[1::2]):
        yield int(count), color


def is_valid_game(
    details: Sequence[str],
    red_max: int = 12,
    blue_max: int = 14,
    green_max: int = 13,
) -> bool:
    """Return True if no draw shows more cubes of a colour than allowed."""
    limits = {"red": red_max, "green": green_max, "blue": blue_max}
    for count, color in _draws(details):
        if color in limits and count > limits[color]:
            return False
    return True


def minimum_cubes(details: Sequence[str]) -> tuple[int, int, int]:
    """Return the fewest red, blue and green cubes that make the game possible."""
    least = {"red": 0, "blue": 0, "green": 0}
    for count, color in _draws(details):
        if color in least and count > least[color]:
            least[color] = count
    return least["red"], least["blue"], least["green"]


def valid_game_id_sum(lines: Iterable[str]) -> int:
    """Sum the ids of games possible with 12 red, 13 green and 14 blue cubes."""
    total = 0
    for line in lines:
        details = extract_game_details(line)
        if not details:
            raise ValueError(f"no game id in line: {line!r}")
        if is_valid_game(details, 12, 14, 13):
            total += int(details[0])
    return total


def power_sum(lines: Iterable[str]) -> int:
    """Sum over all games the product of the minimum cube counts."""
    total = 0
    for line in lines:
        red, blue, green = minimum_cubes(extract_game_details(line))
        total += red * blue * green
    return total