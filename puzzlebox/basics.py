"""Small language basics: greetings, string helpers, conditionals and variables."""

from __future__ import annotations

import os
import random
import re
import time
from collections.abc import Mapping

_WORD_START = re.compile(r"(?<!\w)\w")
_INTEGER = re.compile(r"[+-]?[0-9]+")

_INVALID = "Invalid entry. Did not match any case"

# Each case lists its own line and whether it falls through to the next case.
_COURSE_CASES = (
    ("kubernetes", "Case 1 with lower k kubernetes", False),
    ("Kubernetes", "Case 2 with upper K Kubernetes", True),
    ("Docker", "Case 3 with Docker", False),
    ("Terra", "Case 4 with Terra", False),
)


def greeting() -> str:
    """Return the classic greeting."""
    return "Hello World"


def upper_and_title(first: str, second: str) -> tuple[str, str]:
    """Return ``first`` upper-cased and ``second`` with each word's first letter capitalised.

    Letters other than the first of each word keep their case.
    """
    titled = _WORD_START.sub(lambda match: match.group().upper(), second)
    return first.upper(), titled


def top_score(*args: int) -> int:
    """Return the highest of the given scores."""
    if not args:
        raise ValueError("no scores given")
    return max(args)


def compare_course_lengths(docker: int, kubernetes: int) -> list[str]:
    """Describe which of the two courses is longer."""
    if docker > kubernetes:
        return ["Docker is a longer course"]
    if docker == kubernetes:
        return ["Both courses have the same duration"]
    lines = ["Kubernetes is a longer course"]
    if kubernetes < 150:
        lines.append("The Kubernetes course is still within the viewing time limit")
    return lines


def course_switch(name: str) -> list[str]:
    """Return the lines a case-by-case match on ``name`` produces, with fall-through."""
    lines: list[str] = []
    matched = False
    for case, line, falls_through in _COURSE_CASES:
        if matched or case == name:
            matched = True
            lines.append(line)
            if not falls_through:
                return lines
    return lines or [_INVALID]


def parity(number: int) -> str:
    """Describe a single digit as even or odd; anything else is an invalid entry."""
    if number in (0, 2, 4, 6, 8):
        return "Number is even"
    if number in (1, 3, 5, 7, 9):
        return "Number is odd"
    return _INVALID


def random_digit(rng: random.Random | None = None) -> int:
    """Return a random digit from 0 to 9; by default seeded with the current second."""
    if rng is None:
        rng = random.Random(int(time.time()))
    return rng.randrange(10)


def roll_number_sum(clip: int, roll_number: str) -> int:
    """Add a roll number given as text to ``clip``."""
    if not _INTEGER.fullmatch(roll_number):
        raise ValueError(f"invalid roll number: {roll_number!r}")
    return clip + int(roll_number)


def environment_lines(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the environment as ``KEY=VALUE`` lines."""
    env = os.environ if environ is None else environ
    return [f"{key}={value}" for key, value in env.items()]