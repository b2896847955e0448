"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from collections.abc import Iterable

# Second column read as lose (X), draw (Y), win (Z).
_OUTCOME_SCORES = {
    ("A", "Y"): 4,
    ("B", "Y"): 5,
    ("C", "Y"): 6,
    ("A", "X"): 3,
    ("B", "X"): 1,
    ("C", "X"): 2,
    ("A", "Z"): 8,
    ("B", "Z"): 9,
    ("C", "Z"): 7,
}

# Second column read as rock (X), paper (Y), scissors (Z).
_SHAPE_SCORES = {
    ("A", "X"): 4,
    ("B", "Y"): 5,
    ("C", "Z"): 6,
    ("A", "Z"): 3,
    ("B", "X"): 1,
    ("C", "Y"): 2,
    ("A", "Y"): 8,
    ("B", "Z"): 9,
    ("C", "X"): 7,
}


def score_outcome_strategy(opponent: str, column: str) -> int:
    """Score a round whose second column names the outcome; unknown pairs score 0."""
    return _OUTCOME_SCORES.get((opponent, column), 0)


def score_shape_strategy(opponent: str, column: str) -> int:
    """Score a round whose second column names the shape; unknown pairs score 0."""
    return _SHAPE_SCORES.get((opponent, column), 0)


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the totals under the outcome reading and the shape reading."""
    total_outcome = 0
    total_shape = 0
    for raw in lines:
        parts = raw.rstrip("\r\n").split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed strategy line: {raw!r}")
        opponent, column = parts[0], parts[1]
        total_outcome += score_outcome_strategy(opponent, column)
        total_shape += score_shape_strategy(opponent, column)
    return total_outcome, total_shape