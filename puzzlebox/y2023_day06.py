"""Wait for it: ways to beat boat race records."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class RaceRecord:
    """A race's duration and its record distance."""

    time: int
    distance: int

    def beats(self, hold: int) -> bool:
        """Return True if holding the button for ``hold`` beats the record."""
        return (self.time - hold) * hold > self.distance


def read_race_records(lines: Iterable[str]) -> list[RaceRecord]:
    """Read the time line and the distance line into records."""
    rows = list(lines)
    if len(rows) < 2:
        raise ValueError("need a time line and a distance line")
    times = _NUMBER.findall(rows[0])
    distances = _NUMBER.findall(rows[1])
    if len(times) != len(distances):
        raise ValueError("Invalid data")
    return [RaceRecord(int(t), int(d)) for t, d in zip(times, distances)]


def winning_options(record: RaceRecord) -> int:
    """Count the hold times from 0 to the race time that beat the record."""
    return sum(1 for hold in range(record.time + 1) if record.beats(hold))


def options_product(records: Iterable[RaceRecord]) -> int:
    """Multiply the winning option counts of all races."""
    return math.prod(winning_options(record) for record in records)


def first_winning_hold(record: RaceRecord, start: int, step: int) -> int:
    """Walk from ``start`` by ``step`` to the first hold that beats the record.

    If none is found, the first value outside 0..time is returned.
    """
    hold = start
    while 0 <= hold <= record.time:
        if record.beats(hold):
            break
        hold += step
    return hold


def winning_span(records: Sequence[RaceRecord]) -> int:
    """Count winning holds of the single race from its lowest to highest winning hold."""
    if len(records) != 1:
        raise ValueError("Invalid data")
    record = records[0]
    lowest = first_winning_hold(record, 0, 1)
    highest = first_winning_hold(record, record.time, -1)
    return highest - lowest + 1