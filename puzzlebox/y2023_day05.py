"""Seed almanac: following seeds through a chain of range maps."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_NUMBER = re.compile(r"[0-9]+")


class Stage(enum.Enum):
    """The conversion maps of the almanac, in the order they are applied."""

    SOIL = "seed-to-soil"
    FERTILIZER = "soil-to-fertilizer"
    WATER = "fertilizer-to-water"
    LIGHT = "water-to-light"
    TEMPERATURE = "light-to-temperature"
    HUMIDITY = "temperature-to-humidity"
    LOCATION = "humidity-to-location"


_STAGES = tuple(Stage)


@dataclass(frozen=True)
class MapRange:
    """One line of a map: sources ``source`` to ``source + length`` inclusive."""

    destination: int
    source: int
    length: int

    def lookup(self, value: int) -> int | None:
        """Return the mapped value, or None if ``value`` lies outside this range."""
        if value < self.source or value > self.source + self.length:
            return None
        return self.destination + (value - self.source)


@dataclass
class Almanac:
    """The seeds to plant and the maps that lead from seed to location."""

    seeds: list[int] = field(default_factory=list)
    maps: dict[Stage, list[MapRange]] = field(
        default_factory=lambda: {stage: [] for stage in Stage}
    )

    def convert(self, stage: Stage, value: int) -> int:
        """Map ``value`` through one stage; the last matching range wins."""
        result = value
        for entry in self.maps.get(stage, ()):
            mapped = entry.lookup(value)
            if mapped is not None:
                result = mapped
        return result

    def location(self, seed: int) -> int:
        """Follow a seed through every stage to its location."""
        value = seed
        for stage in _STAGES:
            value = self.convert(stage, value)
        return value

    def lowest_location(self) -> int:
        """Return the lowest location of any seed."""
        if not self.seeds:
            raise ValueError("the almanac lists no seeds")
        return min(self.location(seed) for seed in self.seeds)


def _parse_seeds(text: str, seed_ranges: bool) -> list[int]:
    numbers = [int(number) for number in _NUMBER.findall(text)]
    if not seed_ranges:
        return numbers
    if len(numbers) % 2:
        raise ValueError("seed ranges must come in start/length pairs")
    seeds: list[int] = []
    for start, length in zip(numbers[::2], numbers[1::2]):
        seeds.extend(range(start, start + length))
    return seeds


def _parse_range(line: str) -> MapRange:
    numbers = _NUMBER.findall(line)
    if len(numbers) != 3:
        raise ValueError(f"Invalid data {line}")
    destination, source, length = (int(number) for number in numbers)
    return MapRange(destination, source, length)


def parse_almanac(lines: Iterable[str], seed_ranges: bool = False) -> Almanac:
    """Read an almanac.

    With ``seed_ranges`` the seed numbers are read as start/length pairs.
    A line without numbers closes the open maps; if several are open, data
    goes to the earliest of them.
    """
    almanac = Almanac()
    seeds_loaded = False
    active: set[Stage] = set()
    for raw in lines:
        line = raw.rstrip("\r\n")
        if "seeds" in line and not seeds_loaded:
            parts = line.split(":")
            if len(parts) < 2:
                raise ValueError(f"malformed seeds line: {line!r}")
            almanac.seeds = _parse_seeds(parts[1], seed_ranges)
            seeds_loaded = True
            continue
        header = next(
            (stage for stage in _STAGES if f"{stage.value} map" in line), None
        )
        if header is not None:
            active.add(header)
            continue
        if not _NUMBER.search(line):
            active.clear()
            continue
        target = next((stage for stage in _STAGES if stage in active), None)
        if target is not None:
            almanac.maps[target].append(_parse_range(line))
    return almanac


def lowest_location(lines: Iterable[str]) -> int:
    """Return the lowest location of the listed seeds."""
    return parse_almanac(lines, seed_ranges=False).lowest_location()


def lowest_location_with_ranges(lines: Iterable[str]) -> int:
    """Return the lowest location when seeds are given as ranges."""
    return parse_almanac(lines, seed_ranges=True).lowest_location()