"""Command line entry point: run a puzzle solution on an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from puzzlebox import (
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day05,
    y2022_day06,
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2023_day06,
)

Answers = tuple[object, ...]


def _stream(lines: list[str]) -> str:
    return "".join(line.strip() for line in lines)


def _y2022_day05(lines: list[str]) -> Answers:
    return y2022_day05.solve(lines, batch=False), y2022_day05.solve(lines, batch=True)


def _y2022_day06(lines: list[str]) -> Answers:
    stream = _stream(lines)
    return (
        y2022_day06.find_marker(stream, y2022_day06.PACKET_MARKER_SIZE),
        y2022_day06.find_marker(stream, y2022_day06.MESSAGE_MARKER_SIZE),
    )


def _y2023_day06(lines: list[str]) -> Answers:
    joined = [line.replace(" ", "").replace("\t", "") for line in lines]
    return (
        y2023_day06.options_product(y2023_day06.read_race_records(lines)),
        y2023_day06.winning_span(y2023_day06.read_race_records(joined)),
    )


def _parts(*solvers: Callable[[list[str]], object]) -> Callable[[list[str]], Answers]:
    def run(lines: list[str]) -> Answers:
        return tuple(solver(lines) for solver in solvers)

    return run


_SOLUTIONS: dict[tuple[int, int], Callable[[list[str]], Answers]] = {
    (2022, 1): y2022_day01.solve,
    (2022, 2): y2022_day02.solve,
    (2022, 3): _parts(y2022_day03.part_one, y2022_day03.part_two),
    (2022, 4): y2022_day04.solve,
    (2022, 5): _y2022_day05,
    (2022, 6): _y2022_day06,
    (2023, 1): _parts(y2023_day01.part_one, y2023_day01.part_two),
    (2023, 2): _parts(y2023_day02.valid_game_id_sum, y2023_day02.power_sum),
    (2023, 3): _parts(y2023_day03.part_number_sum, y2023_day03.gear_ratio_sum),
    (2023, 4): _parts(y2023_day04.scratchcard_points, y2023_day04.total_scratchcards),
    (2023, 5): _parts(
        y2023_day05.lowest_location, y2023_day05.lowest_location_with_ranges
    ),
    (2023, 6): _y2023_day06,
}


def run_puzzle(year: int, day: int, lines: Iterable[str]) -> Answers:
    """Solve the puzzle of ``year`` and ``day`` and return the answer of each part."""
    try:
        solution = _SOLUTIONS[(year, day)]
    except KeyError:
        raise ValueError(f"no solution for {year} day {day}") from None
    return tuple(solution(list(lines)))


def main(argv: Sequence[str] | None = None) -> int:
    """Run a puzzle from the command line and print its answers."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox", description="Solve a puzzle for the given year and day."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or - for standard input"
    )
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.input).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Hello Advent {args.year}")
    try:
        answers = run_puzzle(args.year, args.day, text.splitlines())
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for number, answer in enumerate(answers, start=1):
        print(f"Part {number}: {answer}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())