# puzzlebox

Solvers for a selection of Advent of Code 2022 and 2023 puzzles, plus a
few small exercises in everyday Python. No third-party dependencies.

## Puzzles

| Module                    | Puzzle                                          |
|---------------------------|-------------------------------------------------|
| `puzzlebox.y2022_day01`   | Calorie counting: largest and top-three totals  |
| `puzzlebox.y2022_day02`   | Rock, paper, scissors strategy scores           |
| `puzzlebox.y2022_day03`   | Rucksack item priorities and group badges       |
| `puzzlebox.y2022_day04`   | Contained and overlapping section ranges        |
| `puzzlebox.y2022_day05`   | Crate stacks, moved one at a time or in batches |
| `puzzlebox.y2022_day06`   | Start-of-packet and start-of-message markers    |
| `puzzlebox.y2023_day01`   | Calibration values, with digits spelt out too   |
| `puzzlebox.y2023_day02`   | Cube games: valid game ids and power sums       |
| `puzzlebox.y2023_day03`   | Engine schematic part numbers and gear ratios   |
| `puzzlebox.y2023_day04`   | Scratchcard points and card copies              |
| `puzzlebox.y2023_day05`   | Seed-to-location almanac lookups                |
| `puzzlebox.y2023_day06`   | Boat race winning options                       |

Every solver takes the puzzle input as an iterable of lines, so input can
come from a file, a string or a test fixture alike. Malformed input raises
`ValueError`.

```python
from pathlib import Path

from puzzlebox import y2023_day02

lines = Path("input.txt").read_text().splitlines()
print(y2023_day02.valid_game_id_sum(lines))
print(y2023_day02.power_sum(lines))
```

Smaller building blocks are public as well, for example:

- `y2022_day03.priority(item)` — `a`–`z` are 1–26, `A`–`Z` are 27–52.
- `y2022_day06.find_marker(data_stream, size)` — number of characters read
  until the last `size` of them are all different (`size` defaults to
  `MESSAGE_MARKER_SIZE`, 14; `PACKET_MARKER_SIZE` is 4).
- `y2022_day05.solve(lines, batch)` — `batch=False` moves crates one at a
  time, `batch=True` (the default) moves them all at once.
- `y2023_day05.parse_almanac(lines, seed_ranges)` returns an `Almanac`
  whose `location(seed)` and `lowest_location()` follow seeds through
  the seven `Stage` maps.
- `y2023_day06.read_race_records(lines)`, `options_product(records)` and
  `winning_span(records)`.

## Command line

Installing the package provides the `puzzlebox` command:

```
puzzlebox YEAR DAY [INPUT]
```

`INPUT` is a file path, or `-` (the default) to read standard input. The
command prints `Hello Advent YEAR` followed by one `Part N: answer` line
for each part, and exits with status 1 on unreadable or malformed input.

```
puzzlebox 2023 2 input.txt
puzzlebox --help
```

The same is available from Python as
`puzzlebox.cli.run_puzzle(year, day, lines)`, which returns a tuple of the
answers.

## Exercises

- `puzzlebox.basics`: `greeting()`, `upper_and_title(first, second)`,
  `top_score(*scores)`, `compare_course_lengths(docker, kubernetes)`,
  `course_switch(name)`, `parity(number)`, `random_digit(rng)`,
  `roll_number_sum(clip, roll_number)` and `environment_lines(environ)`.
- `puzzlebox.demos`: countdowns, `course_progress`, `slice_growth`,
  `league_table_updates` and the `FootballClub` dataclass.
- `puzzlebox.concurrency`: `concurrent_greetings`, `buffered_channel_demo`
  and `unbuffered_channel_demo`, threads passing values through bounded
  queues; each takes a `delay` in seconds (default 5.0) and returns the
  messages in the order they happened.

## Limits

Only the days listed above are solved; any other year and day is
rejected. The package does not download puzzle inputs — you supply them.

## Development

```
pip install -e ".[test]"
pytest
```