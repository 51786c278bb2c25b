# aocsolve

Solutions to a selection of Advent of Code puzzles from 2015, 2020, 2022
and 2023. Each puzzle lives in its own module, named `y<year>_day<NN>`,
with `part_one` and, where solved, `part_two` functions. They take the
puzzle input as a string and return the answer as an `int`.

## Puzzles covered

| Year | Day | Module        | Parts |
|------|-----|---------------|-------|
| 2015 | 1   | `y2015_day01` | 1, 2  |
| 2015 | 2   | `y2015_day02` | 1, 2  |
| 2015 | 3   | `y2015_day03` | 1, 2  |
| 2015 | 4   | `y2015_day04` | 1, 2  |
| 2015 | 5   | `y2015_day05` | 1, 2  |
| 2015 | 6   | `y2015_day06` | 1, 2  |
| 2015 | 7   | `y2015_day07` | 1     |
| 2020 | 5   | `y2020_day05` | 1, 2  |
| 2020 | 6   | `y2020_day06` | 1, 2  |
| 2022 | 25  | `y2022_day25` | 1     |
| 2023 | 1   | `y2023_day01` | 1, 2  |
| 2023 | 2   | `y2023_day02` | 1, 2  |
| 2023 | 3   | `y2023_day03` | 1, 2  |
| 2023 | 4   | `y2023_day04` | 1, 2  |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `aocsolve` command takes a year, a day and an input file (or `-` to
read standard input), and prints the answer to every part it can solve:

```
aocsolve 2015 1 input.txt
```

prints

```
Part 1: ...
Part 2: ...
```

Use `--part 1` or `--part 2` to solve only one part. Asking for a puzzle
or part that has no solver is a usage error (exit status 2); an input file
that cannot be read gives exit status 1. Run `aocsolve --help` for the
full usage.

## Library use

```python
from aocsolve import y2015_day01, y2023_day02
from aocsolve.cli import solve

y2015_day01.part_one("(()(()(")       # 3

with open("input.txt", encoding="utf-8") as handle:
    y2023_day02.part_two(handle.read())

solve(2020, 6, 1, "abc\n\na\nb\nc")  # 6, same as y2020_day06.part_one
```

`solve(year, day, part, text)` raises `ValueError` when there is no
solver for that puzzle or part.

Some modules expose their building blocks as well:

- `y2015_day03.Direction` with `Direction.from_char`
- `y2015_day04.mine(secret, prefix)`
- `y2015_day05.is_nice` and `y2015_day05.is_nicer`
- `y2015_day06.Action` and `y2015_day06.Instruction.parse`
- `y2015_day07.Gate` and `y2015_day07.Circuit` (`Circuit.parse(text)`,
  `circuit.signal(wire)`)
- `y2020_day05.BoardingPass` (`BoardingPass.parse`, `seat_id()`) and
  `y2020_day05.parse`
- `y2022_day25.snafu_to_int`
- `y2023_day02.Round` (`can_contain`) and `y2023_day02.parse_game`

## Errors

Malformed input generally makes the solvers raise `ValueError`. There are
a few deliberate exceptions: `y2015_day07.Circuit.signal` raises
`KeyError` for a wire that has no driver, `Circuit.parse` skips lines it
does not recognise, `y2020_day05.parse` skips blank and invalid lines,
and `y2022_day25.part_one` ignores characters that are not SNAFU digits.

## What it does not do

- There is no second part for 2015 day 7 or 2022 day 25.
- It does not download puzzle inputs or submit answers; you supply the
  input text yourself.