"""Command line entry point for solving a puzzle from an input file."""

import argparse
import sys

from aocsolve import (
    y2015_day01,
    y2015_day02,
    y2015_day03,
    y2015_day04,
    y2015_day05,
    y2015_day06,
    y2015_day07,
    y2020_day05,
    y2020_day06,
    y2022_day25,
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
)

_SOLVERS = {
    (2015, 1): (y2015_day01.part_one, y2015_day01.part_two),
    (2015, 2): (y2015_day02.part_one, y2015_day02.part_two),
    (2015, 3): (y2015_day03.part_one, y2015_day03.part_two),
    (2015, 4): (y2015_day04.part_one, y2015_day04.part_two),
    (2015, 5): (y2015_day05.part_one, y2015_day05.part_two),
    (2015, 6): (y2015_day06.part_one, y2015_day06.part_two),
    (2015, 7): (y2015_day07.part_one,),
    (2020, 5): (y2020_day05.part_one, y2020_day05.part_two),
    (2020, 6): (y2020_day06.part_one, y2020_day06.part_two),
    (2022, 25): (y2022_day25.part_one,),
    (2023, 1): (y2023_day01.part_one, y2023_day01.part_two),
    (2023, 2): (y2023_day02.part_one, y2023_day02.part_two),
    (2023, 3): (y2023_day03.part_one, y2023_day03.part_two),
    (2023, 4): (y2023_day04.part_one, y2023_day04.part_two),
}


def _parts(year: int, day: int):
    try:
        return _SOLVERS[(year, day)]
    except KeyError:
        raise ValueError(f"no solver for {year} day {day}") from None


def solve(year, day, part, text):
    """Solve one part of a puzzle for the given input text.

    Raises ValueError if the puzzle or the part has no solver.
    """
    parts = _parts(year, day)
    if not 1 <= part <= len(parts):
        raise ValueError(f"no solver for {year} day {day} part {part}")
    return parts[part - 1](text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aocsolve", description="Solve a puzzle from its input file."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("input", help="input file, or '-' for standard input")
    parser.add_argument(
        "--part", type=int, choices=(1, 2), help="solve only this part"
    )
    return parser


def main(argv=None) -> int:
    """Run the command; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        parts = _parts(args.year, args.day)
    except ValueError as error:
        parser.error(str(error))
    wanted = [args.part] if args.part else list(range(1, len(parts) + 1))
    if args.part and args.part > len(parts):
        parser.error(f"no solver for {args.year} day {args.day} part {args.part}")
    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as error:
        print(f"aocsolve: {error}", file=sys.stderr)
        return 1
    for part in wanted:
        print(f"Part {part}: {solve(args.year, args.day, part, text)}")
    return 0