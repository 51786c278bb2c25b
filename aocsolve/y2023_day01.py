"""Recovering calibration values from lines of text."""

import string

_WORDS = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def _calibration(digits) -> int:
    digits = list(digits)
    if not digits:
        raise ValueError("line holds no digit")
    return int(digits[0] + digits[-1])


def _digits(line: str):
    return (char for char in line if char in string.digits)


def _spelled_digits(line: str):
    for index, char in enumerate(line):
        rest = line[index:]
        word = next((digit for name, digit in _WORDS.items() if rest.startswith(name)), None)
        if word is not None:
            yield word
        elif char in string.digits:
            yield char


def part_one(text: str) -> int:
    """Sum the two-digit numbers formed by each line's first and last digit.

    Raises ValueError if a line holds no digit.
    """
    return sum(_calibration(_digits(line)) for line in text.splitlines())


def part_two(text: str) -> int:
    """Like part_one, but digits spelled out as words count too."""
    return sum(_calibration(_spelled_digits(line)) for line in text.splitlines())