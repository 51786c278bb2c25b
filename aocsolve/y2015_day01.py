"""Floor counting from a string of parentheses."""

from itertools import accumulate

_STEPS = {"(": 1, ")": -1}


def _steps(text: str):
    return (_STEPS.get(char, 0) for char in text)


def part_one(text: str) -> int:
    """Return the floor reached after following every instruction."""
    return sum(_steps(text))


def part_two(text: str) -> int:
    """Return the 1-based position of the first step into the basement.

    If the basement is never entered, the final floor is returned instead.
    """
    floor = 0
    for position, floor in enumerate(accumulate(_steps(text)), start=1):
        if floor < 0:
            return position
    return floor