"""Summing balanced base-five (SNAFU) numbers."""

_DIGITS = {"2": 2, "1": 1, "0": 0, "-": -1, "=": -2}


def snafu_to_int(text: str) -> int:
    """Convert a SNAFU numeral to an integer.

    Raises ValueError on a character that is not a SNAFU digit.
    """
    value = 0
    for char in text:
        try:
            digit = _DIGITS[char]
        except KeyError:
            raise ValueError(f"unknown SNAFU digit: {char!r}") from None
        value = value * 5 + digit
    return value


def part_one(text: str) -> int:
    """Return the sum of the SNAFU numbers, one per line.

    Characters that are not SNAFU digits are ignored.
    """
    return sum(
        snafu_to_int("".join(char for char in line.strip() if char in _DIGITS))
        for line in text.splitlines()
    )