"""Scoring scratchcards of winning numbers and guesses."""

from collections import Counter


def _matches(numbers: str) -> int:
    parts = numbers.split("|")
    if len(parts) < 2:
        raise ValueError(f"missing '|' in {numbers!r}")
    winning = {int(item) for item in parts[0].split()}
    return sum(1 for item in parts[1].split() if int(item) in winning)


def part_one(text: str) -> int:
    """Sum card scores: one point for the first match, doubled for each further one."""
    total = 0
    for line in text.splitlines():
        matches = _matches(line.split(":")[-1])
        if matches:
            total += 2 ** (matches - 1)
    return total


def part_two(text: str) -> int:
    """Return the total number of cards held once won copies are counted.

    Each card with n matches wins one copy of each of the next n cards per
    copy held of it. Raises ValueError on a malformed line.
    """
    copies = Counter()
    for line in text.splitlines():
        parts = line.split(":")
        if len(parts) < 2:
            raise ValueError(f"missing ':' in {line!r}")
        digits = "".join(char for char in parts[0] if char.isascii() and char.isdigit())
        if not digits:
            raise ValueError(f"no card number in {line!r}")
        card = int(digits)
        copies[card] += 1
        held = copies[card]
        for offset in range(1, _matches(parts[1]) + 1):
            copies[card + offset] += held
    return sum(copies.values())