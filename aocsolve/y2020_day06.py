"""Counting customs declaration answers per group."""

from collections import Counter


def _groups(text: str):
    for group in text.split("\n\n"):
        yield [person.strip() for person in group.splitlines()]


def part_one(text: str) -> int:
    """Sum, over groups, the questions anyone in the group answered."""
    return sum(len(set("".join(people))) for people in _groups(text))


def part_two(text: str) -> int:
    """Sum, over groups, the questions everyone in the group answered."""
    total = 0
    for people in _groups(text):
        counts = Counter(char for person in people for char in person)
        total += sum(1 for count in counts.values() if count == len(people))
    return total