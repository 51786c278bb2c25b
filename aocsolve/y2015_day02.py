"""Wrapping paper and ribbon for presents given as HxWxL."""


def _dimensions(text: str):
    for line in text.splitlines():
        height, width, length = (int(item) for item in line.split("x")[:3])
        yield height, width, length


def part_one(text: str) -> int:
    """Return the total square feet of wrapping paper needed."""
    total = 0
    for height, width, length in _dimensions(text):
        sides = (length * width, height * length, width * height)
        total += 2 * sum(sides) + min(sides)
    return total


def part_two(text: str) -> int:
    """Return the total feet of ribbon needed."""
    total = 0
    for height, width, length in _dimensions(text):
        smallest = min(height, width)
        second = min(width, length) if smallest == height else min(height, length)
        total += 2 * smallest + 2 * second + height * length * width
    return total