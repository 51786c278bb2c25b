"""Games of coloured cubes drawn from a bag."""

from dataclasses import dataclass

_COLORS = ("red", "green", "blue")


@dataclass(frozen=True)
class Round:
    """Counts of cubes of each colour."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def can_contain(self, other: "Round") -> bool:
        """Return whether every count here is at least the one in other."""
        return self.red >= other.red and self.green >= other.green and self.blue >= other.blue


def _ascii_digits(text: str) -> str:
    return "".join(char for char in text if char.isascii() and char.isdigit())


def _parse_round(text: str) -> Round:
    counts = dict.fromkeys(_COLORS, 0)
    for item in text.split(","):
        item = item.strip()
        color = "".join(char for char in item if char.isalpha())
        digits = _ascii_digits(item)
        if not digits:
            raise ValueError(f"no cube count in {item!r}")
        if color not in counts:
            raise ValueError(f"unknown color: {color!r}")
        counts[color] += int(digits)
    return Round(**counts)


def parse_game(line: str) -> tuple[int, list[Round]]:
    """Parse 'Game N: ...' into the game number and its rounds.

    Raises ValueError on a malformed line.
    """
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"missing ':' in {line!r}")
    digits = _ascii_digits(parts[0])
    if not digits:
        raise ValueError(f"no game number in {line!r}")
    return int(digits), [_parse_round(round_text) for round_text in parts[1].split(";")]


_BAG = Round(red=12, green=13, blue=14)


def part_one(text: str) -> int:
    """Sum the numbers of games possible with 12 red, 13 green and 14 blue cubes."""
    total = 0
    for line in text.splitlines():
        number, rounds = parse_game(line)
        if all(_BAG.can_contain(round_) for round_ in rounds):
            total += number
    return total


def part_two(text: str) -> int:
    """Sum, over games, the product of the fewest cubes of each colour needed."""
    total = 0
    for line in text.splitlines():
        _, rounds = parse_game(line)
        red = max((round_.red for round_ in rounds), default=0)
        green = max((round_.green for round_ in rounds), default=0)
        blue = max((round_.blue for round_ in rounds), default=0)
        total += red * green * blue
    return total