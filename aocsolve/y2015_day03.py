"""Houses visited while following arrow directions on an infinite grid."""

from enum import Enum


class Direction(Enum):
    """A move on the grid, identified by its arrow character."""

    NORTH = "^"
    SOUTH = "v"
    EAST = ">"
    WEST = "<"

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Return the direction for an arrow character.

        Raises ValueError for any other character.
        """
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"unknown direction character: {char!r}") from None

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


def _visit(moves):
    x, y = 0, 0
    visited = {(x, y)}
    for direction in moves:
        dx, dy = direction.delta
        x, y = x + dx, y + dy
        visited.add((x, y))
    return visited


def part_one(text: str) -> int:
    """Return how many distinct houses receive at least one present."""
    return len(_visit(Direction.from_char(char) for char in text))


def part_two(text: str) -> int:
    """Return distinct houses visited when two deliverers alternate moves."""
    moves = [Direction.from_char(char) for char in text]
    return len(_visit(moves[0::2]) | _visit(moves[1::2]))