"""Operating a 1000x1000 grid of lights from a list of instructions."""

from dataclasses import dataclass
from enum import Enum

GRID_SIZE = 1000

_TOGGLE_TABLE = bytes.maketrans(b"\x00\x01", b"\x01\x00")


class Action(Enum):
    """What an instruction does to the lights in its rectangle."""

    TURN_ON = "turn on"
    TURN_OFF = "turn off"
    TOGGLE = "toggle"


def _parse_point(text: str) -> tuple[int, int]:
    x, y = text.split(",")[:2]
    return int(x), int(y)


@dataclass(frozen=True)
class Instruction:
    """An action applied to the inclusive rectangle from start to end."""

    action: Action
    start: tuple[int, int]
    end: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> "Instruction":
        """Parse a line such as 'turn on 0,0 through 999,999'.

        Raises ValueError on an unknown action or malformed coordinates.
        """
        words = line.split()
        if not words:
            raise ValueError("empty instruction")
        if words[0] == Action.TOGGLE.value:
            action_text, rest = words[0], words[1:]
        else:
            action_text, rest = " ".join(words[:2]), words[2:]
        try:
            action = Action(action_text)
        except ValueError:
            raise ValueError(f"unknown action: {action_text!r}") from None
        if len(rest) < 3:
            raise ValueError(f"malformed instruction: {line!r}")
        return cls(action, _parse_point(rest[0]), _parse_point(rest[2]))

    def spans(self):
        """Yield (row, column slice) pairs covering the rectangle."""
        (x0, y0), (x1, y1) = self.start, self.end
        for coordinate in (x0, y0, x1, y1):
            if not 0 <= coordinate < GRID_SIZE:
                raise ValueError(f"coordinate {coordinate} is outside the grid")
        columns = slice(y0, y1 + 1)
        for x in range(x0, x1 + 1):
            yield x, columns


def _instructions(text: str):
    return [Instruction.parse(line) for line in text.splitlines()]


def part_one(text: str) -> int:
    """Return how many lights are lit after following every instruction."""
    grid = [bytearray(GRID_SIZE) for _ in range(GRID_SIZE)]
    for instruction in _instructions(text):
        for x, columns in instruction.spans():
            row = grid[x]
            width = len(row[columns])
            if instruction.action is Action.TURN_ON:
                row[columns] = b"\x01" * width
            elif instruction.action is Action.TURN_OFF:
                row[columns] = bytes(width)
            else:
                row[columns] = row[columns].translate(_TOGGLE_TABLE)
    return sum(row.count(1) for row in grid)


def part_two(text: str) -> int:
    """Return the total brightness after following every instruction."""
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for instruction in _instructions(text):
        for x, columns in instruction.spans():
            row = grid[x]
            if instruction.action is Action.TURN_ON:
                row[columns] = [value + 1 for value in row[columns]]
            elif instruction.action is Action.TURN_OFF:
                row[columns] = [max(value - 1, 0) for value in row[columns]]
            else:
                row[columns] = [value + 2 for value in row[columns]]
    return sum(sum(row) for row in grid)