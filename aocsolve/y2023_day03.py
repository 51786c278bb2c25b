"""Finding part numbers and gear ratios in an engine schematic."""

import math
import re
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class _PartNumber:
    value: int
    cells: frozenset


@dataclass(frozen=True)
class _Schematic:
    numbers: list
    symbols: dict


def _parse(text: str) -> _Schematic:
    numbers = []
    symbols = {}
    for y, line in enumerate(text.splitlines()):
        for match in _NUMBER.finditer(line):
            cells = frozenset((x, y) for x in range(match.start(), match.end()))
            numbers.append(_PartNumber(int(match.group()), cells))
        for x, char in enumerate(line):
            if char != "." and char not in _DIGITS:
                symbols[(x, y)] = char
    return _Schematic(numbers, symbols)


def _neighbours(cell) -> set:
    x, y = cell
    return {
        (x + dx, y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if dx or dy
    }


def _touches(number: _PartNumber, positions) -> bool:
    return any(not _neighbours(cell).isdisjoint(positions) for cell in number.cells)


def part_one(text: str) -> int:
    """Sum every number that is adjacent, diagonals included, to a symbol."""
    schematic = _parse(text)
    return sum(
        number.value
        for number in schematic.numbers
        if _touches(number, schematic.symbols)
    )


def part_two(text: str) -> int:
    """Sum the products of the two numbers next to each '*' that touches exactly two."""
    schematic = _parse(text)
    total = 0
    for position, char in schematic.symbols.items():
        if char != "*":
            continue
        around = _neighbours(position)
        adjacent = [
            number.value
            for number in schematic.numbers
            if not around.isdisjoint(number.cells)
        ]
        if len(adjacent) == 2:
            total += math.prod(adjacent)
    return total