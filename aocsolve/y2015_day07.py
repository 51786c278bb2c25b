"""Evaluating a circuit of 16-bit wires and bitwise gates."""

from dataclasses import dataclass
from enum import Enum

_MASK = 0xFFFF


class Gate(Enum):
    """A bitwise operation driving a wire."""

    AND = "AND"
    OR = "OR"
    LSHIFT = "LSHIFT"
    RSHIFT = "RSHIFT"
    NOT = "NOT"
    ASSIGN = "ASSIGN"


_BINARY = {Gate.AND, Gate.OR, Gate.LSHIFT, Gate.RSHIFT}


def _operand(token: str):
    """Return a 16-bit literal as int, or the token as a wire name."""
    if token.isascii() and token.isdigit() and int(token) <= _MASK:
        return int(token)
    return token


@dataclass(frozen=True)
class _Connection:
    gate: Gate
    operands: tuple


def _parse_line(line: str):
    match line.split():
        case ["NOT", arg, "->", destination]:
            return destination, _Connection(Gate.NOT, (_operand(arg),))
        case [arg, "->", destination]:
            return destination, _Connection(Gate.ASSIGN, (_operand(arg),))
        case [left, name, right, "->", destination] if name in Gate.__members__:
            gate = Gate[name]
            if gate in _BINARY:
                return destination, _Connection(gate, (_operand(left), _operand(right)))
    return None


class Circuit:
    """A set of wires, each driven by one gate."""

    def __init__(self, connections: dict[str, _Connection]):
        self._connections = connections
        self._signals: dict[str, int] = {}

    @classmethod
    def parse(cls, text: str) -> "Circuit":
        """Build a circuit from instruction lines; unrecognised lines are skipped."""
        connections = {}
        for line in text.splitlines():
            parsed = _parse_line(line)
            if parsed is not None:
                destination, connection = parsed
                connections[destination] = connection
        return cls(connections)

    def _value(self, operand) -> int:
        return operand if isinstance(operand, int) else self.signal(operand)

    def signal(self, wire: str) -> int:
        """Return the signal carried by a wire.

        Raises KeyError if the wire, or one it depends on, has no driver.
        """
        if wire in self._signals:
            return self._signals[wire]
        try:
            connection = self._connections[wire]
        except KeyError:
            raise KeyError(f"unable to find wire {wire!r}") from None
        values = [self._value(operand) for operand in connection.operands]
        match connection.gate:
            case Gate.AND:
                result = values[0] & values[1]
            case Gate.OR:
                result = values[0] | values[1]
            case Gate.LSHIFT:
                result = (values[0] << values[1]) & _MASK
            case Gate.RSHIFT:
                result = values[0] >> values[1]
            case Gate.NOT:
                result = ~values[0] & _MASK
            case _:
                result = values[0]
        self._signals[wire] = result
        return result


def part_one(text: str) -> int:
    """Return the signal on wire 'a'."""
    return Circuit.parse(text).signal("a")