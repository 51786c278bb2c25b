"""Decoding binary space partitioned boarding passes."""

from dataclasses import dataclass

_ROW_STEPS = {"F": False, "B": True}
_COLUMN_STEPS = {"L": False, "R": True}


def _partition(upper_halves, high: int) -> tuple[int, int]:
    low = 0
    for upper in upper_halves:
        mid = (high - low) // 2 + low
        if upper:
            low = mid + 1
        else:
            high = mid
    return low, high


@dataclass(frozen=True)
class BoardingPass:
    """A seat located by its row and column."""

    row: int
    column: int

    @classmethod
    def parse(cls, line: str) -> "BoardingPass":
        """Decode a code of seven F/B then three L/R characters.

        Characters after the tenth are ignored. Raises ValueError if the
        code is too short or holds an unexpected character.
        """
        code = line.strip()
        if len(code) < 10:
            raise ValueError(f"boarding pass too short: {code!r}")
        try:
            rows = [_ROW_STEPS[char] for char in code[:7]]
            columns = [_COLUMN_STEPS[char] for char in code[7:10]]
        except KeyError as error:
            raise ValueError(f"invalid boarding pass character: {error.args[0]!r}") from None
        row, _ = _partition(rows, 127)
        _, column = _partition(columns, 7)
        return cls(row, column)

    def seat_id(self) -> int:
        """Return row * 8 + column."""
        return self.row * 8 + self.column


def parse(text: str) -> list[BoardingPass]:
    """Return the boarding passes in text, skipping blank and invalid lines."""
    passes = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            passes.append(BoardingPass.parse(line))
        except ValueError:
            continue
    return passes


def part_one(text: str) -> int:
    """Return the highest seat id. Raises ValueError if there are no passes."""
    ids = [boarding_pass.seat_id() for boarding_pass in parse(text)]
    if not ids:
        raise ValueError("no boarding passes")
    return max(ids)


def part_two(text: str) -> int:
    """Return the first missing seat id whose neighbours are both taken.

    Raises ValueError if there is no such seat.
    """
    ids = sorted(boarding_pass.seat_id() for boarding_pass in parse(text))
    if not ids:
        raise ValueError("no boarding passes")
    taken = set(ids)
    for seat in range(ids[0], ids[-1]):
        if seat not in taken and seat - 1 in taken and seat + 1 in taken:
            return seat
    raise ValueError("no free seat found")