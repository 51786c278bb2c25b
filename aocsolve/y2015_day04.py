"""Mining numbers whose MD5 digest starts with a run of zeroes."""

import hashlib
from itertools import count


def mine(secret: str, prefix: str) -> int:
    """Return the lowest non-negative number whose MD5 hex digest of
    secret + number starts with prefix."""
    for number in count():
        digest = hashlib.md5(f"{secret}{number}".encode()).hexdigest()
        if digest.startswith(prefix):
            return number
    raise AssertionError("unreachable")


def part_one(text: str) -> int:
    """Return the lowest number giving a digest with five leading zeroes."""
    return mine(text, "00000")


def part_two(text: str) -> int:
    """Return the lowest number giving a digest with six leading zeroes."""
    return mine(text, "000000")