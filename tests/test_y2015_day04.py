import hashlib

import pytest

from aocsolve.y2015_day04 import mine, part_one


def _digest(secret, number):
    return hashlib.md5(f"{secret}{number}".encode()).hexdigest()


@pytest.mark.parametrize(
    ("text", "expected"), [("abcdef", 609043), ("pqrstuv", 1048970)]
)
def test_part_one(text, expected):
    assert part_one(text) == expected


def test_mine_empty_prefix_returns_zero():
    assert mine("abcdef", "") == 0


def test_mine_returns_lowest_matching_number():
    number = mine("abcdef", "000")
    assert _digest("abcdef", number).startswith("000")
    assert not any(
        _digest("abcdef", smaller).startswith("000") for smaller in range(number)
    )


def test_mine_with_five_zeroes_matches_known_answer():
    assert mine("abcdef", "00000") == 609043
    assert _digest("abcdef", 609043).startswith("00000")