import pytest

from aocsolve.y2023_day04 import part_one, part_two

EXAMPLE = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 13


def test_part_two_example():
    assert part_two(EXAMPLE) == 30


def test_part_one_no_matches():
    assert part_one("Card 1: 1 2 3 | 4 5 6") == 0


def test_part_two_without_wins_counts_originals():
    assert part_two("Card 1: 1 | 2\nCard 2: 3 | 4") == 2


def test_part_two_counts_copies_past_the_table():
    assert part_two("Card 1: 1 | 1") == 2


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        part_one("Card 1: 1 2 3")


def test_part_two_missing_colon_raises():
    with pytest.raises(ValueError):
        part_two("Card 1 1 2 | 3")


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        part_one("Card 1: a | b")