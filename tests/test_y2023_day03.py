import pytest

from aocsolve.y2023_day03 import part_one, part_two

EXAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 4361


def test_part_two_example():
    assert part_two(EXAMPLE) == 467835


def test_part_one_diagonal_symbol():
    assert part_one("467..\n...*.") == 467


def test_part_one_without_symbols_is_zero():
    assert part_one("123..\n..45.") == 0


def test_part_one_does_not_wrap_around_rows():
    assert part_one("...#\n1...") == 0


@pytest.mark.parametrize("text", ["12*..", "*....\n.....\n...9."])
def test_part_two_needs_two_numbers(text):
    assert part_two(text) == 0


def test_part_two_ignores_other_symbols():
    assert part_two("2#3") == 0


def test_part_two_is_not_more_than_sum_of_products_bound():
    assert part_two("2*3") == 6