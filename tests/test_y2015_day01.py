import pytest

from aocsolve.y2015_day01 import part_one, part_two


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(())", 0),
        ("()()", 0),
        ("))(((((", 3),
        (")())())", -3),
    ],
)
def test_part_one(text, expected):
    assert part_one(text) == expected


def test_part_one_ignores_other_characters():
    assert part_one("((\n)x") == 1


@pytest.mark.parametrize(("text", "expected"), [(")", 1), ("()())", 5)])
def test_part_two(text, expected):
    assert part_two(text) == expected


def test_part_two_without_basement_returns_final_floor():
    assert part_two("((()") == 2


def test_part_two_empty_input():
    assert part_two("") == 0