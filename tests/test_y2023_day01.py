import pytest

from aocsolve.y2023_day01 import part_one, part_two


@pytest.mark.parametrize(
    ("line", "expected"),
    [("1abc2", 12), ("treb7uchet", 77), ("a1b2c3d4e5f", 15)],
)
def test_part_one_lines(line, expected):
    assert part_one(line) == expected


def test_part_one_sums_lines():
    assert part_one("1abc2\ntreb7uchet\n") == 89


def test_part_one_ignores_words():
    assert part_one("one2three4five") == 24


def test_part_one_requires_digit():
    with pytest.raises(ValueError):
        part_one("abc")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("two1nine", 29),
        ("eightwothree", 83),
        ("zoneight234", 14),
        ("7pqrstsixteen", 76),
        ("oneight", 18),
    ],
)
def test_part_two_lines(line, expected):
    assert part_two(line) == expected


def test_part_two_sums_lines():
    assert part_two("two1nine\neightwothree") == 112


def test_part_two_requires_digit():
    with pytest.raises(ValueError):
        part_two("xyz")