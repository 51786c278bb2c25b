import pytest

from aocsolve.y2015_day02 import part_one, part_two


@pytest.mark.parametrize(("text", "expected"), [("2x3x4", 58), ("1x1x10", 43)])
def test_part_one(text, expected):
    assert part_one(text) == expected


@pytest.mark.parametrize(("text", "expected"), [("2x3x4", 34), ("1x1x10", 14)])
def test_part_two(text, expected):
    assert part_two(text) == expected


def test_multiple_lines_are_summed():
    assert part_one("2x3x4\n1x1x10\n") == 101
    assert part_two("2x3x4\n1x1x10\n") == 48


def test_order_of_dimensions_does_not_change_result():
    assert part_one("4x3x2") == part_one("2x3x4")
    assert part_two("4x2x3") == part_two("2x3x4")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part_one("2x3")