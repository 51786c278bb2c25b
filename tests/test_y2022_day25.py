import pytest

from aocsolve.y2022_day25 import part_one, snafu_to_int


@pytest.mark.parametrize(
    ("numeral", "expected"),
    [
        ("2=-01", 976),
        ("1=-0-2", 1747),
        ("12111", 906),
        ("2=0=", 198),
        ("21", 11),
        ("2=01", 201),
        ("111", 31),
        ("20012", 1257),
        ("112", 32),
        ("1=-1=", 353),
        ("1-12", 107),
        ("12", 7),
        ("1=", 3),
        ("122", 37),
    ],
)
def test_single_numbers(numeral, expected):
    assert part_one(numeral) == expected
    assert snafu_to_int(numeral) == expected


def test_sum_of_indented_lines():
    text = """
                                1=-0-2
                                12111
                                2=0=
                                21
                                2=01
                                111
                                20012
                                112
                                1=-1=
                                1-12
                                12
                                1=
                                122"""
    assert part_one(text) == 4890


def test_empty_numeral_is_zero():
    assert snafu_to_int("") == 0


def test_unknown_digit_rejected():
    with pytest.raises(ValueError):
        snafu_to_int("12x")


def test_part_one_ignores_unknown_characters():
    assert part_one("1x2") == 7