import pytest

from roman_calculator.common.errors import InvalidNumeral
from roman_calculator.common.roman_numerals import (
    convert_int_to_roman,
    convert_roman_to_int,
    is_arabic,
)


@pytest.mark.parametrize(
    "roman, integer",
    [
        ("I", 1),
        ("II", 2),
        ("III", 3),
        ("IV", 4),
        ("V", 5),
        ("VI", 6),
        ("VII", 7),
        ("VIII", 8),
        ("IX", 9),
        ("X", 10),
        # Beyond the operand range, still decoded
        ("XIV", 14),
        ("XXXIX", 39),
        # Non-canonical forms are decoded additively
        ("IIII", 4),
        ("VV", 10),
    ],
)
def test_roman_to_int(roman, integer):
    assert convert_roman_to_int(roman) == integer


def test_empty_roman_is_zero():
    assert convert_roman_to_int("") == 0


@pytest.mark.parametrize("invalid_roman", ["A", "IZ", "L", "iv", "I V", "5"])
def test_roman_to_int_rejects_unknown_symbols(invalid_roman):
    with pytest.raises(InvalidNumeral):
        convert_roman_to_int(invalid_roman)


@pytest.mark.parametrize(
    "integer, roman",
    [
        (1, "I"),
        (4, "IV"),
        (9, "IX"),
        (14, "XIV"),
        (20, "XX"),
        # No XL in the denomination table
        (40, "XXXX"),
        (50, "L"),
        (90, "LXXXX"),
        (100, "C"),
    ],
)
def test_int_to_roman(integer, roman):
    assert convert_int_to_roman(integer) == roman


@pytest.mark.parametrize("value", [0, -1, -10])
def test_int_to_roman_rejects_non_positive(value):
    with pytest.raises(InvalidNumeral):
        convert_int_to_roman(value)


def test_round_trip_over_operand_range():
    for n in range(1, 11):
        assert convert_roman_to_int(convert_int_to_roman(n)) == n


@pytest.mark.parametrize("token", ["7", "10", "007", "+5", "-3", "11"])
def test_is_arabic(token):
    assert is_arabic(token)


@pytest.mark.parametrize("token", ["VII", "", "1_0", "1.0", "５", "+", "3a"])
def test_is_not_arabic(token):
    assert not is_arabic(token)
