"""Roman numeral conversion utilities for the calculator.

This module provides bidirectional conversion between Roman numerals and integers,
used to read Roman operands and to render results when both operands were Roman.
It also decides whether a token is written as a plain Arabic integer.
"""
import re

from .errors import InvalidNumeral


# Only the symbols an operand from 1 to 10 can be built from
ROMAN_DIGITS = {
    "I": 1,
    "V": 5,
    "X": 10,
}

# Denominations used when encoding, in descending order of value.
# Products of operands up to 10 never exceed C.
ROMAN_DENOMINATIONS = [
    ("C", 100),
    ("L", 50),
    ("X", 10),
    ("IX", 9),   # 9 (10 - 1)
    ("V", 5),
    ("IV", 4),   # 4 (5 - 1)
    ("I", 1),
]

ARABIC_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_arabic(token: str) -> bool:
    """Return True if the token is a plain decimal integer.

    An optional leading sign followed by ASCII digits is accepted. Python's own
    ``int()`` is more lenient (underscores, surrounding whitespace, non-ASCII
    digits), so the check is done with a regular expression first.

    Examples:
        >>> is_arabic("7")
        True
        >>> is_arabic("-3")
        True
        >>> is_arabic("VII")
        False
    """
    return ARABIC_PATTERN.fullmatch(token) is not None


def convert_roman_to_int(roman: str) -> int:
    """Convert a Roman numeral string to an integer.

    The token is scanned left to right. A symbol whose value is strictly less
    than the value of the symbol after it is subtracted (e.g. IX = 10 - 1),
    otherwise it is added. The last symbol is always added.

    Args:
        roman: Roman numeral string made of I, V and X (e.g. "VII", "IX")

    Returns:
        Integer value of the Roman numeral

    Raises:
        InvalidNumeral: If the string contains a character that is not a
            recognized Roman digit

    Examples:
        >>> convert_roman_to_int("IX")
        9
        >>> convert_roman_to_int("VIII")
        8

    Note:
        Empty strings return 0. Rejecting empty tokens is up to the caller.
        Matching is case-sensitive, so "iv" is not a Roman numeral here.
    """
    int_value = 0

    for i, symbol in enumerate(roman):
        if symbol not in ROMAN_DIGITS:
            raise InvalidNumeral(f"invalid Roman numeral character: {symbol}")

        value = ROMAN_DIGITS[symbol]
        if i + 1 < len(roman) and value < ROMAN_DIGITS.get(roman[i + 1], 0):
            # Subtractive pair, e.g. I before X
            int_value -= value
        else:
            int_value += value

    return int_value


def convert_int_to_roman(num: int) -> str:
    """Convert a positive integer to an uppercase Roman numeral string.

    Greedy encoding: the largest denomination not exceeding the remainder is
    appended until nothing is left. The table has no XL or XC entries, so 40
    comes out as XXXX.

    Args:
        num: Positive integer to convert

    Returns:
        Uppercase Roman numeral string

    Raises:
        InvalidNumeral: If num is not a positive integer, since zero and
            negative numbers have no Roman representation

    Examples:
        >>> convert_int_to_roman(7)
        'VII'
        >>> convert_int_to_roman(100)
        'C'
    """
    if not isinstance(num, int) or num <= 0:
        raise InvalidNumeral(f"{num} has no Roman numeral representation")

    result = []

    for roman, value in ROMAN_DENOMINATIONS:
        while num >= value:
            result.append(roman)
            num -= value

    return "".join(result)
