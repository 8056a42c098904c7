"""Validation utilities for calculator expressions.

This module provides the checks an expression goes through after its operands
have been resolved, ensuring consistent error reporting across the evaluator.
"""
from .config import MAX_OPERAND, MIN_OPERAND
from .errors import MixedNumeralSystems, OperandOutOfRange
from .models import Operand


def validate_operand_range(operand: Operand, minimum: int = MIN_OPERAND, maximum: int = MAX_OPERAND) -> None:
    """Validate that an operand's value lies within the accepted range.

    The check applies to the resolved value, so "X" and "10" are both fine
    while "11" and "XI" are both rejected.

    Args:
        operand: Resolved operand to validate
        minimum: Smallest accepted value (inclusive)
        maximum: Largest accepted value (inclusive)

    Raises:
        OperandOutOfRange: If the value is below minimum or above maximum

    Example:
        >>> validate_operand_range(Operand(token="11", value=11, is_arabic=True))
        Traceback (most recent call last):
            ...
        roman_calculator.common.errors.OperandOutOfRange: the entered number must be from 1 to 10 inclusive
    """
    if not minimum <= operand.value <= maximum:
        raise OperandOutOfRange(minimum, maximum)


def validate_same_numeral_system(left: Operand, right: Operand) -> None:
    """Validate that both operands are written in the same numeral system.

    Both Arabic or both Roman are accepted. The tag comes from how each token
    was written, not from its value.

    Raises:
        MixedNumeralSystems: If one operand is Arabic and the other Roman
    """
    if left.is_arabic != right.is_arabic:
        raise MixedNumeralSystems()
