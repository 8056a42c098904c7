"""Evaluate a single "operand operator operand" calculator expression.

Operands are integers from 1 to 10 written either with Arabic digits or as
Roman numerals, never a mix of both. The steps run in a fixed order and the
first failing step decides the error:

1. split the line into exactly three tokens
2. resolve the first and then the second operand to integers
3. check that both values are within range
4. check that both operands use the same numeral system
5. apply the operator
6. format the result, as a Roman numeral when the operands were Roman

Evaluation is pure: the same line always gives the same result.
"""
import operator as op

from .common.config import MAX_OPERAND, MIN_OPERAND, OPERATORS
from .common.errors import DivisionByZero, InvalidNumeral, InvalidOperand, OperandOutOfRange, UnknownOperator
from .common.models import EvaluationResult, Expression, Operand
from .common.roman_numerals import convert_int_to_roman, convert_roman_to_int, is_arabic
from .common.validators import validate_operand_range, validate_same_numeral_system


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise DivisionByZero()
    return left // right


OPERATIONS = {
    "+": op.add,
    "-": op.sub,
    "*": op.mul,
    "/": _divide,
}


def resolve_operand(token: str) -> Operand:
    """Resolve an operand token to its integer value.

    The token is read as a plain integer first and as a Roman numeral second.

    Args:
        token: Operand as it appeared in the expression (e.g. "7", "VII")

    Returns:
        Operand: The token, its value and whether it was written in Arabic

    Raises:
        InvalidOperand: If the token is neither an integer nor a Roman numeral
        OperandOutOfRange: If the integer has too many digits to convert
    """
    if is_arabic(token):
        try:
            value = int(token)
        except ValueError as e:
            # Digit count above sys.get_int_max_str_digits()
            raise OperandOutOfRange(MIN_OPERAND, MAX_OPERAND) from e
        return Operand(token=token, value=value, is_arabic=True)

    try:
        value = convert_roman_to_int(token)
    except InvalidNumeral as e:
        raise InvalidOperand(token) from e

    return Operand(token=token, value=value, is_arabic=False)


def apply_operator(symbol: str, left: int, right: int) -> int:
    """Apply the arithmetic operator named by symbol.

    Division is integer division.

    Raises:
        UnknownOperator: If symbol is not one of + - * /
        DivisionByZero: If dividing by zero
    """
    if symbol not in OPERATORS:
        raise UnknownOperator(symbol)
    return OPERATIONS[symbol](left, right)


def format_result(value: int, roman: bool) -> EvaluationResult:
    """Render a computed value for display.

    Roman results are only produced for positive values; zero and negative
    values fall back to the raw integer.
    """
    if not roman:
        return value

    try:
        return convert_int_to_roman(value)
    except InvalidNumeral:
        return value


def evaluate(line: str) -> EvaluationResult:
    """Evaluate one expression line.

    Args:
        line: Text such as "3 + 4" or "IX / III"

    Returns:
        EvaluationResult: An int when the operands were Arabic, otherwise a
        Roman numeral string (or an int if the result is not positive)

    Raises:
        CalculatorError: One of its subclasses, naming the first check that
            failed

    Examples:
        >>> evaluate("3 + 4")
        7
        >>> evaluate("III + IV")
        'VII'
        >>> evaluate("I - I")
        0
    """
    expression = Expression.from_line(line)

    left = resolve_operand(expression.left)
    right = resolve_operand(expression.right)

    validate_operand_range(left)
    validate_operand_range(right)
    validate_same_numeral_system(left, right)

    value = apply_operator(expression.operator, left.value, right.value)

    return format_result(value, roman=not left.is_arabic)
