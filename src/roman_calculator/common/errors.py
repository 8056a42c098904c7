"""Exceptions raised while parsing and evaluating calculator expressions.

Every error is a local validation failure. They all derive from
``CalculatorError`` (itself a ``ValueError``) so the interactive loop can
report any of them and move on to the next line.
"""


class CalculatorError(ValueError):
    """Base class for every expression error."""
    pass


class InvalidNumeral(CalculatorError):
    """A Roman numeral could not be decoded or encoded."""
    pass


class MalformedExpression(CalculatorError):
    """The line does not split into exactly three tokens."""

    def __init__(self, message: str = "invalid expression format"):
        super().__init__(message)


class InvalidOperand(CalculatorError):
    """A token is neither an Arabic integer nor a Roman numeral."""

    def __init__(self, token: str):
        super().__init__(f"invalid number format: {token}")
        self.token = token


class OperandOutOfRange(CalculatorError):
    def __init__(self, minimum: int, maximum: int):
        super().__init__(f"the entered number must be from {minimum} to {maximum} inclusive")
        self.minimum = minimum
        self.maximum = maximum


class MixedNumeralSystems(CalculatorError):
    def __init__(self):
        super().__init__("either only Arabic or Roman numerals are allowed")


class DivisionByZero(CalculatorError):
    def __init__(self):
        super().__init__("division by zero is not allowed")


class UnknownOperator(CalculatorError):
    def __init__(self, operator: str):
        super().__init__(f"invalid operation: {operator}")
        self.operator = operator
