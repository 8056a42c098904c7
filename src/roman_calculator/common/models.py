"""Typed models for the values that live during a single evaluation.

None of these outlive one call to ``evaluate``; they are frozen so a parsed
expression cannot change between validation steps.
"""
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import EXPRESSION_TOKEN_COUNT
from .errors import MalformedExpression


# Raw integer when at least one operand was Arabic, Roman string otherwise
EvaluationResult = Union[int, str]


class Expression(BaseModel):
    """An input line split into operand, operator, operand.

    Attributes:
        left: First operand token, as typed
        operator: Operator token, not yet checked against the known symbols
        right: Second operand token, as typed
    """
    model_config = ConfigDict(frozen=True)

    left: str = Field(..., min_length=1)
    operator: str = Field(..., min_length=1)
    right: str = Field(..., min_length=1)

    @classmethod
    def from_line(cls, line: str) -> "Expression":
        """Split a line on whitespace into an expression.

        Raises:
            MalformedExpression: If the line does not hold exactly three tokens
        """
        tokens: List[str] = line.split()
        if len(tokens) != EXPRESSION_TOKEN_COUNT:
            raise MalformedExpression()

        left, operator, right = tokens
        return cls(left=left, operator=operator, right=right)


class Operand(BaseModel):
    """An operand token together with its resolved integer value.

    Attributes:
        token: The token as it appeared in the expression
        value: Integer the token resolved to
        is_arabic: True if the token was written with Arabic digits
    """
    model_config = ConfigDict(frozen=True)

    token: str
    value: int
    is_arabic: bool
