"""Configuration constants for the Roman/Arabic calculator.

This module contains the fixed settings of the calculator:
- the accepted operand range
- the supported operator symbols
- the console texts of the interactive session

The calculator reads no environment variables or configuration files.
"""

# Operand range, inclusive on both ends
MIN_OPERAND = 1
MAX_OPERAND = 10

# Supported operator symbols
OPERATORS = ("+", "-", "*", "/")

# An expression is always operand, operator, operand
EXPRESSION_TOKEN_COUNT = 3

# Interactive session texts
BANNER = "Enter the expression"
NEXT_PROMPT = "Enter the next expression (or '0' for exit):"
GOODBYE = "Goodbye."

# A line consisting of exactly this text ends the session
EXIT_SENTINEL = "0"
