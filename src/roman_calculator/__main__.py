"""Main entry point for the Roman/Arabic calculator."""
import io
import sys
import argparse
from typing import Iterable, Iterator, Optional, TextIO

from .common.config import BANNER, EXIT_SENTINEL, GOODBYE, NEXT_PROMPT
from .common.errors import CalculatorError
from .evaluate_expression import evaluate


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from stream without their line terminators."""
    for line in stream:
        yield line.rstrip("\r\n")


def run_evaluation(expression: str) -> None:
    """Evaluate one expression and print its result or error."""
    try:
        result = evaluate(expression)
        print(f"Result: {result}")
    except CalculatorError as e:
        print(f"Error: {e}")


def run_session(lines: Iterable[str]) -> None:
    """Run the read-eval-print loop over the given lines.

    The loop ends on the exit sentinel or when lines run out. Evaluation
    errors are reported and never end the session.
    """
    print(BANNER)

    for expression in lines:
        if expression == EXIT_SENTINEL:
            print(GOODBYE)
            break

        run_evaluation(expression)
        print(NEXT_PROMPT)


def main(argv: Optional[list] = None) -> int:
    """Interactive calculator over standard input and output."""
    parser = argparse.ArgumentParser(
        description="Calculator for expressions like '3 + 4' or 'III * II' "
                    "with operands from 1 to 10. Enter '0' to exit."
    )
    parser.parse_args(argv)

    # Undecodable bytes become U+FFFD and fail as an invalid operand
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")

    try:
        run_session(read_lines(sys.stdin))
    except KeyboardInterrupt:
        return 0
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error input: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
