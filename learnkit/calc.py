"""Command-line calculator offering addition and square roots."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

from learnkit.simplemath import add, sqrt

USAGE = (
    "USAGE: calc command [arguments] ...\n"
    "\nThe commands are:\n\tadd\tAddition of two values."
    "\n\tsqrt\tSquare root of a non-negative value."
)


def usage() -> str:
    """Print the list of supported commands and return the text."""
    print(USAGE)
    return USAGE


def _parse_float(text: str) -> float:
    """Parse a number strictly, rejecting padding, underscores and overflow."""
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on the given arguments (without the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    command, *rest = args or [""]
    if command == "add":
        if len(rest) != 2:
            print("USAGE: calc add <number1> <number2>")
            return 0
        try:
            first, second = (_parse_float(item) for item in rest)
        except ValueError:
            print("USAGE: calc add arguments must be numbers (integers and floats are supported)")
            return 0
        print(f"Result: {add(first, second):.2f}")
    elif command == "sqrt":
        if len(rest) != 1:
            print("USAGE: calc sqrt <number1>")
            return 0
        try:
            value = _parse_float(rest[0])
        except ValueError:
            value = -1.0
        if value < 0:
            print("USAGE: calc sqrt <integer>")
            return 0
        print("Result: ", _format_number(sqrt(value)))
    else:
        usage()
    return 0


if __name__ == "__main__":
    sys.exit(main())