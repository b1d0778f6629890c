"""Evaluate reverse Polish notation expressions of single-digit numbers."""

from __future__ import annotations

import re
import sys

_OPERATORS = frozenset("+-*/")
_LEADING_DIGITS = re.compile(r"\d+")


class RPNError(Exception):
    """Raised when an expression cannot be evaluated."""


def apply_operation(a: int, b: int, op: str) -> int:
    """Apply an arithmetic operator; division truncates toward zero."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise RPNError("Division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    raise RPNError("Invalid operator")


def evaluate(expression: str) -> int:
    """Evaluate a whitespace-separated RPN expression."""
    stack: list[int] = []
    for token in expression.split():
        head = token[0]
        if head in _OPERATORS:
            if len(stack) < 2:
                raise RPNError("Invalid expression")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operation(a, b, head))
        elif "0" <= head <= "9":
            number = int(_LEADING_DIGITS.match(token).group())
            if number >= 10:
                raise RPNError("Number out of range")
            stack.append(number)
        else:
            raise RPNError("Invalid expression")
    if len(stack) != 1:
        raise RPNError("Invalid expression")
    return stack[0]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Error", file=sys.stderr)
        return 1
    try:
        print(evaluate(args[0]))
    except RPNError:
        print("Error", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())