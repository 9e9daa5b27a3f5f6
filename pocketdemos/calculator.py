"""Evaluate a single 'x op y' arithmetic expression."""

from __future__ import annotations

import operator

_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def evaluate(expression: str) -> float:
    """Evaluate '<number> <operator> <number>' separated by single spaces."""
    tokens = expression.strip().split(" ")
    if len(tokens) != 3:
        raise ValueError(
            "Please enter a valid expression in the format: "
            "<binary1> <operator> <binary2>"
        )
    left, op, right = tokens
    x, y = float(left), float(right)
    if op not in _OPERATORS:
        raise ValueError(f"Unsupported operator: {op}")
    if op == "/" and y == 0.0:
        raise ZeroDivisionError("Error: Division by zero is not allowed.")
    return _OPERATORS[op](x, y)


def main(argv: list[str] | None = None) -> int:
    expression = " ".join(argv) if argv else input(
        "Enter an expression (e.g., 101 + 110): ")
    try:
        result = evaluate(expression)
    except (ValueError, ZeroDivisionError) as exc:
        print(exc)
        return 1
    print(f"Result: {int(result) if result == int(result) else result}")
    return 0