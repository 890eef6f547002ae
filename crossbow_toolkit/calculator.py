"""Basic arithmetic operations and the symbol table that dispatches to them."""

from __future__ import annotations

from typing import Callable

Operation = Callable[[float, float], float]


def add(num1: float, num2: float) -> float:
    """Return the sum of two numbers."""
    return num1 + num2


def subtract(num1: float, num2: float) -> float:
    """Return ``num1`` minus ``num2``."""
    return num1 - num2


def multiply(num1: float, num2: float) -> float:
    """Return the product of two numbers."""
    return num1 * num2


def divide(num1: float, num2: float) -> float:
    """Return ``num1`` divided by ``num2``, or 0 when ``num2`` is zero."""
    if num2 == 0:
        return 0
    return num1 / num2


OPERATIONS: dict[str, Operation] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


def operation_for(symbol: str) -> Operation:
    """Return the operation bound to ``symbol``; raise ValueError if none is."""
    try:
        return OPERATIONS[symbol]
    except KeyError:
        raise ValueError(f"invalid operator: {symbol!r}") from None