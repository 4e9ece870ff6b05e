"""Core arithmetic operations with overflow protection."""

from __future__ import annotations

import math
from typing import Callable

from countonme.exceptions import DivisionByZeroError, ResultOverflowError, UnknownOperatorError
from countonme.operators import Operator
from countonme.validators import validate_number


def _checked(result: float, operation: str, a: float, b: float) -> float:
    if math.isinf(result):
        raise ResultOverflowError(operation, a, b)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        ResultOverflowError: If result would overflow
    """
    return _checked(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    return _checked(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    return _checked(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Raises:
        DivisionByZeroError: If b is exactly zero
        ResultOverflowError: If result would overflow
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return _checked(a / b, "division", a, b)


OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADDITION: add,
    Operator.SUBTRACTION: subtract,
    Operator.MULTIPLICATION: multiply,
    Operator.DIVISION: divide,
}


def apply_operator(operator: Operator | str, a: float, b: float) -> float:
    """
    Apply one of the four operators to two finite operands.

    This is the checked entry point the engine reduces through; the
    individual operations assume finite inputs.

    Args:
        operator: An ``Operator`` member; anything else found in an
            operator slot is passed through as its text
        a: Left operand
        b: Right operand

    Raises:
        UnknownOperatorError: If operator is not an ``Operator``
        InvalidInputError: If an operand is NaN, Inf, or not a number
        DivisionByZeroError: If dividing by zero
        ResultOverflowError: If the result would overflow
    """
    operation = OPERATIONS.get(operator) if isinstance(operator, Operator) else None
    if operation is None:
        raise UnknownOperatorError(operator)
    validate_number(a)
    validate_number(b)
    return operation(a, b)
