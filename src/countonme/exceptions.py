"""Custom exceptions for the expression engine."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class MissingElementError(CalculatorError):
    """Raised when the expression is too short or ends on an operator."""

    def __init__(self, tokens: Any = None) -> None:
        super().__init__("Missing element, enter a complete expression", tokens)


class LeftOperandInvalidError(CalculatorError):
    """Raised when the token left of an operator is not a number."""

    def __init__(self, token: str) -> None:
        super().__init__("Left operand is not a valid number", token)
        self.token = token


class RightOperandInvalidError(CalculatorError):
    """Raised when the token right of an operator is not a number."""

    def __init__(self, token: str) -> None:
        super().__init__("Right operand is not a valid number", token)
        self.token = token


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class UnknownOperatorError(CalculatorError):
    """Raised when an operator slot holds something other than + - * /."""

    def __init__(self, token: Any) -> None:
        super().__init__("Unknown operator", token)
        self.token = token


class ResultOverflowError(CalculatorError):
    """Raised when a calculation leaves the range of a double."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (NaN, Inf, malformed keystroke)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
