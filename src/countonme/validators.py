"""Input validation and the expression validity check."""

import math
import re
from enum import Enum
from typing import TypeVar

from countonme.exceptions import InvalidInputError, MissingElementError
from countonme.tokens import Token, is_operator, render

T = TypeVar("T", int, float)

# One keystroke's worth of numeral input
KEYSTROKE_PATTERN = re.compile(r"\d*\.?\d*")

# An "a op b" group
MIN_TOKENS = 3


class Validity(Enum):
    """Outcome of checking an expression before reduction."""

    VALID = "valid"
    TOO_FEW_TOKENS = "too_few_tokens"
    TRAILING_OPERATOR = "trailing_operator"


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_keystroke(text: str) -> str:
    """
    Validate numeral input: digits with at most one decimal point.

    Raises:
        InvalidInputError: If text is empty, has a second point or a non-digit
    """
    if not isinstance(text, str):
        raise InvalidInputError(text, f"Expected str, got {type(text).__name__}")
    if text == "":
        raise InvalidInputError(text, "Numeral input must not be empty")
    if KEYSTROKE_PATTERN.fullmatch(text) is None:
        raise InvalidInputError(text, "Numeral input must be digits with at most one decimal point")
    return text


def check_validity(tokens: list[Token]) -> Validity:
    """Classify a token list as reducible or not."""
    if len(tokens) < MIN_TOKENS:
        return Validity.TOO_FEW_TOKENS
    if is_operator(tokens[-1]):
        return Validity.TRAILING_OPERATOR
    return Validity.VALID


def ensure_valid(tokens: list[Token]) -> None:
    """
    Raise unless the token list can be reduced.

    Both too-few-tokens and trailing-operator are reported as a missing
    element.

    Raises:
        MissingElementError: If the expression is not VALID
    """
    if check_validity(tokens) is not Validity.VALID:
        raise MissingElementError(render(tokens) or None)
