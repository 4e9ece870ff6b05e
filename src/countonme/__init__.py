"""
Expression engine for a pocket-calculator display.

Keeps an in-progress ``+ - * /`` expression as a flat token list, corrects
malformed keystroke sequences as they are entered, and reduces the
expression with multiply/divide before add/subtract.
"""

from countonme.config import EngineSettings
from countonme.engine import DisplayObserver, ExpressionEngine
from countonme.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    LeftOperandInvalidError,
    MissingElementError,
    ResultOverflowError,
    RightOperandInvalidError,
    UnknownOperatorError,
)
from countonme.formatting import format_result
from countonme.operations import add, apply_operator, divide, multiply, subtract
from countonme.operators import Operator
from countonme.tokens import Numeral, OperatorToken, Token, render, tokenize
from countonme.validators import (
    Validity,
    check_validity,
    ensure_valid,
    validate_keystroke,
    validate_number,
)

__all__ = [
    "CalculatorError",
    "DisplayObserver",
    "DivisionByZeroError",
    "EngineSettings",
    "ExpressionEngine",
    "InvalidInputError",
    "LeftOperandInvalidError",
    "MissingElementError",
    "Numeral",
    "Operator",
    "OperatorToken",
    "ResultOverflowError",
    "RightOperandInvalidError",
    "Token",
    "UnknownOperatorError",
    "Validity",
    "add",
    "apply_operator",
    "check_validity",
    "divide",
    "ensure_valid",
    "format_result",
    "multiply",
    "render",
    "subtract",
    "tokenize",
    "validate_keystroke",
    "validate_number",
]

__version__ = "0.1.0"
