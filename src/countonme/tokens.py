"""Token model for the in-progress expression.

An expression is a flat list of tokens alternating ``Numeral`` and
``OperatorToken``. Text is derived from the list, never the other way round,
except when seeding an engine from previously displayed text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from countonme.operators import SYMBOLS, Operator

# Complete numerals, optionally signed (results can be negative)
NUMERAL_PATTERN = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

# Redundant leading zeros of a numeral, keeping one before a point
_LEADING_ZEROS = re.compile(r"^(-?)0+(?=\d)")

SEPARATOR = " "


@dataclass(frozen=True)
class Numeral:
    """A decimal number in textual form, possibly still being typed."""

    text: str

    @property
    def has_decimal_point(self) -> bool:
        return "." in self.text

    @property
    def value(self) -> float:
        """
        Parse the numeral as a double.

        Raises:
            ValueError: If the text is not a decimal numeral
        """
        if NUMERAL_PATTERN.fullmatch(self.text) is None:
            raise ValueError(f"not a decimal numeral: {self.text!r}")
        return float(self.text)

    def extend(self, text: str) -> Numeral:
        """Append typed input, dropping redundant leading zeros; a leading point gets a zero."""
        combined = self.text + text
        if combined.startswith("."):
            combined = "0" + combined
        return Numeral(_LEADING_ZEROS.sub(r"\1", combined))

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class OperatorToken:
    """An operator placed between two numerals."""

    operator: Operator

    @property
    def is_priority(self) -> bool:
        return self.operator.is_priority

    def __str__(self) -> str:
        return self.operator.symbol


Token = Union[Numeral, OperatorToken]


def is_operator(token: Token | None) -> bool:
    return isinstance(token, OperatorToken)


def contains_priority_operator(tokens: list[Token]) -> bool:
    """Whether any * or / remains in the token list."""
    return any(isinstance(token, OperatorToken) and token.is_priority for token in tokens)


def render(tokens: list[Token]) -> str:
    """Join tokens with single spaces."""
    return SEPARATOR.join(str(token) for token in tokens)


def tokenize(text: str) -> list[Token]:
    """
    Split displayed text back into tokens.

    Known operator symbols become ``OperatorToken``; every other word is kept
    as a ``Numeral`` verbatim, so malformed words only surface when the
    expression is reduced.

    Example:
        >>> render(tokenize("4 + 2 * 3"))
        '4 + 2 * 3'
    """
    tokens: list[Token] = []
    for word in text.split():
        if word in SYMBOLS:
            tokens.append(OperatorToken(Operator.from_symbol(word)))
        else:
            tokens.append(Numeral(word))
    return tokens
