"""Operator vocabulary shared by the engine and its callers."""

from __future__ import annotations

from enum import Enum

from countonme.exceptions import InvalidInputError


class Operator(str, Enum):
    """The four arithmetic operators, valued by their display symbol."""

    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_priority(self) -> bool:
        """Whether the operator is reduced before + and -."""
        return self in (Operator.MULTIPLICATION, Operator.DIVISION)

    @classmethod
    def from_symbol(cls, symbol: str | Operator) -> Operator:
        """
        Look up an operator by its symbol.

        Raises:
            InvalidInputError: If the symbol is not one of + - * /
        """
        if isinstance(symbol, Operator):
            return symbol
        for operator in cls:
            if operator.value == symbol:
                return operator
        raise InvalidInputError(symbol, "Unknown operator symbol")

    def __str__(self) -> str:
        return self.value


SYMBOLS = frozenset(operator.value for operator in Operator)
