"""Expression engine behind a pocket-calculator display."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Protocol

from countonme.config import EngineSettings
from countonme.exceptions import (
    CalculatorError,
    LeftOperandInvalidError,
    MissingElementError,
    RightOperandInvalidError,
    UnknownOperatorError,
)
from countonme.formatting import format_result
from countonme.operations import apply_operator
from countonme.operators import Operator
from countonme.tokens import (
    Numeral,
    OperatorToken,
    Token,
    contains_priority_operator,
    is_operator,
    render,
    tokenize,
)
from countonme.validators import ensure_valid, validate_keystroke

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

ZERO = "0"


class DisplayObserver(Protocol):
    """Anything that renders the engine's text when told it changed."""

    def display_did_change(self) -> None: ...


def _operand(token: Token, error: Callable[[str], CalculatorError]) -> float:
    if not isinstance(token, Numeral):
        raise error(str(token))
    try:
        return token.value
    except ValueError as e:
        raise error(token.text) from e


class ExpressionEngine:
    """
    Keeps an in-progress expression and reduces it on demand.

    The expression is a list of tokens; ``text`` is derived from it, or holds
    an error message after a failed reduction. The observer, if any, is
    notified synchronously on the caller's thread after every mutation and
    is only weakly referenced.

    Example:
        >>> engine = ExpressionEngine()
        >>> engine.append_numeral("4")
        True
        >>> engine.append_operator("+")
        >>> engine.append_numeral("2")
        True
        >>> engine.append_operator(Operator.MULTIPLICATION)
        >>> engine.append_numeral("3")
        True
        >>> engine.reduce()
        >>> engine.text
        '10'
    """

    def __init__(
        self,
        observer: DisplayObserver | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self._settings = settings or EngineSettings()
        self._tokens: list[Token] = [Numeral(ZERO)]
        self._result_displayed = False
        self._message: str | None = None
        self._last_error: CalculatorError | None = None
        self._observer_ref: weakref.ReferenceType[DisplayObserver] | None = None
        self.set_observer(observer)

    @classmethod
    def from_text(
        cls,
        text: str,
        observer: DisplayObserver | None = None,
        settings: EngineSettings | None = None,
    ) -> ExpressionEngine:
        """Create an engine whose expression is parsed from displayed text."""
        engine = cls(observer=observer, settings=settings)
        engine._tokens = tokenize(text) or [Numeral(ZERO)]
        return engine

    @property
    def text(self) -> str:
        """Current display text: the expression, or the active error message."""
        if self._message is not None:
            return self._message
        return render(self._tokens)

    @property
    def tokens(self) -> list[Token]:
        return self._tokens.copy()

    @property
    def result_displayed(self) -> bool:
        """Whether the display holds a finished result or error."""
        return self._result_displayed

    @property
    def last_error(self) -> CalculatorError | None:
        """Error reported by the last ``reduce()``, if it failed."""
        return self._last_error

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def observer(self) -> DisplayObserver | None:
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    def set_observer(self, observer: DisplayObserver | None) -> None:
        self._observer_ref = weakref.ref(observer) if observer is not None else None

    def _notify(self) -> None:
        observer = self.observer
        if observer is not None:
            observer.display_did_change()

    def _clear(self) -> None:
        self._tokens = []
        self._result_displayed = False
        self._message = None
        self._last_error = None

    def append_numeral(self, text: str) -> bool:
        """
        Append one keystroke of numeral input.

        After a result, the result is cleared first. A lone ``0`` placeholder
        is replaced rather than prefixed. A second decimal point in the same
        numeral is rejected and the expression is left as it was.

        Args:
            text: Digits with at most one decimal point

        Returns:
            True if the expression changed

        Raises:
            InvalidInputError: If text is not numeral input
        """
        validate_keystroke(text)
        if self._result_displayed:
            self._clear()

        last = self._tokens[-1] if self._tokens else None
        if isinstance(last, Numeral):
            if last.has_decimal_point and "." in text:
                logger.debug("Rejected second decimal point %r after %r", text, last.text)
                return False
            self._tokens[-1] = last.extend(text)
        else:
            self._tokens.append(Numeral("").extend(text))

        logger.debug("Expression is now %r", self.text)
        self._notify()
        return True

    def append_operator(self, operator: Operator | str) -> None:
        """
        Append an operator, replacing a trailing one.

        After a numeric result, the result becomes the left operand; after an
        error, the expression starts over. An operator with no left operand
        resets the expression to ``0``.

        Raises:
            InvalidInputError: If operator is not one of + - * /
        """
        operator = Operator.from_symbol(operator)
        if self._result_displayed:
            if self._message is not None:
                self._tokens = []
            self._result_displayed = False
            self._message = None
            self._last_error = None

        if self._tokens and is_operator(self._tokens[-1]):
            self._tokens.pop()
        self._tokens.append(OperatorToken(operator))

        if is_operator(self._tokens[0]):
            self._tokens = [Numeral(ZERO)]

        logger.debug("Expression is now %r", self.text)
        self._notify()

    def reset(self) -> None:
        """Return to the initial ``0`` expression."""
        self._tokens = [Numeral(ZERO)]
        self._result_displayed = False
        self._message = None
        self._last_error = None
        self._notify()

    def reduce(self) -> CalculatorError | None:
        """
        Reduce the expression to a single result.

        ``*`` and ``/`` are reduced first wherever they appear, then ``+`` and
        ``-`` left to right. On failure the display shows the error message
        and the expression is not partially reduced.

        Returns:
            The error that stopped the reduction, or None on success
        """
        showing_result = self._result_displayed and self._message is None and len(self._tokens) == 1
        self._result_displayed = True

        try:
            ensure_valid(self._tokens)
            result = self._reduce_tokens(self._tokens.copy())
        except MissingElementError as error:
            if showing_result:
                # Reducing a result again keeps the result on display
                self._last_error = error
                self._notify()
                return error
            self._show_error(error)
            return error
        except UnknownOperatorError as error:
            logger.error("Inconsistent expression %r: %s", render(self._tokens), error)
            self._show_error(error)
            return error
        except CalculatorError as error:
            self._show_error(error)
            return error

        self._tokens = [result]
        self._message = None
        self._last_error = None
        logger.debug("Reduced to %r", result.text)
        self._notify()
        return None

    def _show_error(self, error: CalculatorError) -> None:
        logger.debug("Reduction failed: %s", error)
        self._tokens = []
        self._message = error.message
        self._last_error = error
        self._notify()

    def _reduce_tokens(self, tokens: list[Token]) -> Numeral:
        index = 0
        while len(tokens) > 1:
            if index + 2 >= len(tokens):
                raise MissingElementError(render(tokens))

            operator_token = tokens[index + 1]
            has_priority = contains_priority_operator(tokens)
            is_priority = isinstance(operator_token, OperatorToken) and operator_token.is_priority

            if has_priority and not is_priority:
                index += 2
                continue
            if not has_priority:
                index = 0
                operator_token = tokens[index + 1]

            left = _operand(tokens[index], LeftOperandInvalidError)
            right = _operand(tokens[index + 2], RightOperandInvalidError)
            operator = operator_token.operator if isinstance(operator_token, OperatorToken) else str(operator_token)
            value = apply_operator(operator, left, right)

            tokens[index : index + 3] = [Numeral(format_result(value, self._settings))]
            index = 0

        result = tokens[0]
        if not isinstance(result, Numeral):
            raise LeftOperandInvalidError(str(result))
        return result

    def __repr__(self) -> str:
        return f"ExpressionEngine(text={self.text!r}, result_displayed={self._result_displayed})"
