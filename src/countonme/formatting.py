"""Fixed-point formatting of reduced results."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from countonme.config import EngineSettings

# Digits left of the point for the largest finite double
MAX_WHOLE_DIGITS = 309


def format_result(value: float, settings: EngineSettings | None = None) -> str:
    """
    Render a result with 0-5 fraction digits, '.' separator and no grouping.

    Example:
        >>> format_result(10.0)
        '10'
        >>> format_result(1 / 3)
        '0.33333'
    """
    settings = settings or EngineSettings()

    with localcontext() as ctx:
        ctx.prec = MAX_WHOLE_DIGITS + settings.max_fraction_digits
        quantum = Decimal(1).scaleb(-settings.max_fraction_digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN)
    if rounded.is_zero():
        rounded = abs(rounded)

    whole, _, fraction = f"{rounded:f}".partition(".")
    fraction = fraction.rstrip("0").ljust(settings.min_fraction_digits, "0")
    return f"{whole}.{fraction}" if fraction else whole
