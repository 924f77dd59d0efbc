"""
Deterministic rounding utilities.

Scores are kept as floats internally; these helpers produce the integer
values shown on the results page, rounding 0.5 up instead of using
Python's default banker's rounding.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def round_half_up(value: float, decimals: int = 0) -> Union[int, float]:
    """
    Round a number using "round half up" strategy.

    Args:
        value: Number to round
        decimals: Number of decimal places (0 for integer)

    Returns:
        Rounded integer when decimals is 0, otherwise a float

    Examples:
        >>> round_half_up(62.5)
        63
        >>> round_half_up(59.99)
        60
        >>> round_half_up(66.666, 1)
        66.7
    """
    d = Decimal(str(value))
    if decimals == 0:
        return int(d.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    quantize_str = "0." + "0" * decimals
    return float(d.quantize(Decimal(quantize_str), rounding=ROUND_HALF_UP))


def display_score(value: float) -> int:
    """Integer score for display, e.g. '63/100'."""
    return round_half_up(value)
