"""Utilities package for the Readiness Assessment."""

from .rounding import round_half_up, display_score

__all__ = [
    "round_half_up",
    "display_score",
]
