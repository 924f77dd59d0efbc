"""Evaluators package for the Readiness Assessment."""

from .scoring import (
    build_results,
    compute_category_score,
    compute_dimension_scores,
    compute_overall_score,
    compute_recommendation,
    score_responses,
)

__all__ = [
    "build_results",
    "compute_category_score",
    "compute_dimension_scores",
    "compute_overall_score",
    "compute_recommendation",
    "score_responses",
]
