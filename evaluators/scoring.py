"""
Scoring engine.

Pure functions from a response map to category scores, the overall score
and the recommendation tier. Nothing here touches navigation state, and no
function raises on malformed answers: a value that is not a finite number
counts as 0 toward its category's sum (it still counts toward the mean).
"""

import logging
import math
from typing import Any, Dict, List, Mapping

from models.enums import (
    DIMENSION_LABELS,
    DIMENSION_PREFIXES,
    MAX_CATEGORY_SCORE,
    OVERALL_WEIGHTS,
    PSYCHOMETRIC_PREFIX,
    RECOMMENDATION_TEXT,
    RECOMMENDATION_THRESHOLDS,
    SCORE_SCALE_FACTOR,
    TECHNICAL_PREFIX,
    Recommendation,
)
from models.schemas import (
    AssessmentResults,
    DimensionResult,
    DimensionScores,
    ScoreBundle,
)
from utils.rounding import display_score

logger = logging.getLogger(__name__)


def answer_value(value: Any) -> float:
    """
    Numeric value of an answer.

    Anything non-numeric, non-finite, or an int too large for a float is 0.
    """
    if not isinstance(value, (int, float)):
        return 0.0
    try:
        number = float(value)
    except OverflowError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_answer(value: Any) -> int:
    """
    Coerce an incoming answer to the integer domain of the response map.

    Integers pass through unchanged. Numeric strings and finite floats are
    truncated to int. Anything else becomes 0, the same value the engine
    would have used for it when summing.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    return int(answer_value(value))


def compute_category_score(responses: Mapping[str, Any], prefix: str) -> float:
    """
    Compute a category score from every answer under an identifier prefix.

    Formula:
        mean = sum(values) / count(values)
        score = min(mean × 20, 100)

    There is no lower clamp; answers are 1-5 or a non-negative option index.

    Args:
        responses: Response map (question id → answer value)
        prefix: Category prefix, e.g. "technical_" or "wiscar_will_"

    Returns:
        Category score, or 0.0 when nothing under the prefix was answered

    Examples:
        >>> compute_category_score({"technical_domain_1": 3, "technical_domain_2": 4}, "technical_")
        70.0
        >>> compute_category_score({}, "technical_")
        0.0
    """
    values = [answer_value(v) for k, v in responses.items() if k.startswith(prefix)]
    if not values:
        return 0.0

    mean = sum(values) / len(values)
    return min(MAX_CATEGORY_SCORE, mean * SCORE_SCALE_FACTOR)


def compute_dimension_scores(responses: Mapping[str, Any]) -> DimensionScores:
    """Score all six WISCAR dimensions; unanswered dimensions score 0."""
    return DimensionScores(**{
        name: compute_category_score(responses, prefix)
        for name, prefix in DIMENSION_PREFIXES.items()
    })


def compute_overall_score(
    psychometric: float,
    technical: float,
    dimensions: DimensionScores
) -> float:
    """
    Compute the weighted overall score.

    Formula:
        overall = 0.3 × psychometric + 0.3 × technical + 0.4 × mean(dimensions)

    The result is not clamped; with category scores capped at 100 and
    weights summing to 1.0 it cannot exceed 100.
    """
    return (
        psychometric * OVERALL_WEIGHTS["psychometric"]
        + technical * OVERALL_WEIGHTS["technical"]
        + dimensions.average() * OVERALL_WEIGHTS["dimensions"]
    )


def compute_recommendation(overall: float) -> Recommendation:
    """
    Map the overall score to a recommendation tier.

    Deterministic mapping:
        >= 75: strong_fit
        >= 50: moderate_fit
        otherwise: weak_fit
    """
    for lower_bound, tier in RECOMMENDATION_THRESHOLDS:
        if overall >= lower_bound:
            return tier
    return Recommendation.WEAK_FIT


def score_responses(responses: Mapping[str, Any]) -> ScoreBundle:
    """
    Score a complete response map.

    Args:
        responses: Response map (question id → answer value)

    Returns:
        ScoreBundle with both primary categories, all six dimensions
        and the overall score
    """
    psychometric = compute_category_score(responses, PSYCHOMETRIC_PREFIX)
    technical = compute_category_score(responses, TECHNICAL_PREFIX)
    dimensions = compute_dimension_scores(responses)
    overall = compute_overall_score(psychometric, technical, dimensions)

    logger.debug(
        f"Scored {len(responses)} responses: psychometric={psychometric:.1f}, "
        f"technical={technical:.1f}, wiscar={dimensions.average():.1f}, overall={overall:.1f}"
    )

    return ScoreBundle(
        psychometric=psychometric,
        technical=technical,
        dimensions=dimensions,
        overall=overall,
    )


def build_results(
    scores: ScoreBundle,
    recommendation: Recommendation
) -> AssessmentResults:
    """
    Assemble the presentation-ready results for a scored session.

    Display scores are rounded half up; raw floats are kept for the
    overall score and each dimension.
    """
    text = RECOMMENDATION_TEXT[recommendation]

    dimension_values = scores.dimensions.model_dump()
    dimensions: List[DimensionResult] = [
        DimensionResult(
            key=key,
            label=DIMENSION_LABELS[key],
            score=value,
            display_score=display_score(value),
        )
        for key, value in dimension_values.items()
    ]

    return AssessmentResults(
        recommendation=recommendation,
        title=text["title"],
        description=text["description"],
        next_steps=list(text["next_steps"]),
        overall_score=scores.overall,
        display_overall=display_score(scores.overall),
        psychometric_score=display_score(scores.psychometric),
        technical_score=display_score(scores.technical),
        wiscar_average=display_score(scores.dimensions.average()),
        dimensions=dimensions,
    )


# Example scoring walkthrough (for documentation):
#
# Given every psychometric and technical item answered 5 and no WISCAR items:
#
#   psychometric = min(5 × 20, 100) = 100
#   technical    = min(5 × 20, 100) = 100
#   wiscar       = (0 + 0 + 0 + 0 + 0 + 0) / 6 = 0
#
#   overall = 0.3 × 100 + 0.3 × 100 + 0.4 × 0 = 60 → moderate_fit
