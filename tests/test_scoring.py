"""
Unit tests for the scoring engine.

Tests the deterministic scoring functions with exact expected outputs.
"""

import math

import pytest
from evaluators.scoring import (
    answer_value,
    build_results,
    coerce_answer,
    compute_category_score,
    compute_dimension_scores,
    compute_overall_score,
    compute_recommendation,
    score_responses,
)
from models.enums import (
    DIMENSION_PREFIXES,
    PSYCHOMETRIC_QUESTIONS,
    RECOMMENDATION_TEXT,
    TECHNICAL_QUESTIONS,
    WISCAR_QUESTIONS,
    Recommendation,
)
from models.schemas import DimensionScores, ScoreBundle
from utils.rounding import display_score, round_half_up

ALL_PREFIXES = ["psychometric_", "technical_"] + list(DIMENSION_PREFIXES.values())


def answer_all(question_ids, value):
    """Response map answering every question with the same value."""
    return {qid: value for qid in question_ids}


class TestRoundHalfUp:
    """Tests for round_half_up and display_score."""

    def test_round_half_up_rounds_up_on_half(self):
        """0.5 should round up, not to even."""
        assert round_half_up(0.5) == 1
        assert round_half_up(62.5) == 63
        assert round_half_up(2.5) == 3

    def test_round_half_up_normal_rounding(self):
        assert round_half_up(59.99) == 60
        assert round_half_up(66.4) == 66
        assert round_half_up(0.0) == 0

    def test_round_half_up_decimals(self):
        assert round_half_up(66.666, 1) == 66.7

    def test_display_score(self):
        assert display_score(100.0) == 100
        assert display_score(37.5) == 38


class TestCategoryScore:
    """Tests for compute_category_score."""

    @pytest.mark.parametrize("prefix", ALL_PREFIXES)
    def test_unanswered_category_scores_zero(self, prefix):
        """No answers under a prefix is 0, not NaN."""
        assert compute_category_score({}, prefix) == 0.0
        assert compute_category_score({"unrelated_1": 5}, prefix) == 0.0

    @pytest.mark.parametrize("prefix", ALL_PREFIXES)
    def test_all_fives_score_100(self, prefix):
        responses = {f"{prefix}{i}": 5 for i in range(1, 5)}
        assert compute_category_score(responses, prefix) == 100.0

    @pytest.mark.parametrize("prefix", ALL_PREFIXES)
    def test_all_ones_score_20(self, prefix):
        responses = {f"{prefix}{i}": 1 for i in range(1, 5)}
        assert compute_category_score(responses, prefix) == 20.0

    def test_mean_is_rescaled_by_20(self):
        # mean = (3 + 4) / 2 = 3.5 → 70
        responses = {"technical_domain_1": 3, "technical_domain_2": 4}
        assert compute_category_score(responses, "technical_") == 70.0

    def test_upper_clamp(self):
        """Means above 5 are capped at 100."""
        assert compute_category_score({"psychometric_x_1": 7}, "psychometric_") == 100.0

    def test_no_lower_clamp(self):
        """Negative values are not clamped at 0."""
        assert compute_category_score({"technical_x_1": -1}, "technical_") == -20.0

    def test_only_prefix_matches_are_used(self):
        """psychometric_interest_ and wiscar_interest_ never mix."""
        responses = {"psychometric_interest_1": 1, "wiscar_interest_1": 5}
        assert compute_category_score(responses, "psychometric_") == 20.0
        assert compute_category_score(responses, "wiscar_interest_") == 100.0

    def test_option_index_answers(self):
        """Multiple-choice answers are scored by their option index."""
        # indices 0, 1, 2 → mean 1 → 20
        responses = {"technical_a_1": 0, "technical_a_2": 1, "technical_a_3": 2}
        assert compute_category_score(responses, "technical_") == 20.0


class TestMalformedAnswers:
    """The engine coerces malformed values to 0 instead of raising."""

    def test_non_numeric_counts_as_zero(self):
        # values [0, 4] → mean 2 → 40
        responses = {"technical_a_1": "abc", "technical_a_2": 4}
        assert compute_category_score(responses, "technical_") == 40.0

    def test_none_counts_as_zero(self):
        responses = {"technical_a_1": None, "technical_a_2": 4}
        assert compute_category_score(responses, "technical_") == 40.0

    def test_nan_counts_as_zero(self):
        assert answer_value(float("nan")) == 0.0
        assert answer_value(float("inf")) == 0.0

    def test_oversized_int_counts_as_zero(self):
        """Ints beyond float range score 0 instead of overflowing."""
        assert answer_value(10**400) == 0.0
        assert answer_value(-(10**400)) == 0.0
        # values [0, 4] → mean 2 → 40
        responses = {"technical_a_1": 10**400, "technical_a_2": 4}
        assert compute_category_score(responses, "technical_") == 40.0
        assert score_responses(responses).technical == 40.0

    def test_score_responses_never_raises(self):
        responses = {"psychometric_a_1": object(), "wiscar_will_1": [1, 2], "technical_x": "5"}
        scores = score_responses(responses)
        assert scores.psychometric == 0.0
        assert scores.technical == 0.0
        assert scores.dimensions.will == 0.0


class TestCoerceAnswer:
    """Tests for the boundary coercion used by the session store."""

    def test_int_passes_through(self):
        assert coerce_answer(4) == 4
        assert coerce_answer(0) == 0

    def test_numeric_strings(self):
        assert coerce_answer("3") == 3
        assert coerce_answer(" 2.0 ") == 2

    def test_float_truncates(self):
        assert coerce_answer(4.9) == 4

    def test_garbage_becomes_zero(self):
        assert coerce_answer("five") == 0
        assert coerce_answer(None) == 0
        assert coerce_answer(float("nan")) == 0
        assert coerce_answer("nan") == 0


class TestDimensionScores:
    """Tests for compute_dimension_scores."""

    def test_all_six_present_when_unanswered(self):
        dims = compute_dimension_scores({})
        assert dims.model_dump() == {
            "will": 0.0,
            "interest": 0.0,
            "skill": 0.0,
            "cognitive": 0.0,
            "ability": 0.0,
            "real_world": 0.0,
        }

    def test_partial_dimensions(self):
        responses = {"wiscar_will_1": 5, "wiscar_skill_1": 2, "wiscar_skill_2": 4}
        dims = compute_dimension_scores(responses)
        assert dims.will == 100.0
        assert dims.skill == 60.0
        assert dims.interest == 0.0

    def test_real_world_uses_reference_ids(self):
        """wiscar_realWorld_* answers feed the real_world dimension."""
        responses = {f"wiscar_realWorld_{i}": 5 for i in range(1, 5)}
        dims = compute_dimension_scores(responses)
        assert dims.real_world == 100.0
        assert "wiscar_realWorld_4" in WISCAR_QUESTIONS

    def test_average_counts_unanswered_as_zero(self):
        dims = DimensionScores(will=60, interest=60, skill=60)
        assert dims.average() == pytest.approx(30.0)


class TestOverallScore:
    """Tests for compute_overall_score."""

    def test_weighted_formula(self):
        dims = DimensionScores(
            will=50, interest=50, skill=50, cognitive=50, ability=50, real_world=50
        )
        # 0.3 × 80 + 0.3 × 40 + 0.4 × 50 = 24 + 12 + 20 = 56
        assert compute_overall_score(80, 40, dims) == pytest.approx(56.0)

    def test_all_zero(self):
        assert compute_overall_score(0, 0, DimensionScores()) == 0.0


class TestRecommendation:
    """Tests for compute_recommendation thresholds."""

    def test_strong_fit(self):
        assert compute_recommendation(75) == Recommendation.STRONG_FIT
        assert compute_recommendation(100) == Recommendation.STRONG_FIT

    def test_moderate_fit(self):
        assert compute_recommendation(50) == Recommendation.MODERATE_FIT
        assert compute_recommendation(74.999) == Recommendation.MODERATE_FIT

    def test_weak_fit(self):
        assert compute_recommendation(49.999) == Recommendation.WEAK_FIT
        assert compute_recommendation(0) == Recommendation.WEAK_FIT

    def test_out_of_range_is_still_total(self):
        assert compute_recommendation(-10) == Recommendation.WEAK_FIT
        assert compute_recommendation(150) == Recommendation.STRONG_FIT


class TestScoreResponses:
    """End-to-end scoring scenarios."""

    def test_empty_responses(self):
        scores = score_responses({})
        assert scores == ScoreBundle()
        assert compute_recommendation(scores.overall) == Recommendation.WEAK_FIT

    def test_all_threes_is_moderate_fit(self):
        """Every category at 60 → overall 60."""
        responses = answer_all(PSYCHOMETRIC_QUESTIONS + TECHNICAL_QUESTIONS + WISCAR_QUESTIONS, 3)
        scores = score_responses(responses)

        assert scores.psychometric == 60.0
        assert scores.technical == 60.0
        assert all(v == 60.0 for v in scores.dimensions.model_dump().values())
        assert scores.overall == pytest.approx(60.0)
        assert compute_recommendation(scores.overall) == Recommendation.MODERATE_FIT

    def test_unanswered_dimensions_drag_overall_down(self):
        """Primaries at 100 with no WISCAR answers → 0.3×100 + 0.3×100 + 0 = 60."""
        responses = answer_all(PSYCHOMETRIC_QUESTIONS + TECHNICAL_QUESTIONS, 5)
        scores = score_responses(responses)

        assert scores.psychometric == 100.0
        assert scores.technical == 100.0
        assert scores.dimensions.average() == 0.0
        assert scores.overall == pytest.approx(60.0)
        assert compute_recommendation(scores.overall) == Recommendation.MODERATE_FIT

    def test_all_fives_is_strong_fit(self):
        responses = answer_all(PSYCHOMETRIC_QUESTIONS + TECHNICAL_QUESTIONS + WISCAR_QUESTIONS, 5)
        scores = score_responses(responses)
        assert scores.overall == pytest.approx(100.0)
        assert compute_recommendation(scores.overall) == Recommendation.STRONG_FIT

    def test_all_ones_is_weak_fit(self):
        responses = answer_all(PSYCHOMETRIC_QUESTIONS + TECHNICAL_QUESTIONS + WISCAR_QUESTIONS, 1)
        scores = score_responses(responses)
        assert scores.overall == pytest.approx(20.0)
        assert compute_recommendation(scores.overall) == Recommendation.WEAK_FIT

    def test_deterministic(self):
        responses = answer_all(PSYCHOMETRIC_QUESTIONS, 4)
        assert score_responses(responses) == score_responses(dict(responses))


class TestBuildResults:
    """Tests for the presentation-ready results."""

    def test_rounds_display_scores_half_up(self):
        scores = ScoreBundle(
            psychometric=62.5,
            technical=37.5,
            dimensions=DimensionScores(will=80, interest=70),
            overall=52.5,
        )
        results = build_results(scores, Recommendation.MODERATE_FIT)

        assert results.display_overall == 53
        assert results.overall_score == 52.5
        assert results.psychometric_score == 63
        assert results.technical_score == 38
        # (80 + 70) / 6 = 25
        assert results.wiscar_average == 25

    def test_lists_all_dimensions_with_labels(self):
        results = build_results(ScoreBundle(), Recommendation.WEAK_FIT)
        keys = [d.key for d in results.dimensions]
        assert keys == ["will", "interest", "skill", "cognitive", "ability", "real_world"]
        assert results.dimensions[-1].label == "Real-World Fit"

    @pytest.mark.parametrize("tier", list(Recommendation))
    def test_tier_text(self, tier):
        results = build_results(ScoreBundle(), tier)
        assert results.title == RECOMMENDATION_TEXT[tier]["title"]
        assert len(results.next_steps) == 4
        assert not math.isnan(results.overall_score)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
