"""
Session state store.

One AssessmentSession holds the navigation position, the response map and
the last computed scores for a single user. Its command methods are the
only way to change that state.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from evaluators.scoring import coerce_answer, compute_recommendation, score_responses
from models.enums import TOTAL_STEPS, Recommendation
from models.schemas import ScoreBundle, SessionSnapshot

logger = logging.getLogger(__name__)


class AssessmentSession:
    """
    State store for one assessment session.

    Steps form a linear sequence 0..total_steps-1. Navigation commands
    saturate at both ends instead of failing. Scores stay zeroed and the
    recommendation stays None until compute_scores() is called; reaching
    the terminal step does not score on its own.

    Commands:
    - record_answer(question_id, value)
    - advance() / retreat() / go_to_step(index)
    - compute_scores()
    - mark_complete()
    - reset()
    """

    def __init__(self, total_steps: int = TOTAL_STEPS):
        if total_steps < 1:
            raise ValueError("total_steps must be at least 1")
        self._total_steps = total_steps
        self._init_state()

    def _init_state(self) -> None:
        self._current_step = 0
        self._responses: Dict[str, int] = {}
        self._scores = ScoreBundle()
        self._is_complete = False
        self._recommendation: Optional[Recommendation] = None

    # Read access

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def terminal_step(self) -> int:
        return self._total_steps - 1

    @property
    def is_terminal_step(self) -> bool:
        return self._current_step == self.terminal_step

    @property
    def responses(self) -> Mapping[str, int]:
        """Read-only view of the response map."""
        return MappingProxyType(self._responses)

    @property
    def scores(self) -> ScoreBundle:
        return self._scores.model_copy(deep=True)

    @property
    def recommendation(self) -> Optional[Recommendation]:
        return self._recommendation

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    def snapshot(self) -> SessionSnapshot:
        """Copy of the full session state."""
        return SessionSnapshot(
            current_step=self._current_step,
            total_steps=self._total_steps,
            responses=dict(self._responses),
            scores=self.scores,
            is_complete=self._is_complete,
            recommendation=self._recommendation,
        )

    # Commands

    def record_answer(self, question_id: str, value: Any) -> None:
        """
        Insert or overwrite the answer for a question.

        The value's range is not checked. Non-integer input is coerced at
        this boundary so the response map only ever holds ints.
        """
        stored = coerce_answer(value)
        if stored != value:
            logger.warning(f"Coerced answer for {question_id}: {value!r} -> {stored}")
        self._responses[question_id] = stored
        logger.debug(f"Recorded answer {question_id}={stored}")

    def advance(self) -> int:
        """Move one step forward, saturating at the terminal step."""
        return self.go_to_step(self._current_step + 1)

    def retreat(self) -> int:
        """Move one step back, saturating at step 0."""
        return self.go_to_step(self._current_step - 1)

    def go_to_step(self, index: int) -> int:
        """
        Set the step directly; out-of-range targets are clamped.

        Infinite targets saturate at the matching end. Targets with no
        integer value (NaN, None, non-numeric strings) leave the step as is.
        """
        try:
            target = int(index)
        except OverflowError:
            target = self.terminal_step if index > 0 else 0
        except (TypeError, ValueError):
            logger.warning(f"Ignoring step target {index!r}")
            target = self._current_step
        clamped = max(0, min(target, self.terminal_step))
        if clamped != index:
            logger.debug(f"Step {index} clamped to {clamped}")
        self._current_step = clamped
        return clamped

    def compute_scores(self) -> ScoreBundle:
        """
        Score the current responses and store the result.

        Overwrites any previous bundle and recommendation.

        Returns:
            The newly stored ScoreBundle
        """
        self._scores = score_responses(self._responses)
        self._recommendation = compute_recommendation(self._scores.overall)
        logger.info(
            f"Scores computed: overall={self._scores.overall:.1f}, "
            f"recommendation={self._recommendation.value}"
        )
        return self.scores

    def mark_complete(self) -> None:
        """Flag the assessment as complete. Only reset() clears this."""
        self._is_complete = True

    def reset(self) -> None:
        """Discard all state and return to a fresh session at step 0."""
        self._init_state()
        logger.info("Session reset")

    def __repr__(self) -> str:
        return (
            f"AssessmentSession(step={self._current_step}/{self.terminal_step}, "
            f"responses={len(self._responses)}, complete={self._is_complete})"
        )
