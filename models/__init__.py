"""Models package for the Readiness Assessment."""

from .schemas import (
    AnswerRequest,
    AssessmentResults,
    DimensionResult,
    DimensionScores,
    ErrorResponse,
    HealthResponse,
    ScoreBundle,
    SectionCatalog,
    SectionProgress,
    SectionsResponse,
    SessionResponse,
    SessionSnapshot,
    StepRequest,
)
from .enums import (
    Recommendation,
    Step,
    STEPS,
    TOTAL_STEPS,
    SECTION_QUESTIONS,
    DIMENSION_PREFIXES,
)

__all__ = [
    "AnswerRequest",
    "AssessmentResults",
    "DimensionResult",
    "DimensionScores",
    "ErrorResponse",
    "HealthResponse",
    "ScoreBundle",
    "SectionCatalog",
    "SectionProgress",
    "SectionsResponse",
    "SessionResponse",
    "SessionSnapshot",
    "StepRequest",
    "Recommendation",
    "Step",
    "STEPS",
    "TOTAL_STEPS",
    "SECTION_QUESTIONS",
    "DIMENSION_PREFIXES",
]
