"""
Pydantic schemas for the Readiness Assessment.

Defines the score bundle produced by the scoring engine, the read-only
session snapshot, and the request/response models of the HTTP adapter.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .enums import Recommendation


class DimensionScores(BaseModel):
    """Scores for the six WISCAR readiness dimensions (each 0-100)."""
    will: float = Field(0.0, description="Will (persistence) score")
    interest: float = Field(0.0, description="Interest (curiosity) score")
    skill: float = Field(0.0, description="Skill (current abilities) score")
    cognitive: float = Field(0.0, description="Cognitive (mental capacity) score")
    ability: float = Field(0.0, description="Ability (learning capacity) score")
    real_world: float = Field(0.0, description="Real-world fit score")

    def average(self) -> float:
        """Arithmetic mean of all six dimensions, unanswered ones included as 0."""
        values = list(self.model_dump().values())
        return sum(values) / len(values)


class ScoreBundle(BaseModel):
    """
    Category scores and the overall score for one session.

    A fresh bundle is all zeros, which is what a session reports
    before its scores have been computed.
    """
    psychometric: float = Field(0.0, description="Psychometric fit score (0-100)")
    technical: float = Field(0.0, description="Technical readiness score (0-100)")
    dimensions: DimensionScores = Field(default_factory=DimensionScores)
    overall: float = Field(0.0, description="Weighted overall score, not clamped")


class SessionSnapshot(BaseModel):
    """Read-only view of an assessment session's state."""
    current_step: int = Field(..., ge=0)
    total_steps: int = Field(..., ge=1)
    responses: Dict[str, int] = Field(default_factory=dict)
    scores: ScoreBundle = Field(default_factory=ScoreBundle)
    is_complete: bool = False
    recommendation: Optional[Recommendation] = None


class SectionProgress(BaseModel):
    """Answered/total counts for a question-bearing step."""
    answered: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class SessionResponse(BaseModel):
    """Session snapshot plus navigation info for the current step."""
    session_id: str
    step_name: str
    can_advance: bool = Field(
        ...,
        description="Whether every question of the current step has been answered"
    )
    missing_questions: List[str] = Field(default_factory=list)
    progress: SectionProgress
    state: SessionSnapshot


class AnswerRequest(BaseModel):
    """
    Request schema for PUT /assessment/sessions/{id}/answers.

    The value must be an integer; its range is not validated here.
    """
    question_id: str = Field(..., min_length=1, max_length=100)
    value: int = Field(..., description="Likert value (1-5) or zero-based option index")


class StepRequest(BaseModel):
    """Request schema for POST /assessment/sessions/{id}/step."""
    index: int = Field(..., description="Target step; out-of-range values are clamped")


class SectionCatalog(BaseModel):
    """One step of the flow and the question ids it gates on."""
    index: int
    name: str
    question_ids: List[str] = Field(default_factory=list)


class SectionsResponse(BaseModel):
    """Response schema for GET /assessment/sections."""
    total_steps: int
    sections: List[SectionCatalog]


class DimensionResult(BaseModel):
    """A WISCAR dimension ready for display."""
    key: str
    label: str
    score: float
    display_score: int


class AssessmentResults(BaseModel):
    """
    Response schema for GET /assessment/sessions/{id}/results.

    This is a presentation-ready response; the frontend renders it directly
    without implementing any scoring logic.
    """
    recommendation: Recommendation
    title: str
    description: str
    next_steps: List[str]
    overall_score: float
    display_overall: int = Field(..., description="Overall score rounded half up")
    psychometric_score: int
    technical_score: int
    wiscar_average: int
    dimensions: List[DimensionResult]


class HealthResponse(BaseModel):
    """Response schema for GET /assessment/health."""
    status: str = Field(default="healthy", description="Overall health status")
    version: str = Field(..., description="API version")
    active_sessions: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    """Standardized error response."""
    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict] = Field(None, description="Additional error details")
    request_id: Optional[str] = Field(None, description="Client request ID if provided")

    class Config:
        json_schema_extra = {
            "example": {
                "error_code": "SECTION_INCOMPLETE",
                "message": "Answer all questions in 'technical' before continuing",
                "details": {"missing_questions": ["technical_domain_4"]},
                "request_id": "abc-123"
            }
        }
