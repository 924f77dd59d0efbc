"""Session package for the Readiness Assessment."""

from .errors import SectionIncomplete, SessionNotInitialized
from .store import AssessmentSession
from .manager import SessionManager
from .navigation import (
    TERMINAL_STEP,
    can_leave_step,
    first_incomplete_step,
    missing_questions,
    section_catalog,
    section_progress,
    section_questions,
    step_index,
    step_name,
)

__all__ = [
    "SectionIncomplete",
    "SessionNotInitialized",
    "AssessmentSession",
    "SessionManager",
    "TERMINAL_STEP",
    "can_leave_step",
    "first_incomplete_step",
    "missing_questions",
    "section_catalog",
    "section_progress",
    "section_questions",
    "step_index",
    "step_name",
]
