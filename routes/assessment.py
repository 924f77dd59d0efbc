"""
Assessment routes: the HTTP presentation layer over assessment sessions.

Every endpoint dispatches one command into a session. Two rules of the
flow live here rather than in the store: a step may only be left once all
of its questions are answered, and entering the results step scores the
session and marks it complete.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from config import settings
from evaluators.scoring import build_results
from models.enums import TOTAL_STEPS
from models.schemas import (
    AnswerRequest,
    AssessmentResults,
    ErrorResponse,
    HealthResponse,
    SectionsResponse,
    SessionResponse,
    StepRequest,
)
from session.errors import SectionIncomplete
from session.manager import SessionManager
from session.navigation import (
    TERMINAL_STEP,
    first_incomplete_step,
    missing_questions,
    section_catalog,
    section_progress,
    step_name,
)
from session.store import AssessmentSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessment", tags=["Assessment"])

_session_manager = SessionManager()


def get_session_manager() -> SessionManager:
    """Dependency returning the process-wide session table."""
    return _session_manager


def _session_response(session_id: str, session: AssessmentSession) -> SessionResponse:
    responses = session.responses
    missing = missing_questions(session.current_step, responses)
    return SessionResponse(
        session_id=session_id,
        step_name=step_name(session.current_step),
        can_advance=not missing,
        missing_questions=missing,
        progress=section_progress(session.current_step, responses),
        state=session.snapshot(),
    )


def _on_step_entered(session: AssessmentSession) -> None:
    """Entering the results step scores the session and completes it."""
    if session.is_terminal_step:
        session.compute_scores()
        session.mark_complete()


# ============ CATALOG ============

@router.get("/health", response_model=HealthResponse)
def health_check(manager: SessionManager = Depends(get_session_manager)):
    """Check API health and report how many sessions are live."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        active_sessions=manager.active_count(),
    )


@router.get("/sections", response_model=SectionsResponse)
def get_sections():
    """Ordered steps with the question ids each one gates on."""
    return SectionsResponse(total_steps=TOTAL_STEPS, sections=section_catalog())


# ============ SESSIONS ============

@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(manager: SessionManager = Depends(get_session_manager)):
    """Start a new assessment at step 0."""
    session_id, session = manager.create_session()
    return _session_response(session_id, session)


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_session(session_id: str, manager: SessionManager = Depends(get_session_manager)):
    session = manager.get_session(session_id)
    return _session_response(session_id, session)


@router.delete("/sessions/{session_id}", responses={404: {"model": ErrorResponse}})
def delete_session(session_id: str, manager: SessionManager = Depends(get_session_manager)):
    manager.delete_session(session_id)
    return {"message": "Session deleted"}


@router.put("/sessions/{session_id}/answers", response_model=SessionResponse)
def record_answer(
    session_id: str,
    answer: AnswerRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """Record or overwrite the answer to one question."""
    session = manager.get_session(session_id)
    session.record_answer(answer.question_id, answer.value)
    return _session_response(session_id, session)


# ============ NAVIGATION ============

@router.post(
    "/sessions/{session_id}/advance",
    response_model=SessionResponse,
    responses={409: {"model": ErrorResponse, "description": "Current section incomplete"}},
)
def advance(session_id: str, manager: SessionManager = Depends(get_session_manager)):
    """
    Move to the next step.

    Refused with 409 while any question of the current step is unanswered.
    """
    session = manager.get_session(session_id)
    missing = missing_questions(session.current_step, session.responses)
    if missing:
        raise SectionIncomplete(step_name(session.current_step), missing)

    session.advance()
    _on_step_entered(session)
    logger.debug(f"Session {session_id} advanced to step {session.current_step}")
    return _session_response(session_id, session)


@router.post("/sessions/{session_id}/retreat", response_model=SessionResponse)
def retreat(session_id: str, manager: SessionManager = Depends(get_session_manager)):
    session = manager.get_session(session_id)
    session.retreat()
    return _session_response(session_id, session)


@router.post(
    "/sessions/{session_id}/step",
    response_model=SessionResponse,
    responses={409: {"model": ErrorResponse, "description": "An earlier section is incomplete"}},
)
def go_to_step(
    session_id: str,
    request: StepRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """
    Jump to a step; out-of-range indices are clamped, never rejected.

    Backward jumps always succeed. A forward jump is refused with 409 while
    any step before the target still has unanswered questions.
    """
    session = manager.get_session(session_id)
    target = max(0, min(request.index, TERMINAL_STEP))
    if target > session.current_step:
        blocking = first_incomplete_step(target, session.responses)
        if blocking is not None:
            raise SectionIncomplete(
                blocking.value, missing_questions(blocking, session.responses)
            )

    session.go_to_step(target)
    _on_step_entered(session)
    return _session_response(session_id, session)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
def reset(session_id: str, manager: SessionManager = Depends(get_session_manager)):
    """Discard all answers and scores and start over (retake)."""
    session = manager.get_session(session_id)
    session.reset()
    return _session_response(session_id, session)


# ============ RESULTS ============

@router.get(
    "/sessions/{session_id}/results",
    response_model=AssessmentResults,
    responses={409: {"model": ErrorResponse, "description": "Assessment not complete"}},
)
def get_results(session_id: str, manager: SessionManager = Depends(get_session_manager)):
    """Presentation-ready results for a completed assessment."""
    session = manager.get_session(session_id)
    if not session.is_complete or session.recommendation is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Assessment is not complete yet",
        )

    results = build_results(session.scores, session.recommendation)
    logger.info(
        f"Results served for {session_id}: overall={results.display_overall}, "
        f"recommendation={results.recommendation.value}"
    )
    return results
