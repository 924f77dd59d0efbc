"""
Readiness Assessment - FastAPI Application

Serves the multi-step self-assessment flow:
- Session creation and answer recording
- Gated step navigation
- Scoring and recommendation on entry to the results step

Environment Variables:
    See config.py for complete list and descriptions.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import settings
from models.schemas import ErrorResponse
from routes import assessment
from session.errors import SectionIncomplete, SessionNotInitialized

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(
        f"Session table: max={settings.session_max_count}, "
        f"ttl={settings.session_ttl_seconds}s"
    )
    yield
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Self-assessment questionnaire with deterministic scoring and recommendation",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assessment.router)


def _request_id(request: Request):
    return request.headers.get("x-request-id")


# Error handlers
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error_code="VALIDATION_ERROR",
            message="Invalid input data",
            details={"errors": exc.errors()},
            request_id=_request_id(request),
        ).model_dump(),
    )


@app.exception_handler(SessionNotInitialized)
async def session_not_found_handler(request: Request, exc: SessionNotInitialized):
    """Unknown or expired session ids."""
    logger.warning(f"Session lookup failed: {exc.session_id}")
    return JSONResponse(
        status_code=404,
        content=ErrorResponse(
            error_code="SESSION_NOT_FOUND",
            message=str(exc),
            details={"session_id": exc.session_id},
            request_id=_request_id(request),
        ).model_dump(),
    )


@app.exception_handler(SectionIncomplete)
async def section_incomplete_handler(request: Request, exc: SectionIncomplete):
    """Advance refused because the current step has unanswered questions."""
    return JSONResponse(
        status_code=409,
        content=ErrorResponse(
            error_code="SECTION_INCOMPLETE",
            message=str(exc),
            details={"step": exc.step, "missing_questions": exc.missing},
            request_id=_request_id(request),
        ).model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error_code=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
            request_id=_request_id(request),
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred. Please try again.",
            request_id=_request_id(request),
        ).model_dump(),
    )


# Root redirect
@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint."""
    return {"message": "Readiness Assessment API", "docs": "/docs", "health": "/assessment/health"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
