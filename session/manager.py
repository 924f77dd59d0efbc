"""
In-memory registry of assessment sessions.

Each session id maps to its own AssessmentSession; no mutable state is
shared between sessions. The table is a bounded TTLCache so abandoned
sessions expire after the configured idle time. Nothing is persisted.
"""

import logging
import threading
import uuid
from typing import Optional, Tuple

from cachetools import TTLCache

from config import settings
from session.errors import SessionNotInitialized
from session.store import AssessmentSession

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Thread-safe table of live sessions keyed by session id.

    Args:
        maxsize: Maximum number of sessions held at once
        ttl: Idle lifetime of a session in seconds
    """

    def __init__(
        self,
        maxsize: Optional[int] = None,
        ttl: Optional[int] = None
    ):
        self._lock = threading.Lock()
        self._sessions: TTLCache = TTLCache(
            maxsize=maxsize or settings.session_max_count,
            ttl=ttl or settings.session_ttl_seconds,
        )

    def create_session(self, session_id: Optional[str] = None) -> Tuple[str, AssessmentSession]:
        """Start a fresh session and register it."""
        session_id = session_id or str(uuid.uuid4())
        session = AssessmentSession()
        with self._lock:
            self._sessions[session_id] = session
        logger.info(f"Created session {session_id}")
        return session_id, session

    def get_session(self, session_id: str) -> AssessmentSession:
        """
        Look up a live session and refresh its idle timer.

        Raises:
            SessionNotInitialized: if the id is unknown or has expired
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotInitialized(session_id)
            # Re-inserting restarts the TTL countdown
            self._sessions[session_id] = session
        return session

    def delete_session(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotInitialized(session_id)
        logger.info(f"Deleted session {session_id}")

    def active_count(self) -> int:
        with self._lock:
            self._sessions.expire()
            return len(self._sessions)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
