"""
Session repository for study state.

Implements the Repository pattern for session storage. Sessions are kept in
process memory; nothing survives a restart.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..core.config import get_settings
from ..core.errors import SessionNotFoundError
from ..core.logging import get_logger
from ..models.domain import StudySession

logger = get_logger(__name__)


class SessionRepositoryInterface(ABC):
    """Abstract interface for session repository"""

    @abstractmethod
    async def create(self) -> StudySession:
        """Start a new session"""
        pass

    @abstractmethod
    async def get(self, session_id: str) -> StudySession:
        """Get session by ID"""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """End a session, discarding its progress"""
        pass

    @abstractmethod
    async def list(self) -> List[StudySession]:
        """List live sessions"""
        pass


class InMemorySessionRepository(SessionRepositoryInterface):
    """
    In-memory session repository.

    Holds at most ``max_sessions`` sessions; creating one more evicts the
    session that has been idle the longest.
    """

    def __init__(self, max_sessions: Optional[int] = None):
        self.max_sessions = max_sessions or get_settings().MAX_SESSIONS
        self._sessions: Dict[str, StudySession] = {}
        self._lock = asyncio.Lock()

        logger.info(
            "Initialized InMemorySessionRepository",
            extra_data={"max_sessions": self.max_sessions}
        )

    async def create(self) -> StudySession:
        async with self._lock:
            if len(self._sessions) >= self.max_sessions:
                oldest = min(self._sessions.values(), key=lambda s: s.last_active)
                del self._sessions[oldest.session_id]
                logger.info(
                    "Evicted idle session",
                    extra_data={"session_id": oldest.session_id}
                )
            session = StudySession()
            self._sessions[session.session_id] = session

        logger.info(
            "Session created",
            extra_data={"session_id": session.session_id, "live": len(self._sessions)}
        )
        return session

    async def get(self, session_id: str) -> StudySession:
        session = self._sessions.get(session_id)
        if session is None:
            logger.warning(
                "Session not found",
                extra_data={"session_id": session_id}
            )
            raise SessionNotFoundError(session_id)
        session.touch()
        return session

    async def delete(self, session_id: str) -> None:
        async with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info("Session ended", extra_data={"session_id": session_id})

    async def list(self) -> List[StudySession]:
        return list(self._sessions.values())


# Singleton instance
_session_repository: Optional[InMemorySessionRepository] = None


def get_session_repository() -> InMemorySessionRepository:
    """Get session repository instance (singleton)"""
    global _session_repository

    if _session_repository is None:
        _session_repository = InMemorySessionRepository()

    return _session_repository
