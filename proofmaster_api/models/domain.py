"""
Domain models for the study service.

A StudySession is the unit of state the service keeps between requests: the
student's progress, the exercise currently on screen, and whichever drills
are running. Sessions live in memory only.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from proofmaster.catalog import Exercise
from proofmaster.drills import FlashcardRun, MatchingGame, RapidFireRound
from proofmaster.progress import ProgressStore


def _now() -> datetime:
    return datetime.now(timezone.utc)


class StudySession(BaseModel):
    """
    State of one student's study session.

    Attributes:
        session_id: Opaque identifier handed to the client
        progress: Mastery records, owned by this session
        active: Exercise currently on screen (possibly a remix)
        revealed: Whether the answer to the active exercise was revealed
        flashcards: Running flashcard pass, if any
        matching: Running matching game, if any
        rapid_fire: Running rapid-fire round, if any
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    session_id: str = Field(default_factory=lambda: uuid4().hex)
    created_at: datetime = Field(default_factory=_now)
    last_active: datetime = Field(default_factory=_now)

    progress: ProgressStore = Field(default_factory=ProgressStore)
    active: Optional[Exercise] = None
    revealed: bool = False

    flashcards: Optional[FlashcardRun] = None
    matching: Optional[MatchingGame] = None
    rapid_fire: Optional[RapidFireRound] = None

    def touch(self) -> None:
        self.last_active = _now()

    def activate(self, exercise: Exercise) -> None:
        """Put an exercise on screen, clearing any earlier reveal."""
        self.active = exercise
        self.revealed = False
