"""Domain and API models package"""

from .domain import StudySession
from .schemas import (
    AggregateResponse,
    AnswerRequest,
    ExerciseResponse,
    ExerciseSubmitResponse,
    FlashcardDeckResponse,
    FlashcardMarkRequest,
    FlashcardRunResponse,
    HealthResponse,
    MatchRequest,
    MatchResponse,
    MatchingGameResponse,
    PracticeGradeResponse,
    PracticeProblemResponse,
    ProgressResponse,
    QueryResponse,
    RapidFireAnswerResponse,
    RapidFireResponse,
    RevealResponse,
    SectionDetailResponse,
    SectionResponse,
    SessionCreatedResponse,
    TruthTableRequest,
    TruthTableSubmitResponse,
)

__all__ = [
    "StudySession",
    "AggregateResponse",
    "AnswerRequest",
    "ExerciseResponse",
    "ExerciseSubmitResponse",
    "FlashcardDeckResponse",
    "FlashcardMarkRequest",
    "FlashcardRunResponse",
    "HealthResponse",
    "MatchRequest",
    "MatchResponse",
    "MatchingGameResponse",
    "PracticeGradeResponse",
    "PracticeProblemResponse",
    "ProgressResponse",
    "QueryResponse",
    "RapidFireAnswerResponse",
    "RapidFireResponse",
    "RevealResponse",
    "SectionDetailResponse",
    "SectionResponse",
    "SessionCreatedResponse",
    "TruthTableRequest",
    "TruthTableSubmitResponse",
]
