"""
API request and response models.

Response models convert from the core's domain objects through
``from_domain``. Exercise views never carry the book answer; it is only sent
after a submission or an explicit reveal.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from proofmaster.answer import AnswerClass, Feedback, OpenAnswerResult, TruthTableResult
from proofmaster.answer.result import TruthTableRowResult
from proofmaster.answer.truth_table import FALSE, TRUE, UNANSWERED
from proofmaster.catalog import (
    Exercise,
    Flashcard,
    FlashcardDeck,
    PracticeProblem,
    Section,
    TruthTableExercise,
    is_remixable,
)
from proofmaster.drills import FlashcardRun, MatchingGame, RapidFireResult, RapidFireRound
from proofmaster.progress import Aggregate, MasteryRecord, SectionProgress
from proofmaster.query import web_url

MAX_ANSWER_LENGTH = 10000


# Requests

class AnswerRequest(BaseModel):
    """Free-text answer submission"""
    answer: str = Field(..., max_length=MAX_ANSWER_LENGTH)


class TruthTableRequest(BaseModel):
    """Selected result column, one entry per row"""
    selections: List[str] = Field(..., max_length=64)

    @field_validator("selections")
    @classmethod
    def normalize_selections(cls, v: List[str]) -> List[str]:
        cleaned = [s.strip().upper() or UNANSWERED for s in v]
        for s in cleaned:
            if s not in (TRUE, FALSE, UNANSWERED):
                raise ValueError("selections must be 'T', 'F' or '?'")
        return cleaned


class FlashcardMarkRequest(BaseModel):
    known: bool


class MatchRequest(BaseModel):
    prompt: str
    answer: str


# Query proxy and health

class QueryResponse(BaseModel):
    """Proxy outcome; error is set only when the upstream had no answer"""
    result: Optional[str] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool = True
    service: str
    timestamp: str
    app_id_configured: bool


# Catalog

class SectionResponse(BaseModel):
    key: str
    title: str
    page: int
    definitions: Dict[str, str]
    exercise_count: int

    @classmethod
    def from_domain(cls, section: Section, exercise_count: int) -> "SectionResponse":
        return cls(
            key=section.key,
            title=section.title,
            page=section.page,
            definitions=section.definitions,
            exercise_count=exercise_count,
        )


class TruthTableView(BaseModel):
    """Truth-table scaffold: assignments without the result column"""
    variables: List[str]
    formula: str
    assignments: List[List[str]]


class ExerciseResponse(BaseModel):
    """Exercise as shown before it is answered"""
    id: str
    section: str
    part: str
    question: str
    hint: str
    external_query_hint: str
    kind: str
    remixed: bool
    remixable: bool
    truth_table: Optional[TruthTableView] = None

    @classmethod
    def from_domain(cls, exercise: Exercise) -> "ExerciseResponse":
        table = None
        if isinstance(exercise, TruthTableExercise):
            n = len(exercise.truth_table.variables)
            table = TruthTableView(
                variables=list(exercise.truth_table.variables),
                formula=exercise.truth_table.formula,
                assignments=[list(row[:n]) for row in exercise.truth_table.rows],
            )
        return cls(
            id=exercise.id,
            section=exercise.section,
            part=exercise.part,
            question=exercise.question,
            hint=exercise.hint,
            external_query_hint=exercise.external_query_hint,
            kind=exercise.kind.value,
            remixed=exercise.remixed,
            remixable=is_remixable(exercise),
            truth_table=table,
        )


class SectionDetailResponse(BaseModel):
    section: SectionResponse
    parts: Dict[str, List[ExerciseResponse]]


# Sessions and progress

class SessionCreatedResponse(BaseModel):
    session_id: str


class AggregateResponse(BaseModel):
    completed: int
    total: int
    percentage: int

    @classmethod
    def from_domain(cls, aggregate: Aggregate) -> "AggregateResponse":
        return cls(
            completed=aggregate.completed,
            total=aggregate.total,
            percentage=aggregate.percentage,
        )


class ProgressResponse(BaseModel):
    overall: AggregateResponse
    sections: List[SectionProgress]
    records: Dict[str, MasteryRecord]


class ExerciseSubmitResponse(BaseModel):
    """Verdict for a free-text exercise submission"""
    exercise_id: str
    correct: bool
    student_answer: str
    correct_answer: str
    mastery: MasteryRecord


class TruthTableSubmitResponse(BaseModel):
    exercise_id: str
    rows: List[TruthTableRowResult]
    correct_count: int
    total: int
    all_correct: bool
    summary: str
    mastery: MasteryRecord

    @classmethod
    def from_domain(
        cls, exercise_id: str, result: TruthTableResult, mastery: MasteryRecord
    ) -> "TruthTableSubmitResponse":
        return cls(
            exercise_id=exercise_id,
            rows=result.rows,
            correct_count=result.correct_count,
            total=result.total,
            all_correct=result.all_correct,
            summary=result.summary(),
            mastery=mastery,
        )


class RevealResponse(BaseModel):
    exercise_id: str
    answer: str
    hint: str
    external_query_hint: str
    web_url: Optional[str] = None

    @classmethod
    def from_domain(cls, exercise: Exercise) -> "RevealResponse":
        query = exercise.external_query_hint
        return cls(
            exercise_id=exercise.id,
            answer=exercise.answer,
            hint=exercise.hint,
            external_query_hint=query,
            web_url=web_url(query) if query else None,
        )


# Practice

class PracticeProblemResponse(BaseModel):
    index: int
    question: str
    hint: str

    @classmethod
    def from_domain(cls, index: int, problem: PracticeProblem) -> "PracticeProblemResponse":
        return cls(index=index, question=problem.question, hint=problem.hint)


class PracticeGradeResponse(BaseModel):
    """Protocol B classification plus what to show the student"""
    classification: AnswerClass
    message: Optional[str] = None
    ratio: float
    matched_keywords: List[str]
    feedback: str
    reveal_hint: bool
    hint: Optional[str] = None
    explanation: Optional[str] = None

    @classmethod
    def from_domain(
        cls, problem: PracticeProblem, result: OpenAnswerResult, feedback: Feedback
    ) -> "PracticeGradeResponse":
        return cls(
            classification=result.classification,
            message=result.message,
            ratio=result.ratio,
            matched_keywords=result.matched_keywords,
            feedback=feedback.text,
            reveal_hint=feedback.reveal_hint,
            hint=problem.hint if feedback.reveal_hint else None,
            explanation=problem.explanation if result.correct else None,
        )


# Drills

class FlashcardDeckResponse(BaseModel):
    key: str
    title: str
    card_count: int

    @classmethod
    def from_domain(cls, deck: FlashcardDeck) -> "FlashcardDeckResponse":
        return cls(key=deck.key, title=deck.title, card_count=len(deck.cards))


class FlashcardRunResponse(BaseModel):
    deck: str
    position: int
    total: int
    done: bool
    known: int
    review: int
    card: Optional[Flashcard] = None

    @classmethod
    def from_domain(cls, run: FlashcardRun) -> "FlashcardRunResponse":
        return cls(
            deck=run.deck.key,
            position=run.position,
            total=len(run.cards),
            done=run.done,
            known=len(run.known),
            review=len(run.review),
            card=run.current,
        )


class MatchingGameResponse(BaseModel):
    prompts: List[str]
    bank: List[str]
    matches: Dict[str, str]
    errors: int
    score: int
    done: bool
    accuracy: int

    @classmethod
    def from_domain(cls, game: MatchingGame) -> "MatchingGameResponse":
        return cls(
            prompts=game.prompts,
            bank=game.bank,
            matches=game.matches,
            errors=game.errors,
            score=game.score,
            done=game.done,
            accuracy=game.accuracy,
        )


class MatchResponse(BaseModel):
    correct: bool
    game: MatchingGameResponse


class RapidFireResponse(BaseModel):
    position: int
    total: int
    done: bool
    question: Optional[str] = None
    time_left: float
    score: int
    accuracy: int
    results: List[RapidFireResult] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, round_: RapidFireRound) -> "RapidFireResponse":
        card = round_.current
        return cls(
            position=round_.position,
            total=len(round_.questions),
            done=round_.done,
            question=card.question if card else None,
            time_left=round_.time_left() if card else 0.0,
            score=round_.score,
            accuracy=round_.accuracy,
            results=round_.results if round_.done else [],
        )


class RapidFireAnswerResponse(BaseModel):
    result: RapidFireResult
    round: RapidFireResponse
