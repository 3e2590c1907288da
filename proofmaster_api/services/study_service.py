"""
Study service for session-scoped study flows.

Coordinates the session repository with the study core: opening, remixing
and grading exercises, recording progress, and driving the drills.
"""

import random
import time
from typing import Callable, Dict, List, Optional, Tuple

from proofmaster.answer import (
    Feedback,
    OpenAnswerResult,
    TruthTableResult,
    check_exercise,
    feedback_for,
    grade_open_answer,
    grade_truth_table,
)
from proofmaster.answer.result import ExerciseResult
from proofmaster.catalog import (
    Exercise,
    ExerciseCatalog,
    ExerciseNotFound,
    FlashcardDeck,
    PracticeProblem,
    Section,
    TruthTableExercise,
    remix,
)
from proofmaster.drills import (
    FlashcardRun,
    MatchingGame,
    RapidFireResult,
    RapidFireRound,
)
from proofmaster.progress import Aggregate, MasteryRecord, SectionProgress

from ..core.config import Settings
from ..core.errors import (
    ContentNotFoundError,
    ExerciseNotFoundError,
    NoActiveItemError,
    ValidationError,
)
from ..core.logging import get_context_logger, get_logger
from ..models.domain import StudySession
from ..repositories.session_repository import SessionRepositoryInterface

logger = get_logger(__name__)


def _require_answer(answer: str) -> str:
    if not answer or not answer.strip():
        raise ValidationError("Answer must not be blank", field="answer")
    return answer


class StudyService:
    """
    Service for study operations.

    Args:
        repository: Session storage
        catalog: Exercise catalog shared by all sessions
        settings: Drill sizes and timing
        rng: Random source for selection, remixes and drills
        clock: Monotonic clock for rapid-fire timing
    """

    def __init__(
        self,
        repository: SessionRepositoryInterface,
        catalog: ExerciseCatalog,
        settings: Settings,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.repository = repository
        self.catalog = catalog
        self.settings = settings
        self.rng = rng
        self.clock = clock

    # Sessions

    async def create_session(self) -> StudySession:
        return await self.repository.create()

    async def end_session(self, session_id: str) -> None:
        await self.repository.delete(session_id)

    async def progress(
        self, session_id: str
    ) -> Tuple[Aggregate, List[SectionProgress], Dict[str, MasteryRecord]]:
        """Overall aggregate, per-section breakdown and raw records"""
        session = await self.repository.get(session_id)
        store = session.progress
        return (
            store.overall(self.catalog),
            store.section_breakdown(self.catalog),
            store.snapshot(),
        )

    # Catalog

    def sections(self) -> List[Tuple[Section, int]]:
        """Sections with their exercise counts"""
        return [
            (section, sum(len(part) for part in self.catalog.by_section(section.key).values()))
            for section in self.catalog.sections()
        ]

    def section(self, key: str) -> Tuple[Section, Dict[str, List[Exercise]]]:
        try:
            section = self.catalog.section(key)
        except KeyError:
            raise ContentNotFoundError("section", key)
        return section, self.catalog.by_section(key)

    def exercises(self, search: Optional[str] = None) -> List[Exercise]:
        if search:
            return self.catalog.search(search)
        return self.catalog.all()

    def exercise(self, exercise_id: str) -> Exercise:
        try:
            return self.catalog.by_id(exercise_id)
        except ExerciseNotFound:
            raise ExerciseNotFoundError(exercise_id)

    # Exercises

    async def open_exercise(self, session_id: str, exercise_id: str) -> Exercise:
        session = await self.repository.get(session_id)
        exercise = self.exercise(exercise_id)
        session.activate(exercise)
        return exercise

    async def open_random(self, session_id: str) -> Exercise:
        """Open a random exercise the student has not mastered"""
        session = await self.repository.get(session_id)
        exercise = self.catalog.random_unmastered(session.progress, self.rng)
        session.activate(exercise)
        return exercise

    async def navigate(self, session_id: str, direction: int) -> Exercise:
        if direction not in (1, -1):
            raise ValidationError("direction must be 1 or -1", field="direction")
        session = await self.repository.get(session_id)
        current = session.active.id if session.active else None
        exercise = self.catalog.next(current, direction)
        session.activate(exercise)
        return exercise

    async def remix_active(self, session_id: str) -> Exercise:
        """
        Replace the active exercise with a fresh variant.

        The variant keeps the stored exercise's id, so progress recorded
        against it lands on the stored exercise.
        """
        session = await self.repository.get(session_id)
        if session.active is None:
            raise NoActiveItemError("exercise")
        variant = remix(session.active, self.rng)
        session.activate(variant)
        return variant

    async def submit(self, session_id: str, answer: str) -> Tuple[ExerciseResult, MasteryRecord]:
        """
        Grade a free-text answer against the active exercise and record it.

        Raises:
            ValidationError: Blank answer
            NoActiveItemError: No exercise is open
            ValidationError: The open exercise is a truth table
        """
        _require_answer(answer)
        session = await self.repository.get(session_id)
        if session.active is None:
            raise NoActiveItemError("exercise")
        if isinstance(session.active, TruthTableExercise):
            raise ValidationError(
                "Truth-table exercises are graded row by row; submit selections to /truth-table",
                field="answer",
            )

        result = check_exercise(answer, session.active)
        mastery = session.progress.record(result.exercise_id, result.correct)

        get_context_logger(__name__, session_id=session_id).info(
            "Exercise submitted",
            extra_data={
                "exercise_id": result.exercise_id,
                "correct": result.correct,
                "remixed": session.active.remixed,
                "attempts": mastery.attempts,
            }
        )
        return result, mastery

    async def submit_truth_table(
        self, session_id: str, selections: List[str]
    ) -> Tuple[str, TruthTableResult, MasteryRecord]:
        """
        Grade a truth table row by row; the exercise counts as correct only
        when every row matches.
        """
        session = await self.repository.get(session_id)
        exercise = session.active
        if not isinstance(exercise, TruthTableExercise):
            raise NoActiveItemError("truth-table exercise")

        result = grade_truth_table(exercise.truth_table, selections)
        mastery = session.progress.record(exercise.id, result.all_correct)

        get_context_logger(__name__, session_id=session_id).info(
            "Truth table submitted",
            extra_data={
                "exercise_id": exercise.id,
                "correct_rows": result.correct_count,
                "total_rows": result.total,
            }
        )
        return exercise.id, result, mastery

    async def reveal(self, session_id: str) -> Exercise:
        """Show the book answer; progress is left alone"""
        session = await self.repository.get(session_id)
        if session.active is None:
            raise NoActiveItemError("exercise")
        session.revealed = True
        return session.active

    # Practice

    def practice_problems(self) -> List[PracticeProblem]:
        return list(self.catalog.practice)

    def grade_practice(
        self, index: int, answer: str
    ) -> Tuple[PracticeProblem, OpenAnswerResult, Feedback]:
        _require_answer(answer)
        if not 0 <= index < len(self.catalog.practice):
            raise ContentNotFoundError("practice problem", index)
        problem = self.catalog.practice[index]
        result = grade_open_answer(answer, problem)
        logger.info(
            "Practice graded",
            extra_data={"index": index, "classification": result.classification.value}
        )
        return problem, result, feedback_for(result, self.rng)

    # Flashcards

    def decks(self) -> List[FlashcardDeck]:
        return list(self.catalog.decks.values())

    async def start_flashcards(self, session_id: str, deck_key: str) -> FlashcardRun:
        session = await self.repository.get(session_id)
        deck = self.catalog.decks.get(deck_key)
        if deck is None:
            raise ContentNotFoundError("deck", deck_key)
        session.flashcards = FlashcardRun(deck, self.rng)
        return session.flashcards

    async def mark_flashcard(self, session_id: str, known: bool) -> FlashcardRun:
        session = await self.repository.get(session_id)
        run = session.flashcards
        if run is None or run.done:
            raise NoActiveItemError("flashcard run")
        if known:
            run.mark_known()
        else:
            run.mark_review()
        return run

    # Matching

    async def start_matching(self, session_id: str) -> MatchingGame:
        session = await self.repository.get(session_id)
        session.matching = MatchingGame(
            self.catalog.matching, count=self.settings.MATCHING_PAIRS, rng=self.rng
        )
        return session.matching

    async def match(self, session_id: str, prompt: str, answer: str) -> Tuple[bool, MatchingGame]:
        session = await self.repository.get(session_id)
        game = session.matching
        if game is None or game.done:
            raise NoActiveItemError("matching game")
        try:
            correct = game.match(prompt, answer)
        except ValueError as e:
            raise ValidationError(str(e))
        return correct, game

    # Rapid fire

    async def start_rapid_fire(self, session_id: str) -> RapidFireRound:
        session = await self.repository.get(session_id)
        cards = [card for deck in self.catalog.decks.values() for card in deck.cards]
        session.rapid_fire = RapidFireRound(
            cards,
            questions=self.settings.RAPID_FIRE_QUESTIONS,
            seconds=self.settings.RAPID_FIRE_SECONDS,
            clock=self.clock,
            rng=self.rng,
        )
        return session.rapid_fire

    async def _active_round(self, session_id: str) -> RapidFireRound:
        session = await self.repository.get(session_id)
        round_ = session.rapid_fire
        if round_ is None or round_.done:
            raise NoActiveItemError("rapid-fire round")
        return round_

    async def answer_rapid_fire(
        self, session_id: str, answer: str
    ) -> Tuple[RapidFireResult, RapidFireRound]:
        _require_answer(answer)
        round_ = await self._active_round(session_id)
        if round_.answered:
            raise ValidationError("Question already answered; move to the next one")
        return round_.answer(answer), round_

    async def next_rapid_fire(self, session_id: str) -> RapidFireRound:
        round_ = await self._active_round(session_id)
        round_.next()
        return round_


# Factory function for dependency injection
def get_study_service(
    repository: SessionRepositoryInterface,
    catalog: ExerciseCatalog,
    settings: Settings,
) -> StudyService:
    """Create study service instance"""
    return StudyService(repository, catalog, settings)
