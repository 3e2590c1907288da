"""
Exercise catalog.

Read-only index over the static study content: exercises in declared order,
grouped by section and part, plus the practice problems, flashcard decks and
matching pairs that ride along with them.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable, Optional

from .models import Exercise, FlashcardDeck, MatchingPair, PracticeProblem, Section

if TYPE_CHECKING:
    from proofmaster.progress import ProgressStore

logger = logging.getLogger(__name__)


class ExerciseNotFound(KeyError):
    """Raised when an exercise id is not in the catalog"""

    def __init__(self, exercise_id: str):
        super().__init__(exercise_id)
        self.exercise_id = exercise_id

    def __str__(self) -> str:
        return f"Exercise not found: {self.exercise_id}"


class ExerciseCatalog:
    """
    Immutable collection of sections and exercises.

    Exercise ids must be unique and every exercise must belong to a known
    section; both are checked at construction.
    """

    def __init__(
        self,
        sections: Iterable[Section],
        exercises: Iterable[Exercise],
        practice: Iterable[PracticeProblem] = (),
        decks: Iterable[FlashcardDeck] = (),
        matching: Iterable[MatchingPair] = (),
    ):
        self._sections = {s.key: s for s in sections}
        self._exercises: list[Exercise] = list(exercises)
        self._by_id: dict[str, Exercise] = {}
        self._positions: dict[str, int] = {}

        for position, exercise in enumerate(self._exercises):
            if exercise.id in self._by_id:
                raise ValueError(f"Duplicate exercise id: {exercise.id}")
            if exercise.section not in self._sections:
                raise ValueError(
                    f"Exercise {exercise.id} refers to unknown section {exercise.section}"
                )
            self._by_id[exercise.id] = exercise
            self._positions[exercise.id] = position

        self.practice: tuple[PracticeProblem, ...] = tuple(practice)
        self.decks: dict[str, FlashcardDeck] = {d.key: d for d in decks}
        self.matching: tuple[MatchingPair, ...] = tuple(matching)

        logger.debug(
            "catalog built: %d sections, %d exercises",
            len(self._sections), len(self._exercises),
        )

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    def by_id(self, exercise_id: str) -> Exercise:
        try:
            return self._by_id[exercise_id]
        except KeyError:
            raise ExerciseNotFound(exercise_id) from None

    def all(self) -> list[Exercise]:
        return list(self._exercises)

    def sections(self) -> list[Section]:
        return list(self._sections.values())

    def section(self, key: str) -> Section:
        return self._sections[key]

    def by_section(self, section_key: str) -> dict[str, list[Exercise]]:
        """
        Exercises of one section grouped by part.

        Parts and exercises keep the catalog's declared order. An unknown
        section (or one without exercises) gives an empty mapping.
        """
        grouped: dict[str, list[Exercise]] = {}
        for exercise in self._exercises:
            if exercise.section == section_key:
                grouped.setdefault(exercise.part, []).append(exercise)
        return grouped

    def random_unmastered(
        self, progress: "ProgressStore", rng: Optional[random.Random] = None
    ) -> Exercise:
        """
        Pick an exercise the student has not mastered yet.

        Falls back to the whole catalog once everything is mastered.
        """
        if not self._exercises:
            raise LookupError("catalog is empty")
        rng = rng or random
        pool = [e for e in self._exercises if not progress.is_mastered(e.id)]
        return rng.choice(pool or self._exercises)

    def next(self, current_id: Optional[str], direction: int) -> Exercise:
        """
        Neighbouring exercise in declared order, wrapping at both ends.

        Args:
            current_id: Exercise being viewed (None or unknown to start fresh)
            direction: +1 for next, -1 for previous

        Returns:
            The neighbouring exercise; from an unknown position, the first
            exercise going forward or the last going back
        """
        if direction not in (1, -1):
            raise ValueError("direction must be +1 or -1")
        if not self._exercises:
            raise LookupError("catalog is empty")
        position = self._positions.get(current_id) if current_id is not None else None
        if position is None:
            return self._exercises[0 if direction == 1 else -1]
        return self._exercises[(position + direction) % len(self._exercises)]

    def search(self, text: str) -> list[Exercise]:
        """Case-insensitive match over id, question and section title."""
        needle = text.strip().lower()
        if not needle:
            return self.all()
        found = []
        for exercise in self._exercises:
            title = self._sections[exercise.section].title
            haystack = " ".join((exercise.id, exercise.question, title)).lower()
            if needle in haystack:
                found.append(exercise)
        return found


def default_catalog() -> ExerciseCatalog:
    """Build the catalog from the bundled Book of Proof content."""
    from .content import (
        EXERCISES,
        FLASHCARD_DECKS,
        MATCHING_PAIRS,
        PRACTICE_PROBLEMS,
        SECTIONS,
    )

    return ExerciseCatalog(
        sections=SECTIONS,
        exercises=EXERCISES,
        practice=PRACTICE_PROBLEMS,
        decks=FLASHCARD_DECKS,
        matching=MATCHING_PAIRS,
    )
