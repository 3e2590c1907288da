"""
Grading result data structures.

Each grading protocol reports through one of these models:
- ExerciseResult: binary verdict for a catalog exercise (Protocol A)
- OpenAnswerResult: four-way classification for open practice answers (Protocol B)
- TruthTableResult: per-row verdicts for a truth-table exercise (Protocol C)

A wrong answer is a normal outcome carried by these models, never an exception.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AnswerClass(str, Enum):
    """Classification of an open-ended practice answer."""

    CORRECT = "correct"
    CLOSE = "close"
    PARTIAL = "partial"
    WRONG = "wrong"


class ExerciseResult(BaseModel):
    """
    Verdict for one catalog exercise submission.

    Attributes:
        exercise_id: Identifier the verdict is recorded under
        correct: Whether the submission was accepted
        student_answer: Raw submitted text
        correct_answer: Book answer shown after submission
    """

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    correct: bool
    student_answer: str
    correct_answer: str


class OpenAnswerResult(BaseModel):
    """
    Classification of an open-ended practice submission.

    Attributes:
        classification: correct, close, partial or wrong
        message: Diagnostic message (trigger-phrase hint or generic retry text)
        ratio: Fraction of the problem's keywords found in the submission
        matched_keywords: Keywords found, in declaration order
    """

    model_config = ConfigDict(frozen=True)

    classification: AnswerClass
    message: Optional[str] = None
    ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    matched_keywords: list[str] = Field(default_factory=list)

    @property
    def correct(self) -> bool:
        """True only for the correct classification."""
        return self.classification is AnswerClass.CORRECT


class TruthTableRowResult(BaseModel):
    """Outcome for a single truth-table row."""

    model_config = ConfigDict(frozen=True)

    index: int
    assignment: tuple[str, ...]
    expected: str
    submitted: str
    correct: bool


class TruthTableResult(BaseModel):
    """Per-row outcomes plus the aggregate count for a truth-table submission."""

    model_config = ConfigDict(frozen=True)

    rows: list[TruthTableRowResult]

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def correct_count(self) -> int:
        return sum(1 for row in self.rows if row.correct)

    @property
    def all_correct(self) -> bool:
        """A table is fully correct iff every row matches."""
        return bool(self.rows) and self.correct_count == self.total

    def summary(self) -> str:
        """Human-readable one-line verdict."""
        if self.all_correct:
            return f"Perfect! All {self.total} rows correct."
        return f"{self.correct_count}/{self.total} rows correct - review the highlighted rows."
