"""
Catalog models for the study core.

These are the static entities the study app is built from: textbook
sections, exercises (plain, truth-table and remixable variants), open
practice problems, flashcards and matching pairs. All of them are immutable
once built; a remix produces a new Exercise rather than editing one.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from proofmaster.answer.truth_table import enumerate_assignments


class ExerciseKind(str, Enum):
    """How an exercise is presented and graded"""
    LIST = "list"
    BUILDER = "builder"
    CARDINALITY = "cardinality"
    TFQ = "tfq"
    TRUTH_TABLE = "truth_table"


class Section(BaseModel):
    """A textbook section with its key definitions"""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Section number, e.g. '1.1'")
    title: str
    page: int = Field(..., ge=1)
    definitions: dict[str, str] = Field(default_factory=dict)


class Exercise(BaseModel):
    """
    One catalog exercise.

    Attributes:
        id: Stable identifier "<section>.<part>.<n>", the progress key
        section: Key of the owning Section
        part: Part letter within the section
        question: Prompt text
        answer: Book answer, also the grading reference
        hint: Nudge shown on request
        external_query_hint: Query text for the math engine
        kind: Presentation/grading kind
        remixed: True for a generated variant of a stored exercise
    """
    model_config = ConfigDict(frozen=True)

    id: str
    section: str
    part: str
    question: str
    answer: str
    hint: str = ""
    external_query_hint: str = ""
    kind: ExerciseKind = ExerciseKind.LIST
    remixed: bool = False


class TruthTable(BaseModel):
    """
    Stored truth table for a formula.

    Each row holds one value per variable followed by one or more result
    columns; the last column is the value being graded. Rows are kept in
    the order produced by enumerate_assignments.
    """
    model_config = ConfigDict(frozen=True)

    variables: tuple[str, ...]
    formula: str
    rows: tuple[tuple[str, ...], ...]

    @model_validator(mode="after")
    def _check_rows(self) -> "TruthTable":
        if not self.variables:
            raise ValueError("truth table needs at least one variable")
        expected = enumerate_assignments(len(self.variables))
        if len(self.rows) != len(expected):
            raise ValueError(
                f"{self.formula}: expected {len(expected)} rows, got {len(self.rows)}"
            )
        n = len(self.variables)
        for index, (row, assignment) in enumerate(zip(self.rows, expected)):
            if len(row) <= n:
                raise ValueError(f"{self.formula}: row {index} has no result column")
            if tuple(row[:n]) != assignment:
                raise ValueError(
                    f"{self.formula}: row {index} is {row[:n]}, expected {assignment}"
                )
            if any(value not in ("T", "F") for value in row):
                raise ValueError(f"{self.formula}: row {index} has a non T/F value")
        return self

    @property
    def result_column(self) -> list[str]:
        """Graded value of each row (its last column)."""
        return [row[-1] for row in self.rows]


class TruthTableExercise(Exercise):
    """Exercise answered by filling in a truth table"""
    kind: ExerciseKind = ExerciseKind.TRUTH_TABLE
    truth_table: TruthTable

    @model_validator(mode="after")
    def _check_kind(self) -> "TruthTableExercise":
        if self.kind is not ExerciseKind.TRUTH_TABLE:
            raise ValueError(f"{self.id}: truth-table exercise must have kind truth_table")
        return self


class RemixVariant(BaseModel):
    """Fresh question/answer pair produced by a remix generator"""
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    external_query_hint: str
    hint: Optional[str] = None


class RemixableExercise(Exercise):
    """Exercise that can generate randomized variants of itself"""
    generator: Callable[..., RemixVariant] = Field(exclude=True, repr=False)


class PracticeProblem(BaseModel):
    """
    Open-ended practice problem graded by keyword heuristics.

    partial_hints maps trigger phrases to diagnostic messages; insertion order
    is the order triggers are tried in.
    """
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    keywords: list[str] = Field(default_factory=list)
    partial_hints: dict[str, str] = Field(default_factory=dict)
    hint: str = ""
    explanation: str = ""


class Flashcard(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    deck: str
    question: str
    answer: str
    hint: str = ""
    law: str = ""


class FlashcardDeck(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    cards: tuple[Flashcard, ...]


class MatchingPair(BaseModel):
    """A prompt and the one answer it matches"""
    model_config = ConfigDict(frozen=True)

    prompt: str
    answer: str
    category: str = ""
