"""
Textual grading protocols.

These are lenient heuristics matched against the existing
exercise data. They do not attempt symbolic equivalence.

Protocol A (grade_exercise):
    Binary verdict for catalog exercises: exact match, submission contained
    in the answer, or the answer's first 8 characters contained in the
    submission (all after normalization).

Protocol B (grade_open_answer):
    Four-way classification for open practice problems using exact match,
    trigger phrases, and the keyword ratio.

Rapid fire (grade_rapid_fire):
    Quick check for timed drills: submission contained in the answer, or
    the leading 70% of the answer contained in the submission.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Union

from .normalize import fold, normalize
from .result import AnswerClass, ExerciseResult, OpenAnswerResult

if TYPE_CHECKING:
    from proofmaster.catalog.models import Exercise, PracticeProblem

logger = logging.getLogger(__name__)

EXERCISE_PREFIX_LENGTH = 8
CLOSE_RATIO = 0.6
PARTIAL_RATIO = 0.3
RAPID_FIRE_PREFIX_FRACTION = 0.7

CLOSE_MESSAGE = "Really close! You've got the right idea, just tighten up the notation."
RETRY_MESSAGE = "You're on the right track. Re-read the hint and try again."


def grade_exercise(submitted: str, answer: Union[str, "Exercise"]) -> bool:
    """
    Grade a catalog exercise submission (Protocol A).

    Args:
        submitted: Student's raw text
        answer: Canonical answer text, or the exercise carrying it

    Returns:
        True if the submission is accepted
    """
    canonical = answer if isinstance(answer, str) else answer.answer
    u = normalize(submitted)
    c = normalize(canonical)
    prefix = c[:min(len(c), EXERCISE_PREFIX_LENGTH)]
    return u == c or u in c or prefix in u


def check_exercise(submitted: str, exercise: "Exercise") -> ExerciseResult:
    """Grade an exercise and package the verdict with the book answer."""
    correct = grade_exercise(submitted, exercise.answer)
    logger.debug("graded %s correct=%s", exercise.id, correct)
    return ExerciseResult(
        exercise_id=exercise.id,
        correct=correct,
        student_answer=submitted,
        correct_answer=exercise.answer,
    )


def keyword_ratio(submitted: str, keywords: list[str]) -> tuple[float, list[str]]:
    """
    Fraction of keywords found in the submission (case-insensitive substring).

    Returns:
        Tuple of (ratio, matched keywords in declaration order)
    """
    if not keywords:
        return 0.0, []
    text = fold(submitted)
    matched = [k for k in keywords if k.lower() in text]
    return len(matched) / len(keywords), matched


def grade_open_answer(submitted: str, problem: "PracticeProblem") -> OpenAnswerResult:
    """
    Classify an open-ended practice submission (Protocol B).

    Steps, first hit wins:
    1. Exact match after normalization -> correct
    2. A trigger phrase of partial_hints found in the submission -> partial
       with that trigger's message (declaration order)
    3. Keyword ratio >= 0.6 -> close; >= 0.3 -> partial; else wrong

    Args:
        submitted: Student's raw text
        problem: Practice problem with answer, keywords and partial_hints

    Returns:
        OpenAnswerResult with classification and optional message
    """
    u = normalize(submitted)
    ratio, matched = keyword_ratio(submitted, problem.keywords)

    if u == normalize(problem.answer):
        return OpenAnswerResult(
            classification=AnswerClass.CORRECT, ratio=ratio, matched_keywords=matched
        )

    for trigger, message in problem.partial_hints.items():
        if normalize(trigger) in u:
            return OpenAnswerResult(
                classification=AnswerClass.PARTIAL,
                message=message,
                ratio=ratio,
                matched_keywords=matched,
            )

    if ratio >= CLOSE_RATIO:
        return OpenAnswerResult(
            classification=AnswerClass.CLOSE,
            message=CLOSE_MESSAGE,
            ratio=ratio,
            matched_keywords=matched,
        )
    if ratio >= PARTIAL_RATIO:
        return OpenAnswerResult(
            classification=AnswerClass.PARTIAL,
            message=RETRY_MESSAGE,
            ratio=ratio,
            matched_keywords=matched,
        )
    return OpenAnswerResult(
        classification=AnswerClass.WRONG, ratio=ratio, matched_keywords=matched
    )


def grade_rapid_fire(submitted: str, answer: str) -> bool:
    """
    Quick lenient check used by the timed drill.

    Args:
        submitted: Student's raw text
        answer: Flashcard answer text

    Returns:
        True if the submission is contained in the answer, or the leading
        70% of the answer is contained in the submission
    """
    u = fold(submitted)
    a = fold(answer)
    prefix = answer.lower()[:math.floor(len(answer) * RAPID_FIRE_PREFIX_FRACTION)]
    return u in a or prefix in u
