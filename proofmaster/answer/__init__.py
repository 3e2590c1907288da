"""
proofmaster.answer - Answer evaluation for the study core

Provides the textual grading protocols:
- normalize/fold: comparison keys for free-text answers
- grade_exercise: lenient binary check for catalog exercises
- grade_open_answer: correct/close/partial/wrong for practice problems
- grade_truth_table: per-row truth-table grading
- grade_rapid_fire: quick check for the timed drill
"""

from .feedback import Feedback, feedback_for
from .grading import (
    CLOSE_MESSAGE,
    EXERCISE_PREFIX_LENGTH,
    RETRY_MESSAGE,
    check_exercise,
    grade_exercise,
    grade_open_answer,
    grade_rapid_fire,
    keyword_ratio,
)
from .normalize import fold, normalize
from .result import (
    AnswerClass,
    ExerciseResult,
    OpenAnswerResult,
    TruthTableResult,
    TruthTableRowResult,
)
from .truth_table import enumerate_assignments, grade_truth_table

__all__ = [
    "normalize",
    "fold",
    "grade_exercise",
    "check_exercise",
    "grade_open_answer",
    "grade_rapid_fire",
    "keyword_ratio",
    "grade_truth_table",
    "enumerate_assignments",
    "feedback_for",
    "Feedback",
    "AnswerClass",
    "ExerciseResult",
    "OpenAnswerResult",
    "TruthTableResult",
    "TruthTableRowResult",
    "EXERCISE_PREFIX_LENGTH",
    "CLOSE_MESSAGE",
    "RETRY_MESSAGE",
]
