"""
proofmaster.catalog - Study content and the exercise index

- models: sections, exercises, practice problems, flashcards, matching pairs
- ExerciseCatalog: lookup, grouping, navigation and random selection
- remix: randomized variants of remixable exercises
"""

from .catalog import ExerciseCatalog, ExerciseNotFound, default_catalog
from .models import (
    Exercise,
    ExerciseKind,
    Flashcard,
    FlashcardDeck,
    MatchingPair,
    PracticeProblem,
    RemixableExercise,
    RemixVariant,
    Section,
    TruthTable,
    TruthTableExercise,
)
from .remix import is_remixable, rand_choice, rand_int, remix

__all__ = [
    "ExerciseCatalog",
    "ExerciseNotFound",
    "default_catalog",
    "Exercise",
    "ExerciseKind",
    "Flashcard",
    "FlashcardDeck",
    "MatchingPair",
    "PracticeProblem",
    "RemixableExercise",
    "RemixVariant",
    "Section",
    "TruthTable",
    "TruthTableExercise",
    "is_remixable",
    "rand_choice",
    "rand_int",
    "remix",
]
