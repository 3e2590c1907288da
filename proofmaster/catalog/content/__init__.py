"""
Static study content from Hammack, Book of Proof (Ed. 3.3), sections 1.1 to 2.6.
"""

from .exercises import EXERCISES
from .flashcards import FLASHCARD_DECKS
from .matching import MATCHING_PAIRS
from .practice import PRACTICE_PROBLEMS
from .sections import SECTIONS

__all__ = [
    "SECTIONS",
    "EXERCISES",
    "PRACTICE_PROBLEMS",
    "FLASHCARD_DECKS",
    "MATCHING_PAIRS",
]
