"""
Drill engines: flashcard runs, the matching game and rapid-fire rounds.

Each engine is a small state machine over catalog content. They hold no
references to sessions or transports; the API and the CLI drive them.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from proofmaster.answer import grade_rapid_fire
from proofmaster.catalog.models import Flashcard, FlashcardDeck, MatchingPair
from proofmaster.progress import percentage

logger = logging.getLogger(__name__)

MATCHING_PAIRS_PER_GAME = 10
RAPID_FIRE_QUESTIONS = 20
RAPID_FIRE_SECONDS = 30
TIMED_OUT = "(timed out)"


def shuffled(items: Sequence, rng: Optional[random.Random] = None) -> list:
    """Return a shuffled copy of items."""
    copy = list(items)
    (rng or random).shuffle(copy)
    return copy


class FlashcardRun:
    """
    One pass through a shuffled deck.

    Every card is marked either known or for review; the run is done after
    the last card is marked.
    """

    def __init__(self, deck: FlashcardDeck, rng: Optional[random.Random] = None):
        self.deck = deck
        self._rng = rng
        self.cards: list[Flashcard] = shuffled(deck.cards, rng)
        self.position = 0
        self.known: set[str] = set()
        self.review: set[str] = set()

    @property
    def done(self) -> bool:
        return self.position >= len(self.cards)

    @property
    def current(self) -> Optional[Flashcard]:
        return None if self.done else self.cards[self.position]

    def _mark(self, bucket: set[str]) -> None:
        card = self.current
        if card is None:
            raise ValueError("flashcard run is finished")
        bucket.add(card.id)
        self.position += 1

    def mark_known(self) -> None:
        self._mark(self.known)

    def mark_review(self) -> None:
        self._mark(self.review)

    def restart(self) -> None:
        self.cards = shuffled(self.cards, self._rng)
        self.position = 0
        self.known.clear()
        self.review.clear()


class MatchingGame:
    """
    Match each prompt to its answer from a shared bank.

    A correct match removes the answer from the bank; a wrong one counts as
    an error and changes nothing else.
    """

    def __init__(
        self,
        pairs: Sequence[MatchingPair],
        count: int = MATCHING_PAIRS_PER_GAME,
        rng: Optional[random.Random] = None,
    ):
        self.pairs: list[MatchingPair] = shuffled(pairs, rng)[:count]
        self.prompts: list[str] = shuffled([p.prompt for p in self.pairs], rng)
        self.bank: list[str] = shuffled([p.answer for p in self.pairs], rng)
        self.matches: dict[str, str] = {}
        self.errors = 0
        self._answers = {p.prompt: p.answer for p in self.pairs}

    def match(self, prompt: str, answer: str) -> bool:
        """
        Try to pair a prompt with an answer from the bank.

        Raises:
            ValueError: Unknown or already matched prompt, or an answer that
                is not in the bank
        """
        if prompt not in self._answers:
            raise ValueError(f"unknown prompt: {prompt}")
        if prompt in self.matches:
            raise ValueError(f"prompt already matched: {prompt}")
        if answer not in self.bank:
            raise ValueError(f"answer not in bank: {answer}")

        if self._answers[prompt] == answer:
            self.matches[prompt] = answer
            self.bank.remove(answer)
            return True
        self.errors += 1
        return False

    @property
    def score(self) -> int:
        return len(self.matches)

    @property
    def done(self) -> bool:
        return len(self.matches) == len(self.pairs)

    @property
    def accuracy(self) -> int:
        return percentage(len(self.pairs), max(len(self.pairs) + self.errors, 1))


class RapidFireResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    given: str
    correct: bool


class RapidFireRound:
    """
    Timed quiz over flashcards.

    Each question has its own time limit, measured from when it was shown.
    An answer given after the limit is recorded as timed out and wrong.
    """

    def __init__(
        self,
        cards: Sequence[Flashcard],
        questions: int = RAPID_FIRE_QUESTIONS,
        seconds: float = RAPID_FIRE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.questions: list[Flashcard] = shuffled(cards, rng)[:questions]
        self.seconds = seconds
        self._clock = clock
        self.position = 0
        self.results: list[RapidFireResult] = []
        self._shown_at = clock()

    @property
    def done(self) -> bool:
        return self.position >= len(self.questions)

    @property
    def current(self) -> Optional[Flashcard]:
        return None if self.done else self.questions[self.position]

    @property
    def answered(self) -> bool:
        """Whether the current question already has a result."""
        return len(self.results) > self.position

    def time_left(self) -> float:
        return max(self.seconds - (self._clock() - self._shown_at), 0.0)

    def answer(self, text: str) -> RapidFireResult:
        card = self.current
        if card is None:
            raise ValueError("rapid-fire round is finished")
        if self.answered:
            raise ValueError("question already answered")

        if self.time_left() <= 0:
            result = RapidFireResult(
                question=card.question, answer=card.answer, given=TIMED_OUT, correct=False
            )
        else:
            result = RapidFireResult(
                question=card.question,
                answer=card.answer,
                given=text,
                correct=grade_rapid_fire(text, card.answer),
            )
        self.results.append(result)
        logger.debug("rapid fire %s correct=%s", card.id, result.correct)
        return result

    def next(self) -> Optional[Flashcard]:
        """Advance to the next question; an unanswered one counts as timed out."""
        card = self.current
        if card is None:
            raise ValueError("rapid-fire round is finished")
        if not self.answered:
            self.results.append(
                RapidFireResult(
                    question=card.question, answer=card.answer, given=TIMED_OUT, correct=False
                )
            )
        self.position += 1
        self._shown_at = self._clock()
        return self.current

    @property
    def score(self) -> int:
        return sum(1 for r in self.results if r.correct)

    @property
    def accuracy(self) -> int:
        return percentage(self.score, len(self.results))
