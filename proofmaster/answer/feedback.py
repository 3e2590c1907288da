"""
Display feedback for practice answers.

Turns an OpenAnswerResult into the line shown to the student. The wording
pools are picked from at random so repeated attempts do not read the same.
"""

from __future__ import annotations

import random
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .result import AnswerClass, OpenAnswerResult

ENCOURAGEMENT = [
    "Nailed it! That's exactly right.",
    "Perfect, textbook answer.",
    "Yes! That's the one.",
    "Correct!",
    "Spot on!",
]
CLOSE_MESSAGES = [
    "So close! One more try?",
    "Really close! Check notation.",
    "Nearly perfect, one small thing off.",
]
WRONG_MESSAGES = [
    "Not quite. Want a hint?",
    "Hmm, that's not it. Want me to guide you?",
    "Keep thinking. Here's a nudge...",
]
PARTIAL_FALLBACK = "You've got part of it."


class Feedback(BaseModel):
    """What the student sees after a practice submission."""

    model_config = ConfigDict(frozen=True)

    classification: AnswerClass
    text: str
    reveal_hint: bool = False


def feedback_for(result: OpenAnswerResult, rng: Optional[random.Random] = None) -> Feedback:
    """
    Build display feedback for a classified practice answer.

    Args:
        result: Protocol B classification
        rng: Random source for picking wording (module random by default)

    Returns:
        Feedback; reveal_hint is set for wrong answers
    """
    rng = rng or random
    cls = result.classification
    if cls is AnswerClass.CORRECT:
        return Feedback(classification=cls, text=rng.choice(ENCOURAGEMENT))
    if cls is AnswerClass.CLOSE:
        text = rng.choice(CLOSE_MESSAGES)
        if result.message:
            text = f"{text} {result.message}"
        return Feedback(classification=cls, text=text)
    if cls is AnswerClass.PARTIAL:
        return Feedback(classification=cls, text=result.message or PARTIAL_FALLBACK)
    return Feedback(classification=cls, text=rng.choice(WRONG_MESSAGES), reveal_hint=True)
