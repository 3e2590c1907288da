"""
Randomized variants of catalog exercises.

A remix swaps in a freshly generated question and answer while keeping the
exercise's identity (id, section, part, kind), so progress recorded against
a remixed exercise lands on the stored exercise it came from.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, TypeVar

from .models import Exercise, RemixableExercise

logger = logging.getLogger(__name__)

T = TypeVar("T")

_rng = random.Random()


def rand_int(a: int, b: int, rng: Optional[random.Random] = None) -> int:
    """Uniform integer in [a, b], both ends inclusive."""
    return (rng or _rng).randint(a, b)


def rand_choice(seq: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Uniform element of a non-empty sequence."""
    return (rng or _rng).choice(seq)


def is_remixable(exercise: Exercise) -> bool:
    return isinstance(exercise, RemixableExercise)


def remix(exercise: Exercise, rng: Optional[random.Random] = None) -> Exercise:
    """
    Produce a randomized variant of an exercise.

    Args:
        exercise: Stored (or previously remixed) exercise
        rng: Random source passed to the generator (module default if None)

    Returns:
        The exercise itself when it has no generator, otherwise a copy with
        question, answer, external_query_hint (and hint, when the variant
        carries one) replaced and remixed set
    """
    if not isinstance(exercise, RemixableExercise):
        return exercise

    variant = exercise.generator(rng or _rng)
    update = {
        "question": variant.question,
        "answer": variant.answer,
        "external_query_hint": variant.external_query_hint,
        "remixed": True,
    }
    if variant.hint is not None:
        update["hint"] = variant.hint

    logger.debug("remixed %s", exercise.id)
    return exercise.model_copy(update=update)
