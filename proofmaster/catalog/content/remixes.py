"""
Variant generators for the remixable exercises.

Each generator takes a random.Random and returns a RemixVariant.
"""

from __future__ import annotations

import random

from ..models import RemixVariant
from ..remix import rand_choice, rand_int


def linear_set_listing(rng: random.Random) -> RemixVariant:
    """{ax + b : x in Z} listed around x = 0."""
    a = rand_choice([2, 3, 4, 6, 7], rng)
    b = rand_int(-4, 4, rng)
    sign = "+" if b >= 0 else "−"
    values = ", ".join(str(a * k + b) for k in range(-2, 3))
    return RemixVariant(
        question=f"Write {{{a}x {sign} {abs(b)} : x ∈ ℤ}} by listing elements.",
        answer=f"{{..., {values}, ...}}",
        external_query_hint=f"{a}x{'+' if b >= 0 else ''}{b} for x=-2,-1,0,1,2",
    )


def bounded_integers_listing(rng: random.Random) -> RemixVariant:
    n = rand_choice([4, 5, 6, 7, 8], rng)
    elements = ", ".join(str(i) for i in range(-(n - 1), n))
    return RemixVariant(
        question=f"Write {{x ∈ ℤ : |x| < {n}}} by listing elements.",
        answer=f"{{{elements}}}",
        external_query_hint=f"integers x with |x| < {n}",
    )


def cardinality_of_size(rng: random.Random) -> RemixVariant:
    n = rand_choice([2, 3, 4, 5], rng)
    return RemixVariant(
        question=f"A set has {n} elements. What is its cardinality?",
        answer=f"{n}",
        external_query_hint=f"cardinality {n}",
    )


def bounded_integers_count(rng: random.Random) -> RemixVariant:
    n = rand_choice([5, 6, 7, 8, 10, 12], rng)
    return RemixVariant(
        question=f"Find |{{x ∈ ℤ : |x| < {n}}}|.",
        answer=f"{2 * n - 1}",
        external_query_hint=f"number of integers x with |x| < {n}",
    )


def subsets_listing(rng: random.Random) -> RemixVariant:
    n = rand_choice([2, 3], rng)
    members = ",".join(str(i) for i in range(1, n + 1))
    return RemixVariant(
        question=f"List all subsets of {{{members}}}.",
        answer=f"2^{n} = {2 ** n} subsets total",
        external_query_hint=f"subsets of {{{members}}}",
    )


def power_set_size(rng: random.Random) -> RemixVariant:
    n = rand_choice([1, 2, 3], rng)
    return RemixVariant(
        question=f"How many elements does 𝒫({{1,...,{n}}}) have?",
        answer=f"2^{n} = {2 ** n}",
        external_query_hint=f"2^{n}",
    )
