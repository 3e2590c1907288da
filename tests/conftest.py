"""
Shared pytest fixtures for the study core tests.

Provides:
- The bundled catalog and a fresh progress store
- A seeded random source for reproducible selection and remixes
- A small hand-built catalog for navigation and aggregate checks
"""

import random

import pytest

from proofmaster.catalog import (
    Exercise,
    ExerciseCatalog,
    ExerciseKind,
    PracticeProblem,
    Section,
    default_catalog,
)
from proofmaster.progress import ProgressStore


@pytest.fixture(scope="session")
def catalog() -> ExerciseCatalog:
    """The bundled Book of Proof catalog."""
    return default_catalog()


@pytest.fixture
def progress() -> ProgressStore:
    return ProgressStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def small_catalog() -> ExerciseCatalog:
    """Three exercises over two sections, A/B parts in the first."""
    sections = [
        Section(key="1.1", title="Introduction to Sets", page=3),
        Section(key="1.2", title="The Cartesian Product", page=8),
        Section(key="9.9", title="Empty Section", page=99),
    ]
    exercises = [
        Exercise(id="1.1.A.1", section="1.1", part="A", question="|{1,2}| = ?", answer="2"),
        Exercise(id="1.1.B.1", section="1.1", part="B", question="Is 1 ∈ ℕ?", answer="Yes",
                 kind=ExerciseKind.TFQ),
        Exercise(id="1.2.A.1", section="1.2", part="A", question="|{1,2} × {3}| = ?", answer="2"),
    ]
    return ExerciseCatalog(sections, exercises)


@pytest.fixture
def empty_set_problem() -> PracticeProblem:
    """Practice problem used for the open-answer classification checks."""
    return PracticeProblem(
        question="What is A ∩ Ā?",
        answer="the empty set",
        keywords=["empty", "set", "∅", "nothing", "none"],
        partial_hints={"universal": "That's A ∪ Ā. Intersection keeps only shared elements."},
    )
