"""
Tests for the pm_study command-line tool.

Drives the interactive loops with scripted input and collects what they
write, so no terminal is needed.
"""

import random
from unittest.mock import Mock

import pytest

import pm_study
from proofmaster.answer.feedback import ENCOURAGEMENT
from proofmaster.catalog import (
    ExerciseCatalog,
    Flashcard,
    FlashcardDeck,
    PracticeProblem,
)
from proofmaster.query import QueryOutcome


def scripted(*lines):
    """input() replacement that replays lines, then signals end of input."""
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return fake_input


@pytest.fixture
def out():
    return []


class TestStudyExercise:
    """Test the single-exercise loop"""

    def test_correct_answer_is_recorded(self, small_catalog, progress, out):
        exercise = small_catalog.by_id("1.1.A.1")
        action = pm_study.study_exercise(
            exercise, progress, input_fn=scripted("2"), write=out.append
        )

        assert action == "next"
        assert "✓ CORRECT" in out
        assert progress.is_mastered("1.1.A.1")

    def test_wrong_answer_shows_book_answer(self, small_catalog, progress, out):
        exercise = small_catalog.by_id("1.1.A.1")
        pm_study.study_exercise(exercise, progress, input_fn=scripted("3"), write=out.append)

        assert "✗ INCORRECT" in out
        assert "  Book answer: 2" in out
        record = progress.query("1.1.A.1")
        assert record.attempts == 1
        assert record.correct is False

    def test_blank_line_is_not_graded(self, small_catalog, progress, out):
        exercise = small_catalog.by_id("1.1.A.1")
        action = pm_study.study_exercise(
            exercise, progress, input_fn=scripted("   ", ":quit"), write=out.append
        )

        assert action == "quit"
        assert len(progress) == 0
        assert any(line.startswith("Type an answer") for line in out)

    def test_end_of_input_quits(self, small_catalog, progress, out):
        exercise = small_catalog.by_id("1.1.A.1")
        assert pm_study.study_exercise(
            exercise, progress, input_fn=scripted(), write=out.append
        ) == "quit"

    def test_hint_and_reveal(self, catalog, progress, out):
        exercise = catalog.by_id("1.1.A.2")
        pm_study.study_exercise(
            exercise, progress, input_fn=scripted(":hint", ":reveal", ":next"), write=out.append
        )

        assert f"Hint: {exercise.hint}" in out
        assert f"Answer: {exercise.answer}" in out
        assert any(line.startswith("Try it: https://www.wolframalpha.com/input?i=") for line in out)
        # Revealing never counts as an attempt
        assert progress.query("1.1.A.2") is None

    def test_missing_hint(self, small_catalog, progress, out):
        exercise = small_catalog.by_id("1.1.A.1")
        pm_study.study_exercise(
            exercise, progress, input_fn=scripted(":hint", ":quit"), write=out.append
        )
        assert "(No hint for this one)" in out

    def test_remix_replaces_question(self, catalog, progress, out):
        exercise = catalog.by_id("1.1.A.1")
        pm_study.study_exercise(
            exercise, progress, rng=random.Random(3),
            input_fn=scripted(":remix", ":quit"), write=out.append,
        )

        assert out[0].startswith("[1.1.A.1]\n")
        assert out[1].startswith("[1.1.A.1] (remixed)\n")

    def test_remix_of_fixed_exercise(self, catalog, progress, out):
        pm_study.study_exercise(
            catalog.by_id("1.1.A.2"), progress,
            input_fn=scripted(":remix", ":quit"), write=out.append,
        )
        assert "This exercise has no variants." in out


class TestTruthTablePrompt:
    """Test row-by-row truth-table entry"""

    def test_all_rows_correct(self, catalog, progress, out):
        exercise = catalog.by_id("2.2.A.4")
        action = pm_study.study_exercise(
            exercise, progress,
            input_fn=scripted(":table", "T", "f", "F", "F"), write=out.append,
        )

        assert action == "next"
        assert "Perfect! All 4 rows correct." in out
        assert progress.is_mastered("2.2.A.4")

    def test_wrong_row_is_listed(self, catalog, progress, out):
        exercise = catalog.by_id("2.2.A.4")
        pm_study.study_exercise(
            exercise, progress,
            input_fn=scripted(":table", "T", "T", "F", "F"), write=out.append,
        )

        assert "  ✗ row 2: T F -> F" in out
        assert "3/4 rows correct - review the highlighted rows." in out
        assert progress.query("2.2.A.4").correct is False

    def test_free_text_asks_for_table(self, catalog, progress, out):
        exercise = catalog.by_id("2.2.A.4")
        pm_study.study_exercise(
            exercise, progress, input_fn=scripted("T", ":quit"), write=out.append
        )

        assert out.count(pm_study.TABLE_PROMPT) == 2
        assert len(progress) == 0

    def test_invalid_row_value_is_asked_again(self, catalog, out):
        exercise = catalog.by_id("2.2.A.4")
        selections = pm_study.ask_truth_table(
            exercise, input_fn=scripted("maybe", "T", "", "F", "F"), write=out.append
        )

        assert selections == ["T", "?", "F", "F"]
        assert "  Enter T, F or ? (leave blank to skip)." in out

    def test_leaving_part_way(self, catalog, out):
        exercise = catalog.by_id("2.2.A.4")
        assert pm_study.ask_truth_table(
            exercise, input_fn=scripted("T", ":next"), write=out.append
        ) == ":next"


class TestRunStudy:
    """Test walking the catalog"""

    @staticmethod
    def shown_ids(out):
        return [line[1:].split("]")[0] for line in out if line.startswith("[")]

    def test_next_walks_in_order(self, small_catalog, progress, out):
        start = small_catalog.by_id("1.1.A.1")
        pm_study.run_study(
            small_catalog, progress, start,
            input_fn=scripted(":next", ":next", ":next", ":quit"), write=out.append,
        )
        assert self.shown_ids(out) == ["1.1.A.1", "1.1.B.1", "1.2.A.1", "1.1.A.1"]

    def test_prev_wraps_to_last(self, small_catalog, progress, out):
        start = small_catalog.by_id("1.1.A.1")
        pm_study.run_study(
            small_catalog, progress, start,
            input_fn=scripted(":prev", ":quit"), write=out.append,
        )
        assert self.shown_ids(out) == ["1.1.A.1", "1.2.A.1"]

    def test_random_skips_mastered(self, small_catalog, progress, out):
        progress.record("1.1.A.1", True)
        progress.record("1.2.A.1", True)
        pm_study.run_random(
            small_catalog, progress, rng=random.Random(0),
            input_fn=scripted(":next", ":quit"), write=out.append,
        )
        assert self.shown_ids(out) == ["1.1.B.1", "1.1.B.1"]


class TestRunPractice:
    """Test open-answer practice"""

    @pytest.fixture
    def practice_catalog(self):
        problem = PracticeProblem(
            question="What is A ∩ Ā?",
            answer="the empty set",
            keywords=["empty", "∅"],
            hint="Nothing is both in A and outside A.",
            explanation="A ∩ Ā = ∅",
        )
        return ExerciseCatalog([], [], practice=[problem])

    def test_wrong_then_correct(self, practice_catalog, out):
        pm_study.run_practice(
            practice_catalog, rng=random.Random(0),
            input_fn=scripted("blue", "the empty set"), write=out.append,
        )

        assert "Hint: Nothing is both in A and outside A." in out
        assert any(line in ENCOURAGEMENT for line in out)
        assert out[-1] == "A ∩ Ā = ∅"

    def test_skip_shows_answer(self, practice_catalog, out):
        pm_study.run_practice(
            practice_catalog, input_fn=scripted("", ":next"), write=out.append
        )

        assert "Type an answer, :next to skip or :quit." in out
        assert out[-1] == "Answer: the empty set"

    def test_single_problem_from_bundled_set(self, catalog, out):
        pm_study.run_practice(
            catalog, input_fn=scripted(":quit"), write=out.append, index=2
        )
        assert out == [f"\nProblem 3: {catalog.practice[2].question}"]


class TestRunFlashcards:
    """Test the flashcard drill"""

    @pytest.fixture
    def deck(self):
        cards = (
            Flashcard(id="d.1", deck="d", question="P ∨ ¬P", answer="T", law="Excluded middle"),
            Flashcard(id="d.2", deck="d", question="P ∧ ¬P", answer="F"),
        )
        return FlashcardDeck(key="d", title="Tiny deck", cards=cards)

    def test_full_run(self, deck, out):
        run = pm_study.run_flashcards(
            deck, rng=random.Random(0),
            input_fn=scripted("", "y", "", "n"), write=out.append,
        )

        assert run.done
        assert len(run.known) == 1
        assert len(run.review) == 1
        assert out[-1] == "\nKnown: 1  To review: 1"
        assert "  Law: Excluded middle" in out

    def test_quit_part_way(self, deck, out):
        run = pm_study.run_flashcards(
            deck, input_fn=scripted("", "q"), write=out.append
        )

        assert not run.done
        assert run.position == 0


class TestRunQuery:
    """Test the query command"""

    def test_result_is_printed(self, out):
        client = Mock()
        client.ask.return_value = QueryOutcome(result="{∅, {1}}")

        assert pm_study.run_query(client, "power set of {1}", write=out.append) == 0
        assert out == ["{∅, {1}}"]

    def test_error_is_printed(self, out):
        client = Mock()
        client.ask.return_value = QueryOutcome(error="Proxy error: refused")

        assert pm_study.run_query(client, "x", write=out.append) == 1
        assert out == ["Proxy error: refused"]

    def test_blank_query(self, out):
        client = Mock()
        client.ask.return_value = None

        assert pm_study.run_query(client, "  ", write=out.append) == 2
        assert out == ["Enter a query."]


class TestMain:
    """Test argument handling"""

    def test_sections(self, out):
        assert pm_study.main(["sections"], write=out.append) == 0
        assert any(line.startswith("  1.1   Introduction to Sets") for line in out)

    def test_search(self, out):
        assert pm_study.main(["search", "2.4.A"], write=out.append) == 0
        assert [line.split()[0] for line in out] == ["2.4.A.1", "2.4.A.2"]

    def test_search_without_match(self, out):
        pm_study.main(["search", "zzzz"], write=out.append)
        assert out == ["No exercises match 'zzzz'."]

    def test_unknown_exercise(self, out):
        assert pm_study.main(["study", "9.9.Z.1"], write=out.append) == 1
        assert out == ["Error: Exercise not found: 9.9.Z.1"]

    def test_section_without_exercises(self, out):
        assert pm_study.main(["study", "--section", "1.7"], write=out.append) == 1
        assert out == ["Error: section '1.7' has no exercises"]

    def test_study_prints_progress(self, out):
        code = pm_study.main(
            ["study", "1.2.A.1"], input_fn=scripted(":quit"), write=out.append
        )

        assert code == 0
        assert any(line.startswith("Mastered: 0/") for line in out)

    def test_unknown_deck(self, out):
        assert pm_study.main(["flashcards", "page-9"], write=out.append) == 1
        assert out[0].startswith("Error: unknown deck 'page-9'")

    def test_practice_number_out_of_range(self, out):
        assert pm_study.main(["practice", "--problem", "99"], write=out.append) == 1
        assert out[0].startswith("Error: no practice problem 99")
