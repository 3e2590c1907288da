"""
Tests for the drill engines.
"""

import random

import pytest

from proofmaster.catalog import Flashcard, FlashcardDeck, MatchingPair
from proofmaster.drills import TIMED_OUT, FlashcardRun, MatchingGame, RapidFireRound


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def make_cards(n: int) -> list[Flashcard]:
    return [
        Flashcard(id=f"d.{i}", deck="d", question=f"q{i}", answer=f"answer number {i}")
        for i in range(n)
    ]


@pytest.fixture
def deck() -> FlashcardDeck:
    return FlashcardDeck(key="d", title="Deck", cards=tuple(make_cards(3)))


@pytest.fixture
def pairs() -> list[MatchingPair]:
    return [MatchingPair(prompt=f"p{i}", answer=f"a{i}") for i in range(12)]


class TestFlashcardRun:
    def test_marks_every_card(self, deck):
        run = FlashcardRun(deck, random.Random(0))
        assert {c.id for c in run.cards} == {"d.0", "d.1", "d.2"}

        run.mark_known()
        run.mark_review()
        run.mark_known()

        assert run.done
        assert run.current is None
        assert len(run.known) == 2
        assert len(run.review) == 1

    def test_marking_after_done_raises(self, deck):
        run = FlashcardRun(deck)
        for _ in range(3):
            run.mark_known()
        with pytest.raises(ValueError):
            run.mark_known()

    def test_restart(self, deck):
        run = FlashcardRun(deck, random.Random(0))
        run.mark_known()
        run.restart()
        assert run.position == 0
        assert not run.known
        assert not run.done


class TestMatchingGame:
    def test_uses_count_pairs(self, pairs):
        game = MatchingGame(pairs, count=10, rng=random.Random(0))
        assert len(game.pairs) == 10
        assert sorted(game.bank) == sorted(p.answer for p in game.pairs)
        assert sorted(game.prompts) == sorted(p.prompt for p in game.pairs)

    def test_correct_match_removes_answer(self, pairs):
        game = MatchingGame(pairs, count=3, rng=random.Random(0))
        pair = game.pairs[0]
        assert game.match(pair.prompt, pair.answer) is True
        assert pair.answer not in game.bank
        assert game.matches == {pair.prompt: pair.answer}

    def test_wrong_match_counts_error(self, pairs):
        game = MatchingGame(pairs, count=3, rng=random.Random(0))
        first, second = game.pairs[0], game.pairs[1]
        assert game.match(first.prompt, second.answer) is False
        assert game.errors == 1
        assert second.answer in game.bank

    def test_accuracy(self, pairs):
        game = MatchingGame(pairs, count=2, rng=random.Random(0))
        first, second = game.pairs
        game.match(first.prompt, second.answer)
        game.match(first.prompt, first.answer)
        game.match(second.prompt, second.answer)

        assert game.done
        # round(100 * 2 / 3)
        assert game.accuracy == 67

    def test_invalid_moves(self, pairs):
        game = MatchingGame(pairs, count=2, rng=random.Random(0))
        first = game.pairs[0]
        game.match(first.prompt, first.answer)

        with pytest.raises(ValueError):
            game.match(first.prompt, first.answer)
        with pytest.raises(ValueError):
            game.match("nope", first.answer)
        with pytest.raises(ValueError):
            game.match(game.pairs[1].prompt, "not in bank")

    def test_bundled_pairs(self, catalog):
        game = MatchingGame(catalog.matching, rng=random.Random(5))
        assert len(game.pairs) == 10
        for pair in list(game.pairs):
            assert game.match(pair.prompt, pair.answer)
        assert game.done
        assert game.accuracy == 100


class TestRapidFireRound:
    def test_grades_answers(self):
        clock = FakeClock()
        round_ = RapidFireRound(make_cards(3), questions=2, seconds=30, clock=clock,
                                rng=random.Random(0))
        assert len(round_.questions) == 2

        card = round_.current
        result = round_.answer(card.answer.upper())
        assert result.correct
        assert round_.score == 1

        round_.next()
        result = round_.answer("no idea")
        assert not result.correct

        round_.next()
        assert round_.done
        assert round_.accuracy == 50

    def test_late_answer_times_out(self):
        clock = FakeClock()
        round_ = RapidFireRound(make_cards(2), questions=1, seconds=30, clock=clock)
        clock.now = 31.0

        result = round_.answer(round_.current.answer)
        assert result.given == TIMED_OUT
        assert not result.correct

    def test_timer_restarts_per_question(self):
        clock = FakeClock()
        round_ = RapidFireRound(make_cards(2), questions=2, seconds=30, clock=clock)
        clock.now = 20.0
        round_.answer("x")
        round_.next()
        assert round_.time_left() == 30.0
        clock.now = 45.0
        assert round_.answer(round_.current.answer).correct

    def test_skipping_counts_as_timed_out(self):
        round_ = RapidFireRound(make_cards(2), questions=2, clock=FakeClock())
        round_.next()
        assert round_.results[0].given == TIMED_OUT

    def test_one_answer_per_question(self):
        round_ = RapidFireRound(make_cards(2), questions=2, clock=FakeClock())
        round_.answer("x")
        with pytest.raises(ValueError):
            round_.answer("y")

    def test_finished_round_rejects_moves(self):
        round_ = RapidFireRound(make_cards(1), questions=1, clock=FakeClock())
        round_.next()
        with pytest.raises(ValueError):
            round_.answer("x")
        with pytest.raises(ValueError):
            round_.next()
