"""Tests for practice feedback wording."""

import random

from proofmaster.answer import AnswerClass, OpenAnswerResult, feedback_for
from proofmaster.answer.feedback import (
    CLOSE_MESSAGES,
    ENCOURAGEMENT,
    PARTIAL_FALLBACK,
    WRONG_MESSAGES,
)


def test_correct_picks_encouragement():
    feedback = feedback_for(OpenAnswerResult(classification=AnswerClass.CORRECT), random.Random(0))
    assert feedback.text in ENCOURAGEMENT
    assert not feedback.reveal_hint


def test_close_appends_result_message():
    result = OpenAnswerResult(classification=AnswerClass.CLOSE, message="Mind the braces.")
    feedback = feedback_for(result, random.Random(0))
    assert feedback.text.endswith(" Mind the braces.")
    assert feedback.text[: -len(" Mind the braces.")] in CLOSE_MESSAGES


def test_partial_uses_message_or_fallback():
    with_message = OpenAnswerResult(classification=AnswerClass.PARTIAL, message="Flip ∀ to ∃.")
    assert feedback_for(with_message).text == "Flip ∀ to ∃."

    bare = OpenAnswerResult(classification=AnswerClass.PARTIAL)
    assert feedback_for(bare).text == PARTIAL_FALLBACK


def test_wrong_reveals_hint():
    feedback = feedback_for(OpenAnswerResult(classification=AnswerClass.WRONG), random.Random(3))
    assert feedback.text in WRONG_MESSAGES
    assert feedback.reveal_hint
    assert feedback.classification is AnswerClass.WRONG
