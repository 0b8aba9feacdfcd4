"""
Answer session for the active quiz.

An AnswerSession maps a 0-based question index to the letter the user
picked. The first pick for an index is final: later picks are ignored.
Every transition returns a new session; nothing is mutated in place.

Public API
----------
    new_session() -> AnswerSession
    select_answer(session, index, letter) -> AnswerSession
    score(session, quiz) -> int
    is_complete(session, quiz) -> bool
    answered_count(session) -> int
    option_state(session, index, letter, correct) -> str
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from quizbot.quiz.payload import Quiz

AnswerSession = Mapping[int, str]

_EMPTY: AnswerSession = MappingProxyType({})


def new_session() -> AnswerSession:
    return _EMPTY


def select_answer(session: AnswerSession, index: int, letter: str) -> AnswerSession:
    assert index >= 0, f"question index must be non-negative, got {index}"
    if index in session:
        return session
    updated = dict(session)
    updated[index] = letter
    return MappingProxyType(updated)


def _check_bounds(session: AnswerSession, quiz: Quiz) -> None:
    total = len(quiz.questions)
    for index in session:
        assert 0 <= index < total, f"answer index {index} outside quiz of {total}"


def score(session: AnswerSession, quiz: Quiz) -> int:
    """Number of locked answers that match the quiz's answer letters."""
    _check_bounds(session, quiz)
    return sum(
        1
        for index, question in enumerate(quiz.questions)
        if session.get(index) == question.answer
    )


def is_complete(session: AnswerSession, quiz: Quiz) -> bool:
    _check_bounds(session, quiz)
    return all(index in session for index in range(len(quiz.questions)))


def answered_count(session: AnswerSession) -> int:
    return len(session)


def option_state(session: AnswerSession, index: int, letter: str, correct: str) -> str:
    """
    Display state of one option button.

    "idle"    – question not answered yet
    "correct" – the correct option, revealed once answered
    "wrong"   – the option the user picked, when it is not the correct one
    "muted"   – any other option of an answered question
    """
    selected = session.get(index)
    if selected is None:
        return "idle"
    if letter == correct:
        return "correct"
    if letter == selected:
        return "wrong"
    return "muted"
