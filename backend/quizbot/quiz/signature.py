"""
Quiz signatures.

A signature is a normalized concatenation of a quiz's content, used only
as an equality key when checking for duplicate saves. It is not a hash:
two quizzes that differ only in letter case or surrounding whitespace
share a signature, while reordering questions or options changes it.

    <subject>::<q1>||<q2>||...
    where each <qN> = question|~|ANSWER|~|opt1|~|opt2|~|opt3|~|opt4
"""

from __future__ import annotations

from typing import Any, Mapping, NewType, Union

from quizbot.quiz.payload import Quiz

QuizSignature = NewType("QuizSignature", str)

SUBJECT_SEP  = "::"
QUESTION_SEP = "||"
FIELD_SEP    = "|~|"


def _norm(value: Any) -> str:
    return str(value or "").strip().lower()


def _question_key(question: Any) -> str:
    if isinstance(question, Mapping):
        text = question.get("question")
        answer = question.get("answer")
        options = question.get("options") or []
    else:
        text, answer, options = question.question, question.answer, question.options

    fields = [_norm(text), str(answer or "").strip().upper()]
    fields.extend(_norm(o) for o in options)
    return FIELD_SEP.join(fields)


def compute_signature(quiz: Union[Quiz, Mapping[str, Any]]) -> QuizSignature:
    """Return the signature of *quiz* (a Quiz or a stored {subject, questions} row)."""
    if isinstance(quiz, Mapping):
        subject = quiz.get("subject")
        questions = quiz.get("questions") or []
    else:
        subject, questions = quiz.subject, quiz.questions

    body = QUESTION_SEP.join(_question_key(q) for q in questions)
    return QuizSignature(f"{_norm(subject)}{SUBJECT_SEP}{body}")
