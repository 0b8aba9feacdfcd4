"""
Quiz payload types.

Public API
----------
    Question, Quiz              – immutable value objects
    parse_quiz(payload) -> Quiz – validate an untrusted mapping
    QuizValidationError         – raised by parse_quiz

Payload shape (LLM output, request bodies, stored rows):
{
    "subject":   str,
    "questions": [
        {"question": str, "options": [str, str, str, str], "answer": "A"|"B"|"C"|"D"}
    ]
}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

LETTERS = ("A", "B", "C", "D")


class QuizValidationError(ValueError):
    pass


@dataclass(frozen=True)
class Question:
    question: str
    options: Tuple[str, str, str, str]
    answer: str

    def option_for(self, letter: str) -> str:
        return self.options[LETTERS.index(letter)]

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options":  list(self.options),
            "answer":   self.answer,
        }


@dataclass(frozen=True)
class Quiz:
    subject: str
    questions: Tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.questions)

    def to_dict(self) -> dict:
        return {
            "subject":   self.subject,
            "questions": [q.to_dict() for q in self.questions],
        }


# ── Validation ────────────────────────────────────────────────────────────────

def _parse_question(raw: Any, position: int) -> Question:
    if not isinstance(raw, Mapping):
        raise QuizValidationError(f"question {position} must be an object")

    text = raw.get("question")
    if not isinstance(text, str) or not text.strip():
        raise QuizValidationError(f"question {position} has no text")

    options = raw.get("options")
    if (
        not isinstance(options, (list, tuple))
        or len(options) != len(LETTERS)
        or not all(isinstance(o, str) for o in options)
    ):
        raise QuizValidationError(
            f"question {position} must have exactly {len(LETTERS)} text options"
        )

    answer = raw.get("answer")
    answer = answer.strip().upper() if isinstance(answer, str) else ""
    if answer not in LETTERS:
        raise QuizValidationError(
            f"question {position} answer must be one of {', '.join(LETTERS)}"
        )

    return Question(question=text, options=tuple(options), answer=answer)


def parse_quiz(payload: Any) -> Quiz:
    """
    Validate *payload* and return a Quiz.

    The answer letter is upper-cased; every other string is kept as
    received so the stored quiz reads exactly like the generated one.
    Raises QuizValidationError on any malformed field.
    """
    if not isinstance(payload, Mapping):
        raise QuizValidationError("quiz payload must be an object")

    subject = payload.get("subject")
    if not isinstance(subject, str) or not subject.strip():
        raise QuizValidationError("subject is required")

    questions = payload.get("questions")
    if not isinstance(questions, (list, tuple)) or not questions:
        raise QuizValidationError("questions must be a non-empty list")

    return Quiz(
        subject=subject,
        questions=tuple(
            _parse_question(q, i) for i, q in enumerate(questions, start=1)
        ),
    )
