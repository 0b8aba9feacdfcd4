"""Duplicate detection for quizzes about to be saved."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from quizbot.quiz.signature import compute_signature
from quizbot.quiz.payload import Quiz

QuizLike = Union[Quiz, Mapping[str, Any]]


def find_duplicate(candidate: QuizLike, existing: Iterable[QuizLike]) -> Optional[QuizLike]:
    """Return the first element of *existing* whose signature matches *candidate*."""
    signature = compute_signature(candidate)
    for item in existing:
        if compute_signature(item) == signature:
            return item
    return None


def is_duplicate(candidate: QuizLike, existing: Iterable[QuizLike]) -> bool:
    """
    True if any quiz in *existing* has the same signature as *candidate*.

    *existing* is expected to be already narrowed to the owning user and
    subject by the caller; this function does no I/O.
    """
    return find_duplicate(candidate, existing) is not None
