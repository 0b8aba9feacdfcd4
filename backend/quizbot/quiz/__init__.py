from quizbot.quiz.payload import LETTERS, Question, Quiz, QuizValidationError, parse_quiz
from quizbot.quiz.signature import QuizSignature, compute_signature
from quizbot.quiz.guard import find_duplicate, is_duplicate
from quizbot.quiz.session import (
    AnswerSession,
    answered_count,
    is_complete,
    new_session,
    option_state,
    score,
    select_answer,
)

__all__ = [
    "LETTERS",
    "Question",
    "Quiz",
    "QuizValidationError",
    "parse_quiz",
    "QuizSignature",
    "compute_signature",
    "find_duplicate",
    "is_duplicate",
    "AnswerSession",
    "answered_count",
    "is_complete",
    "new_session",
    "option_state",
    "score",
    "select_answer",
]
