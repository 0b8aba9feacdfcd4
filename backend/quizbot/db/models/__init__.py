from quizbot.db.models.user import User
from quizbot.db.models.quiz import Quiz

__all__ = [
    "User",
    "Quiz",
]
