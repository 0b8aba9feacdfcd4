import uuid
from datetime import datetime, timezone
from quizbot.extensions import db


class Quiz(db.Model):
    """
    A quiz saved to a user's library.

    `signature` holds the normalized content key computed by
    quizbot.quiz.compute_signature; `signature_hash` is its SHA-256 hex
    digest. The (user_id, signature_hash) constraint rejects a second copy
    saved concurrently from another session while keeping index entries
    a fixed size.
    """
    __tablename__ = "quizzes"
    __table_args__ = (
        db.UniqueConstraint("user_id", "signature_hash", name="uq_quizzes_user_signature_hash"),
    )

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subject = db.Column(db.String(255), nullable=False)
    # list of {"question", "options", "answer"} dicts
    questions = db.Column(db.JSON, nullable=False)
    signature = db.Column(db.Text, nullable=False)
    signature_hash = db.Column(db.String(64), nullable=False)
    is_public = db.Column(db.Boolean, default=False, nullable=False)
    share_id = db.Column(db.String(36), unique=True, nullable=True)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    # Relationships
    owner = db.relationship("User", back_populates="quizzes")

    def as_payload(self) -> dict:
        return {"subject": self.subject, "questions": self.questions}

    def __repr__(self):
        return f"<Quiz id={self.id} subject={self.subject!r} user={self.user_id}>"
