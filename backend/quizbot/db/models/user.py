import uuid
from datetime import datetime, timezone
from werkzeug.security import generate_password_hash, check_password_hash
from quizbot.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    email = db.Column(db.String(255), unique=True, nullable=False)
    # shown as "Welcome back, <name>"; falls back to email when empty
    name = db.Column(db.String(100), nullable=True)
    password_hash = db.Column(db.Text, nullable=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    quizzes = db.relationship(
        "Quiz",
        back_populates="owner",
        lazy="dynamic",
        cascade="all, delete-orphan",
    )

    # ── password helpers ─────────────────────────────────────────────────────

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def display_name(self) -> str:
        return self.name or self.email

    def __repr__(self):
        return f"<User {self.email}>"
