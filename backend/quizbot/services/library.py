"""
Quiz library persistence.

Public API
----------
    find_candidates(user_id, subject)          -> list[QuizRecord]
    save_quiz(user_id, quiz)                   -> (QuizRecord, created: bool)
    signature_digest(signature)                -> str
    list_quizzes(user_id, limit=30, search=None) -> list[QuizRecord]
    get_quiz(user_id, quiz_id)                 -> QuizRecord | None
    delete_quiz(user_id, quiz_id)              -> bool
    set_visibility(user_id, quiz_id, is_public) -> QuizRecord | None
    get_public_quiz(share_id)                  -> QuizRecord | None

Every lookup except get_public_quiz is scoped to the owning user.
SQLAlchemy errors propagate to the caller after the session is rolled back.
"""

from __future__ import annotations

import hashlib
import logging
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quizbot.db.models.quiz import Quiz as QuizRecord
from quizbot.extensions import db
from quizbot.quiz import Quiz, compute_signature, find_duplicate

log = logging.getLogger(__name__)


def find_candidates(user_id: str, subject: str) -> List[QuizRecord]:
    """Saved quizzes of *user_id* whose subject matches, ignoring case and padding."""
    return (
        QuizRecord.query
        .filter(QuizRecord.user_id == user_id)
        .filter(func.lower(func.trim(QuizRecord.subject)) == subject.strip().lower())
        .all()
    )


def signature_digest(signature: str) -> str:
    return hashlib.sha256(signature.encode("utf-8")).hexdigest()


def save_quiz(user_id: str, quiz: Quiz) -> Tuple[QuizRecord, bool]:
    """
    Save *quiz* unless an identical one is already in the user's library.

    Returns the stored record and whether it was newly created. When a
    duplicate exists the existing record is returned untouched.
    """
    candidates = find_candidates(user_id, quiz.subject)
    payloads = [c.as_payload() for c in candidates]
    match = find_duplicate(quiz, payloads)
    if match is not None:
        record = candidates[payloads.index(match)]
        log.info("library: duplicate save skipped user=%s quiz=%s", user_id, record.id)
        return record, False

    signature = compute_signature(quiz)
    digest = signature_digest(signature)
    record = QuizRecord(
        id=str(uuid.uuid4()),
        user_id=user_id,
        subject=quiz.subject,
        questions=[q.to_dict() for q in quiz.questions],
        signature=signature,
        signature_hash=digest,
        is_public=False,
        share_id=None,
    )
    db.session.add(record)
    try:
        db.session.commit()
    except IntegrityError:
        # Same signature committed by another session between check and insert
        db.session.rollback()
        record = QuizRecord.query.filter_by(user_id=user_id, signature_hash=digest).first()
        if record is None:
            raise
        log.info("library: concurrent duplicate save user=%s quiz=%s", user_id, record.id)
        return record, False
    except SQLAlchemyError:
        db.session.rollback()
        raise

    log.info("library: saved quiz user=%s quiz=%s subject=%r", user_id, record.id, record.subject)
    return record, True


def list_quizzes(user_id: str, limit: int = 30, search: Optional[str] = None) -> List[QuizRecord]:
    query = QuizRecord.query.filter_by(user_id=user_id)
    term = (search or "").strip().lower()
    if term:
        query = query.filter(func.lower(QuizRecord.subject).contains(term, autoescape=True))
    return query.order_by(QuizRecord.created_at.desc()).limit(limit).all()


def get_quiz(user_id: str, quiz_id: str) -> Optional[QuizRecord]:
    return QuizRecord.query.filter_by(id=quiz_id, user_id=user_id).first()


def delete_quiz(user_id: str, quiz_id: str) -> bool:
    record = get_quiz(user_id, quiz_id)
    if record is None:
        return False
    db.session.delete(record)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    log.info("library: deleted quiz user=%s quiz=%s", user_id, quiz_id)
    return True


def set_visibility(user_id: str, quiz_id: str, is_public: bool) -> Optional[QuizRecord]:
    """
    Publish or unpublish a quiz.

    Publishing assigns a share id the first time; unpublishing keeps it so
    the same link works again if the quiz is re-published.
    """
    record = get_quiz(user_id, quiz_id)
    if record is None:
        return None
    record.is_public = bool(is_public)
    if record.is_public and not record.share_id:
        record.share_id = str(uuid.uuid4())
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return record


def get_public_quiz(share_id: str) -> Optional[QuizRecord]:
    record = QuizRecord.query.filter_by(share_id=share_id).first()
    if record is None or not record.is_public:
        return None
    return record
