"""
Quizzes API

Endpoints
---------
POST   /api/quizzes/generate            – generate a quiz for a topic (not saved)
POST   /api/quizzes                     – save a quiz to the user's library
GET    /api/quizzes                     – list saved quizzes (?limit=, ?q=)
GET    /api/quizzes/<quiz_id>           – get one saved quiz with its questions
DELETE /api/quizzes/<quiz_id>           – delete a saved quiz
PATCH  /api/quizzes/<quiz_id>/visibility – publish / unpublish a quiz

All routes require a valid JWT access token (Bearer in Authorization header).
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from sqlalchemy.exc import SQLAlchemyError

from quizbot.db.models.quiz import Quiz as QuizRecord
from quizbot.db.models.user import User
from quizbot.extensions import db
from quizbot.quiz import QuizValidationError, compute_signature, parse_quiz
from quizbot.services import library
from quizbot.services.quiz.generator import GenerationError, generate_quiz
from quizbot.services.wrapper.client import WrapperError

log = logging.getLogger(__name__)

quizzes_bp = Blueprint("quizzes", __name__, url_prefix="/api/quizzes")

_MAX_LIST_LIMIT = 100


# ── Helpers ───────────────────────────────────────────────────────────────────

def _record_to_dict(record: QuizRecord, include_questions: bool = False) -> dict:
    d = {
        "id":         record.id,
        "subject":    record.subject,
        "created_at": record.created_at.isoformat(),
        "is_public":  record.is_public,
        "share_id":   record.share_id,
        "question_count": len(record.questions or []),
    }
    if include_questions:
        d["questions"] = record.questions
        d["signature"] = record.signature
    return d


# ── POST /api/quizzes/generate ────────────────────────────────────────────────

@quizzes_bp.post("/generate")
@jwt_required()
def generate():
    """
    Generate a fresh quiz for a topic.

    Request body (JSON):
        prompt : str  – the quiz topic (required)

    Response (JSON):
        status    : "ok" | "rejected"
        quiz      : QuizPayload          (status "ok")
        signature : str                  (status "ok")
        topic     : str                  (status "rejected")
    """
    data = request.get_json(silent=True) or {}
    topic = (data.get("prompt") or "").strip()
    if not topic:
        return jsonify({"error": "Prompt is required"}), 400

    try:
        quiz = generate_quiz(topic)
    except GenerationError as exc:
        return jsonify({"error": str(exc)}), 502
    except WrapperError as exc:
        log.error("quiz generation failed for topic=%r: %s", topic, exc)
        return jsonify({"error": "AI service unavailable, please try again"}), 503

    if quiz is None:
        return jsonify({"status": "rejected", "topic": topic}), 200

    return jsonify(
        {
            "status":    "ok",
            "quiz":      quiz.to_dict(),
            "signature": compute_signature(quiz),
        }
    ), 200


# ── POST /api/quizzes ─────────────────────────────────────────────────────────

@quizzes_bp.post("")
@jwt_required()
def save():
    """
    Save a quiz unless the same quiz is already in the library.

    Response: 201 {"quiz", "created": true} for a new record,
              200 {"quiz", "created": false} when a duplicate exists.
    """
    user_id = get_jwt_identity()
    if db.session.get(User, user_id) is None:
        return jsonify({"error": "Your session could not be confirmed, please log in again"}), 404

    try:
        quiz = parse_quiz(request.get_json(silent=True))
    except QuizValidationError as exc:
        return jsonify({"error": str(exc)}), 400

    try:
        record, created = library.save_quiz(user_id, quiz)
    except SQLAlchemyError as exc:
        log.error("saving quiz failed for user=%s: %s", user_id, exc)
        return jsonify({"error": "Could not save quiz, please try again"}), 500

    return jsonify(
        {"quiz": _record_to_dict(record, include_questions=True), "created": created}
    ), 201 if created else 200


# ── GET /api/quizzes ──────────────────────────────────────────────────────────

@quizzes_bp.get("")
@jwt_required()
def list_saved():
    """Return the user's saved quizzes, newest first."""
    user_id = get_jwt_identity()
    limit = request.args.get("limit", current_app.config["RECENT_QUIZ_LIMIT"], type=int)
    limit = max(1, min(limit, _MAX_LIST_LIMIT))
    records = library.list_quizzes(user_id, limit=limit, search=request.args.get("q"))
    return jsonify([_record_to_dict(r) for r in records]), 200


# ── GET /api/quizzes/<quiz_id> ────────────────────────────────────────────────

@quizzes_bp.get("/<quiz_id>")
@jwt_required()
def get_saved(quiz_id: str):
    record = library.get_quiz(get_jwt_identity(), quiz_id)
    if record is None:
        return jsonify({"error": "quiz not found"}), 404
    return jsonify(_record_to_dict(record, include_questions=True)), 200


# ── DELETE /api/quizzes/<quiz_id> ─────────────────────────────────────────────

@quizzes_bp.delete("/<quiz_id>")
@jwt_required()
def delete_saved(quiz_id: str):
    try:
        deleted = library.delete_quiz(get_jwt_identity(), quiz_id)
    except SQLAlchemyError as exc:
        log.error("deleting quiz %s failed: %s", quiz_id, exc)
        return jsonify({"error": "Could not delete quiz, please try again"}), 500
    if not deleted:
        return jsonify({"error": "quiz not found"}), 404
    return jsonify({"message": "Quiz deleted", "id": quiz_id}), 200


# ── PATCH /api/quizzes/<quiz_id>/visibility ───────────────────────────────────

@quizzes_bp.patch("/<quiz_id>/visibility")
@jwt_required()
def update_visibility(quiz_id: str):
    data = request.get_json(silent=True) or {}
    is_public = data.get("is_public")
    if not isinstance(is_public, bool):
        return jsonify({"error": "is_public must be true or false"}), 400

    try:
        record = library.set_visibility(get_jwt_identity(), quiz_id, is_public)
    except SQLAlchemyError as exc:
        log.error("updating visibility of quiz %s failed: %s", quiz_id, exc)
        return jsonify({"error": "Could not update quiz, please try again"}), 500
    if record is None:
        return jsonify({"error": "quiz not found"}), 404
    return jsonify(_record_to_dict(record)), 200
