"""
Public API

GET /api/public/quizzes/<share_id> – read-only view of a published quiz

No authentication; only quizzes whose owner made them public resolve.
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from quizbot.services import library

public_bp = Blueprint("public", __name__, url_prefix="/api/public")


@public_bp.get("/quizzes/<share_id>")
def shared_quiz(share_id: str):
    record = library.get_public_quiz(share_id)
    if record is None:
        return jsonify({"error": "This quiz is not public or doesn't exist."}), 404
    return jsonify(
        {
            "subject":   record.subject,
            "questions": record.questions,
            "share_id":  record.share_id,
        }
    ), 200
