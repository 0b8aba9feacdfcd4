"""
Quiz generation.

Public API
----------
    generate_quiz(topic: str) -> Quiz | None

Outcomes
--------
    Quiz            – the model produced a well-formed quiz
    None            – the model answered `null`: not a valid quiz topic
    GenerationError – the reply could not be parsed or failed validation
    WrapperError    – the model service itself failed (propagated)

A blank topic raises ValueError before any network call.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from flask import current_app

from quizbot.quiz import Quiz, QuizValidationError, parse_quiz
from quizbot.services.wrapper.client import get_client

log = logging.getLogger(__name__)

_SYSTEM_PROMPT = """\
You are an AI that generates multiple-choice quizzes (MCQs).

You must respond with ONLY a valid JSON object, absolutely no extra text, explanations, or tags.
Do NOT include <think>, <thought>, <analysis>, or any reasoning text. If you must reason, do it silently.

If the provided request is invalid or cannot reasonably produce a quiz topic, respond with:
null

Only return null if you are certain that the input is not a valid quiz topic.

Each question must:
- Have exactly 4 options labeled A, B, C, D (in order).
- Include only one correct answer, indicated by its letter (e.g. "A", "B", "C", or "D").
- NOT include the answer text itself inside the "answer" field.
- Ensure the correct option text appears within "options" array, but "answer" only contains the letter.
- Randomize the answers

Output format:
{
  "subject": "<subject>",
  "questions": [
    {
      "question": "<string>",
      "options": ["<string>", "<string>", "<string>", "<string>"],
      "answer": "<A|B|C|D>"
    }
  ]
}
"""

_THINK_BLOCK = re.compile(r"<(think|thought|analysis)>.*?</\1>", re.IGNORECASE | re.DOTALL)
_CODE_FENCE = re.compile(r"^```(?:json)?|```$", re.IGNORECASE | re.MULTILINE)


class GenerationError(Exception):
    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


def clean_reply(raw: str) -> Optional[str]:
    """
    Strip reasoning blocks and fences from a model reply.

    Returns None when the reply is the bare `null` rejection, otherwise the
    text between the first `{` and the last `}` (possibly empty).
    """
    text = _THINK_BLOCK.sub("", raw or "")
    text = _CODE_FENCE.sub("", text).strip()
    if text.lower() == "null":
        return None
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end < start:
        return ""
    return text[start:end + 1]


def generate_quiz(topic: str) -> Optional[Quiz]:
    topic = (topic or "").strip()
    if not topic:
        raise ValueError("topic is required")

    client = get_client()
    resp = client.chat_completions(
        model=current_app.config["QUIZ_MODEL"],
        messages=[
            {"role": "system", "content": _SYSTEM_PROMPT},
            {"role": "user",   "content": topic},
        ],
        temperature=0.6,
        max_tokens=2048,
        top_p=0.95,
    )

    try:
        raw = resp["choices"][0]["message"]["content"] or ""
    except (KeyError, IndexError, TypeError) as exc:
        raise GenerationError(f"unexpected completion shape: {exc}") from exc

    cleaned = clean_reply(raw)
    if cleaned is None:
        log.info("generator: model rejected topic %r", topic)
        return None

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        log.warning("generator: invalid JSON from model: %s raw=%r", exc, raw[:500])
        raise GenerationError("Invalid JSON from AI", raw=raw) from exc

    try:
        return parse_quiz(data)
    except QuizValidationError as exc:
        log.warning("generator: malformed quiz from model: %s", exc)
        raise GenerationError(f"Malformed quiz from AI: {exc}", raw=raw) from exc
