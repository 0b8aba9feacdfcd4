import json

import pytest

from quizbot.services.quiz.generator import GenerationError, clean_reply, generate_quiz
from quizbot.services.wrapper.client import WrapperError


def test_generate_returns_parsed_quiz(app, fake_llm, sample_quiz):
    fake_llm.reply = json.dumps(sample_quiz)

    quiz = generate_quiz("  colors ")

    assert quiz.subject == "Colors"
    assert len(quiz.questions) == 2
    call = fake_llm.calls[0]
    assert call["model"] == app.config["QUIZ_MODEL"]
    assert call["messages"][0]["role"] == "system"
    assert call["messages"][1] == {"role": "user", "content": "colors"}
    assert call["temperature"] == 0.6
    assert call["max_tokens"] == 2048


def test_generate_strips_reasoning_and_chatter(app, fake_llm, sample_quiz):
    fake_llm.reply = (
        "<think>The user wants colors.</think>\nSure! Here it is:\n"
        f"```json\n{json.dumps(sample_quiz)}\n```\nEnjoy."
    )
    assert generate_quiz("colors").subject == "Colors"


def test_null_reply_means_rejected_topic(app, fake_llm):
    fake_llm.reply = "<think>not a topic</think>\nnull"
    assert generate_quiz("asdfgh") is None


def test_unparseable_reply_raises_generation_error(app, fake_llm):
    fake_llm.reply = "I cannot help with that."
    with pytest.raises(GenerationError):
        generate_quiz("colors")


def test_malformed_quiz_raises_generation_error(app, fake_llm):
    fake_llm.reply = json.dumps({"subject": "Colors", "questions": [
        {"question": "Sky?", "options": ["Red", "Blue"], "answer": "Blue"}]})
    with pytest.raises(GenerationError, match="Malformed"):
        generate_quiz("colors")


def test_wrapper_errors_propagate(app, fake_llm):
    fake_llm.error = WrapperError("boom", 500)
    with pytest.raises(WrapperError):
        generate_quiz("colors")


def test_blank_topic_never_reaches_the_model(app, fake_llm):
    with pytest.raises(ValueError):
        generate_quiz("   ")
    assert fake_llm.calls == []


def test_clean_reply():
    assert clean_reply("null") is None
    assert clean_reply("  NULL \n") is None
    assert clean_reply('noise {"a": {"b": 1}} tail') == '{"a": {"b": 1}}'
    assert clean_reply("no braces") == ""
