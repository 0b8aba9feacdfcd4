import pytest

from quizbot import create_app
from quizbot.extensions import db


SAMPLE_QUIZ = {
    "subject": "Colors",
    "questions": [
        {"question": "Sky?", "options": ["Red", "Blue", "Green", "Yellow"], "answer": "B"},
        {"question": "Grass?", "options": ["Green", "Pink", "Black", "White"], "answer": "A"},
    ],
}


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, email='user@example.com', password='password123', name=None):
    response = client.post(
        '/api/auth/register',
        json={'email': email, 'password': password, 'name': name},
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


@pytest.fixture
def auth_headers(client):
    data = register(client)
    return {'Authorization': f"Bearer {data['access_token']}"}


@pytest.fixture
def other_auth_headers(client):
    data = register(client, email='other@example.com')
    return {'Authorization': f"Bearer {data['access_token']}"}


@pytest.fixture
def sample_quiz():
    return {
        "subject": SAMPLE_QUIZ["subject"],
        "questions": [dict(q, options=list(q["options"])) for q in SAMPLE_QUIZ["questions"]],
    }


class FakeWrapperClient:
    """Stands in for WrapperClient; replies with canned completion text."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def chat_completions(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"choices": [{"message": {"role": "assistant", "content": self.reply}}]}


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeWrapperClient()
    monkeypatch.setattr('quizbot.services.quiz.generator.get_client', lambda: fake)
    return fake
