import json

from quizbot.db.models import Quiz as QuizRecord
from quizbot.extensions import db
from quizbot.services.wrapper.client import WrapperError


# ── Generate ──────────────────────────────────────────────────────────────────

def test_generate_requires_auth(client):
    response = client.post('/api/quizzes/generate', json={'prompt': 'Colors'})
    assert response.status_code == 401


def test_generate_blank_prompt(client, auth_headers, fake_llm):
    response = client.post('/api/quizzes/generate', json={'prompt': '   '}, headers=auth_headers)
    assert response.status_code == 400
    assert fake_llm.calls == []


def test_generate_success(client, auth_headers, fake_llm, sample_quiz):
    fake_llm.reply = json.dumps(sample_quiz)
    response = client.post('/api/quizzes/generate', json={'prompt': 'Colors'}, headers=auth_headers)
    data = response.get_json()
    assert response.status_code == 200
    assert data['status'] == 'ok'
    assert data['quiz'] == sample_quiz
    assert data['signature'].startswith('colors::sky?')


def test_generate_rejected_topic(client, auth_headers, fake_llm):
    fake_llm.reply = 'null'
    response = client.post('/api/quizzes/generate', json={'prompt': 'zzzz'}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {'status': 'rejected', 'topic': 'zzzz'}


def test_generate_parse_failure(client, auth_headers, fake_llm):
    fake_llm.reply = '{"subject": "Colors", "questions": ['
    response = client.post('/api/quizzes/generate', json={'prompt': 'Colors'}, headers=auth_headers)
    assert response.status_code == 502


def test_generate_service_failure(client, auth_headers, fake_llm):
    fake_llm.error = WrapperError('down', 503)
    response = client.post('/api/quizzes/generate', json={'prompt': 'Colors'}, headers=auth_headers)
    assert response.status_code == 503


# ── Save ──────────────────────────────────────────────────────────────────────

def test_save_then_duplicate(client, auth_headers, sample_quiz):
    first = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers)
    assert first.status_code == 201
    assert first.get_json()['created'] is True
    quiz_id = first.get_json()['quiz']['id']

    variant = dict(sample_quiz, subject='  colors ')
    variant['questions'] = [dict(q, question=f"  {q['question'].upper()} ") for q in sample_quiz['questions']]
    second = client.post('/api/quizzes', json=variant, headers=auth_headers)
    assert second.status_code == 200
    assert second.get_json()['created'] is False
    assert second.get_json()['quiz']['id'] == quiz_id
    assert QuizRecord.query.count() == 1


def test_reordered_questions_are_saved_separately(client, auth_headers, sample_quiz):
    client.post('/api/quizzes', json=sample_quiz, headers=auth_headers)
    reordered = dict(sample_quiz, questions=list(reversed(sample_quiz['questions'])))
    response = client.post('/api/quizzes', json=reordered, headers=auth_headers)
    assert response.status_code == 201
    assert QuizRecord.query.count() == 2


def test_same_quiz_for_two_users(client, auth_headers, other_auth_headers, sample_quiz):
    assert client.post('/api/quizzes', json=sample_quiz, headers=auth_headers).status_code == 201
    assert client.post('/api/quizzes', json=sample_quiz, headers=other_auth_headers).status_code == 201


def test_save_rejects_malformed_quiz(client, auth_headers, sample_quiz):
    sample_quiz['questions'][0]['answer'] = 'Blue'
    response = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers)
    assert response.status_code == 400
    assert QuizRecord.query.count() == 0


def test_save_for_deleted_account(client, auth_headers, sample_quiz):
    from quizbot.db.models import User
    User.query.delete()
    db.session.commit()
    response = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers)
    assert response.status_code == 404
    assert 'log in again' in response.get_json()['error']


def test_save_stores_signature(client, auth_headers, sample_quiz):
    quiz_id = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers).get_json()['quiz']['id']
    record = db.session.get(QuizRecord, quiz_id)
    assert record.signature.startswith('colors::')
    assert record.is_public is False
    assert record.share_id is None


# ── List / get / delete ───────────────────────────────────────────────────────

def _save(client, headers, subject, question='Q?'):
    payload = {
        'subject': subject,
        'questions': [{'question': question, 'options': ['a', 'b', 'c', 'd'], 'answer': 'A'}],
    }
    return client.post('/api/quizzes', json=payload, headers=headers).get_json()['quiz']


def test_list_newest_first_and_search(client, auth_headers):
    _save(client, auth_headers, 'Biology')
    _save(client, auth_headers, 'Roman History')
    latest = _save(client, auth_headers, 'Modern history')

    listed = client.get('/api/quizzes', headers=auth_headers).get_json()
    assert [q['subject'] for q in listed][0] == latest['subject']
    assert len(listed) == 3
    assert 'questions' not in listed[0]
    assert listed[0]['question_count'] == 1

    found = client.get('/api/quizzes?q=HISTORY', headers=auth_headers).get_json()
    assert sorted(q['subject'] for q in found) == ['Modern history', 'Roman History']

    limited = client.get('/api/quizzes?limit=1', headers=auth_headers).get_json()
    assert len(limited) == 1


def test_get_and_delete_are_owner_scoped(client, auth_headers, other_auth_headers, sample_quiz):
    quiz_id = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers).get_json()['quiz']['id']

    assert client.get(f'/api/quizzes/{quiz_id}', headers=other_auth_headers).status_code == 404
    assert client.delete(f'/api/quizzes/{quiz_id}', headers=other_auth_headers).status_code == 404

    fetched = client.get(f'/api/quizzes/{quiz_id}', headers=auth_headers).get_json()
    assert fetched['questions'] == sample_quiz['questions']

    assert client.delete(f'/api/quizzes/{quiz_id}', headers=auth_headers).status_code == 200
    assert client.get(f'/api/quizzes/{quiz_id}', headers=auth_headers).status_code == 404


# ── Visibility / public ───────────────────────────────────────────────────────

def test_publish_and_unpublish(client, auth_headers, sample_quiz):
    quiz_id = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers).get_json()['quiz']['id']
    url = f'/api/quizzes/{quiz_id}/visibility'

    published = client.patch(url, json={'is_public': True}, headers=auth_headers).get_json()
    share_id = published['share_id']
    assert published['is_public'] is True and share_id

    public = client.get(f'/api/public/quizzes/{share_id}')
    assert public.status_code == 200
    assert public.get_json()['subject'] == 'Colors'

    hidden = client.patch(url, json={'is_public': False}, headers=auth_headers).get_json()
    assert hidden['share_id'] == share_id
    assert client.get(f'/api/public/quizzes/{share_id}').status_code == 404

    again = client.patch(url, json={'is_public': True}, headers=auth_headers).get_json()
    assert again['share_id'] == share_id


def test_visibility_validation(client, auth_headers, other_auth_headers, sample_quiz):
    quiz_id = client.post('/api/quizzes', json=sample_quiz, headers=auth_headers).get_json()['quiz']['id']
    url = f'/api/quizzes/{quiz_id}/visibility'
    assert client.patch(url, json={'is_public': 'yes'}, headers=auth_headers).status_code == 400
    assert client.patch(url, json={'is_public': True}, headers=other_auth_headers).status_code == 404


def test_unknown_share_id(client):
    response = client.get('/api/public/quizzes/does-not-exist')
    assert response.status_code == 404
    assert 'not public' in response.get_json()['error']
