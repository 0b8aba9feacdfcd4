from conftest import register


def test_register_returns_tokens_and_user(client):
    data = register(client, email=' New@Example.com ', name='Ada')
    assert data['access_token'] and data['refresh_token']
    assert data['user']['email'] == 'new@example.com'
    assert data['user']['display_name'] == 'Ada'


def test_display_name_falls_back_to_email(client):
    data = register(client, email='plain@example.com')
    assert data['user']['display_name'] == 'plain@example.com'


def test_register_validation(client):
    assert client.post('/api/auth/register', json={'email': 'a@b.c'}).status_code == 400
    response = client.post('/api/auth/register', json={'email': 'a@b.c', 'password': 'short'})
    assert response.status_code == 400
    assert '8 characters' in response.get_json()['error']


def test_duplicate_email_conflicts(client):
    register(client)
    response = client.post(
        '/api/auth/register',
        json={'email': 'user@example.com', 'password': 'password123'},
    )
    assert response.status_code == 409


def test_login_and_me(client):
    register(client)
    response = client.post('/api/auth/login', json={'email': 'USER@example.com', 'password': 'password123'})
    assert response.status_code == 200
    token = response.get_json()['access_token']

    me = client.get('/api/auth/me', headers={'Authorization': f'Bearer {token}'})
    assert me.status_code == 200
    assert me.get_json()['user']['email'] == 'user@example.com'


def test_login_rejects_bad_password(client):
    register(client)
    response = client.post('/api/auth/login', json={'email': 'user@example.com', 'password': 'wrong-password'})
    assert response.status_code == 401


def test_refresh_issues_access_token(client):
    data = register(client)
    response = client.post(
        '/api/auth/refresh',
        headers={'Authorization': f"Bearer {data['refresh_token']}"},
    )
    assert response.status_code == 200
    assert response.get_json()['access_token']


def test_health(client):
    assert client.get('/api/health').get_json() == {'status': 'ok'}
