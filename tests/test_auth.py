import pytest

from roster import db
from roster.models import User
from roster.services.auth_service import AuthService


def test_login_creates_user_with_email(app, client):
    response = client.post('/api/auth/login', json={'credential': '  Teacher@Example.COM '})

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['token']
    assert data['user']['credential'] == 'teacher@example.com'

    with app.app_context():
        user = User.query.filter_by(email='teacher@example.com').one()
        assert user.user_id == data['user']['user_id']
        assert user.created_at is not None
        assert user.last_login is not None


def test_second_login_reuses_user_and_updates_last_login(app, client):
    first = client.post('/api/auth/login', json={'credential': 'kiri'}).get_json()
    with app.app_context():
        User.query.filter_by(username='kiri').one().last_login = None
        db.session.commit()

    second = client.post('/api/auth/login', json={'username': 'kiri'}).get_json()

    assert first['user']['user_id'] == second['user']['user_id']
    with app.app_context():
        assert User.query.count() == 1
        assert User.query.filter_by(username='kiri').one().last_login is not None


def test_concurrent_first_login_reuses_existing_user(app, client, monkeypatch):
    existing = client.post('/api/auth/login', json={'credential': 'kiri'}).get_json()['user']

    # first lookup misses, as if another request inserted the user in between
    lookups = []
    find_user = AuthService.find_user

    def racing_find_user(kind, credential):
        lookups.append(credential)
        return None if len(lookups) == 1 else find_user(kind, credential)

    monkeypatch.setattr(AuthService, 'find_user', staticmethod(racing_find_user))

    response = client.post('/api/auth/login', json={'credential': 'kiri'})

    assert response.status_code == 200
    assert response.get_json()['user']['user_id'] == existing['user_id']
    assert lookups == ['kiri', 'kiri']
    with app.app_context():
        assert User.query.count() == 1


@pytest.mark.parametrize('credential', ['', '   ', 'a', 'x' * 51, 'not@an-email', None, 42])
def test_login_rejects_bad_credentials(client, credential):
    response = client.post('/api/auth/login', json={'credential': credential})

    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_me_requires_token(client):
    response = client.get('/api/auth/me')

    assert response.status_code == 401
    assert response.get_json() == {'error': 'Authentication required'}


def test_me_rejects_tampered_token(client):
    response = client.get('/api/auth/me', headers={'Authorization': 'Bearer not-a-real-token'})
    assert response.status_code == 401


def test_me_returns_current_user(client, auth_headers):
    response = client.get('/api/auth/me', headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()['user']['credential'] == 'teacher@example.com'


def test_logout(client):
    response = client.post('/api/auth/logout')
    assert response.get_json()['success'] is True


def test_health(client):
    assert client.get('/api/health').get_json()['status'] == 'ok'


def test_identity_follows_each_requests_token(client, auth_headers, other_headers):
    first = client.get('/api/auth/me', headers=auth_headers).get_json()['user']
    second = client.get('/api/auth/me', headers=other_headers).get_json()['user']

    assert first['credential'] == 'teacher@example.com'
    assert second['credential'] == 'someone-else'
    assert client.get('/api/auth/me').status_code == 401
