import pytest

from config import Config
from roster import create_app, db
from roster.models import School


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key-for-testing-only'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_DIR = None
    SCHOOL_DIRECTORY_URL = 'https://example.test/schools.csv'


@pytest.fixture
def app(tmp_path):
    TestConfig.UPLOAD_FOLDER = str(tmp_path / 'uploads')
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_ctx(app):
    """Application context for tests that call services directly, without the client"""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, credential):
    response = client.post('/api/auth/login', json={'credential': credential})
    assert response.status_code == 200, response.get_json()
    return {'Authorization': f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def auth_headers(client):
    return login(client, 'teacher@example.com')


@pytest.fixture
def other_headers(client):
    return login(client, 'someone-else')


@pytest.fixture
def school(app):
    with app.app_context():
        db.session.add(School(school_id='1234', school_name='Kowhai Primary School', town='Wellington', decile=5))
        db.session.commit()
    return '1234'


@pytest.fixture
def favorite_school(client, auth_headers, school):
    response = client.post(f'/api/my-schools/{school}', headers=auth_headers)
    assert response.status_code == 200
    return school


@pytest.fixture
def group(client, auth_headers, favorite_school):
    response = client.post('/api/groups', headers=auth_headers,
                           json={'school_id': favorite_school, 'group_name': 'Room 7'})
    assert response.status_code == 200
    return response.get_json()['group']
