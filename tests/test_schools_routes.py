import io

from roster.models import School
from roster.services import school_service

CSV = (
    'School_Id,Org_Name,Add1_City,EQi_Index,Total\n'
    '3001,Delta School,Dunedin,480,210\n'
    '3002,Epsilon School,Nelson,,95\n'
)


def test_list_schools(client, school):
    data = client.get('/api/schools').get_json()

    assert data['count'] == 1
    assert data['schools'][0]['school_name'] == 'Kowhai Primary School'


def test_upload_replaces_schools(app, client, auth_headers, school):
    response = client.post('/api/schools/upload', headers=auth_headers,
                           data={'csvFile': (io.BytesIO(CSV.encode('utf-8')), 'schools.csv')},
                           content_type='multipart/form-data')

    assert response.status_code == 200
    assert response.get_json()['count'] == 2
    with app.app_context():
        assert sorted(s.school_id for s in School.query.all()) == ['3001', '3002']


def test_upload_with_non_utf8_bytes(app, client, auth_headers):
    latin1 = b'School_Id,Org_Name,Add1_City\n3001,Te Kura o T\xe2kitimu,Tauranga\n'

    response = client.post('/api/schools/upload', headers=auth_headers,
                           data={'csvFile': (io.BytesIO(latin1), 'schools.csv')},
                           content_type='multipart/form-data')

    assert response.status_code == 200
    assert response.get_json()['count'] == 1
    with app.app_context():
        assert School.query.one().school_name == 'Te Kura o T\ufffdkitimu'


def test_upload_rejects_non_csv(client, auth_headers):
    response = client.post('/api/schools/upload', headers=auth_headers,
                           data={'csvFile': (io.BytesIO(b'hello'), 'notes.txt', 'text/plain')},
                           content_type='multipart/form-data')
    assert response.status_code == 400


def test_upload_without_file(client, auth_headers):
    response = client.post('/api/schools/upload', headers=auth_headers, data={},
                           content_type='multipart/form-data')
    assert response.status_code == 400


def test_refresh_from_remote(client, auth_headers, monkeypatch):
    class FakeResponse:
        content = CSV.encode('utf-8')

        def raise_for_status(self):
            pass

    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse()

    monkeypatch.setattr(school_service.requests, 'get', fake_get)

    response = client.post('/api/schools/refresh', headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()['count'] == 2
    assert calls == ['https://example.test/schools.csv']


def test_delete_all_schools(app, client, auth_headers, school):
    response = client.delete('/api/schools', headers=auth_headers)

    assert response.status_code == 200
    with app.app_context():
        assert School.query.count() == 0


def test_mutations_require_auth(client):
    assert client.delete('/api/schools').status_code == 401
    assert client.post('/api/schools/refresh').status_code == 401
