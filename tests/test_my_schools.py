def test_requires_authentication(client, school):
    assert client.get('/api/my-schools').status_code == 401
    assert client.post(f'/api/my-schools/{school}').status_code == 401


def test_add_list_check_and_remove(client, auth_headers, school):
    response = client.post(f'/api/my-schools/{school}', headers=auth_headers, json={'notes': 'pilot'})
    assert response.status_code == 200

    listing = client.get('/api/my-schools', headers=auth_headers).get_json()
    assert listing['count'] == 1
    assert listing['schools'][0]['school_id'] == '1234'
    assert listing['schools'][0]['school_name'] == 'Kowhai Primary School'
    assert listing['schools'][0]['notes'] == 'pilot'

    check = client.get(f'/api/my-schools/check/{school}', headers=auth_headers).get_json()
    assert check == {'success': True, 'isInList': True}

    ids = client.get('/api/my-schools/school-ids', headers=auth_headers).get_json()
    assert ids['schoolIds'] == ['1234']

    response = client.delete(f'/api/my-schools/{school}', headers=auth_headers)
    assert response.status_code == 200
    check = client.get(f'/api/my-schools/check/{school}', headers=auth_headers).get_json()
    assert check['isInList'] is False


def test_adding_twice_conflicts(client, auth_headers, favorite_school):
    response = client.post(f'/api/my-schools/{favorite_school}', headers=auth_headers)

    assert response.status_code == 409
    assert response.get_json()['error'] == 'School already in your list'


def test_unknown_school(client, auth_headers):
    response = client.post('/api/my-schools/9999', headers=auth_headers)
    assert response.status_code == 404


def test_remove_school_not_in_list(client, auth_headers, school):
    response = client.delete(f'/api/my-schools/{school}', headers=auth_headers)
    assert response.status_code == 404


def test_lists_are_per_user(client, auth_headers, other_headers, favorite_school):
    ids = client.get('/api/my-schools/school-ids', headers=other_headers).get_json()
    assert ids['schoolIds'] == []
