def test_list_users(client, make_user):
    make_user(name='A', email='a@example.com')
    make_user(name='B', email='b@example.com')

    response = client.get('/api/users')

    assert response.status_code == 200
    users = response.get_json()['data']
    assert {u['name'] for u in users} == {'A', 'B'}
    assert set(users[0]) == {'id', 'name', 'email', 'role', 'status', 'joinedAt'}


def test_create_user(client):
    response = client.post('/api/users', json={'name': 'Mike Smith', 'email': 'mike@example.com', 'status': 'disabled'})

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['status'] == 'disabled'
    assert data['role'] == 'user'


def test_create_user_rejects_bad_email(client):
    response = client.post('/api/users', json={'name': 'Mike', 'email': 'not-an-email'})

    assert response.status_code == 400
    assert 'email' in response.get_json()['error']


def test_get_user(client, make_user):
    user = make_user()

    assert client.get(f'/api/users/{user.id}').get_json()['data']['email'] == 'sarah@example.com'
    assert client.get('/api/users/999').status_code == 404


def test_update_user_status(client, make_user):
    user = make_user(status='active')

    response = client.patch(f'/api/users/{user.id}', json={'status': 'disabled'})

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['status'] == 'disabled'
    assert data['name'] == 'Sarah Miller'


def test_update_user_status_requires_status(client, make_user):
    user = make_user()

    response = client.patch(f'/api/users/{user.id}', json={})

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Missing data for required field.'


def test_update_missing_user_status_returns_404(client):
    assert client.patch('/api/users/999', json={'status': 'disabled'}).status_code == 404


def test_delete_user(client, make_user):
    user = make_user()
    user_id = user.id

    assert client.delete(f'/api/users/{user_id}').status_code == 204
    assert client.get(f'/api/users/{user_id}').status_code == 404
    assert client.delete(f'/api/users/{user_id}').status_code == 204


def test_create_user_without_email(client):
    response = client.post('/api/users', json={'name': 'A', 'status': 'active'})

    assert response.status_code == 201
    assert response.get_json()['data']['email'] is None


def test_user_id_past_integer_range(client):
    too_big = 99999999999999999999

    assert client.get(f'/api/users/{too_big}').status_code == 404
    assert client.patch(f'/api/users/{too_big}', json={'status': 'disabled'}).status_code == 404
    assert client.delete(f'/api/users/{too_big}').status_code == 204
