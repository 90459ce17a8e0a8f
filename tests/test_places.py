import json


def place_body(**overrides):
    body = {
        'name': 'Hidden Waterfall Trail',
        'description': 'A scenic hike leading to a waterfall.',
        'location': 'Ella, Hill Country',
        'category': 'Nature',
        'imageUrl': 'https://example.com/waterfall.jpg',
        'rating': '4.9',
        'status': 'active',
        'amenities': ['Guide Available', 'Hiking'],
        'coordinates': {'lat': 6.8667, 'lng': 81.0466},
    }
    body.update(overrides)
    return body


def test_create_place_encodes_structured_fields(client):
    response = client.post('/api/places', json=place_body())

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['id'] > 0
    assert data['imageUrl'] == 'https://example.com/waterfall.jpg'
    assert json.loads(data['amenities']) == ['Guide Available', 'Hiking']
    assert json.loads(data['coordinates']) == {'lat': 6.8667, 'lng': 81.0466}
    assert data['createdAt']


def test_create_place_accepts_already_encoded_fields(client):
    body = place_body(amenities='["WiFi"]', coordinates='{"lat": 1.0, "lng": 2.0}')

    response = client.post('/api/places', json=body)

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['amenities'] == '["WiFi"]'
    assert data['coordinates'] == '{"lat": 1.0, "lng": 2.0}'


def test_create_then_get_place(client):
    created = client.post('/api/places', json=place_body()).get_json()['data']

    response = client.get(f"/api/places/{created['id']}")

    assert response.status_code == 200
    assert response.get_json()['data'] == created


def test_create_place_missing_field_returns_first_error(client):
    body = place_body()
    del body['name']

    response = client.post('/api/places', json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload['status'] == 'error'
    assert payload['message'] == 'Missing data for required field.'
    assert 'name' in payload['error']


def test_create_place_rejects_malformed_amenities(client):
    response = client.post('/api/places', json=place_body(amenities='not json'))

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Amenities must be a JSON-encoded list'


def test_create_place_rejects_non_object_body(client):
    response = client.post('/api/places', json=['not', 'an', 'object'])

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Request body must be a JSON object'


def test_get_missing_place_returns_404(client):
    response = client.get('/api/places/999')

    assert response.status_code == 404
    assert response.get_json()['message'] == 'Place not found'


def test_list_places(client):
    client.post('/api/places', json=place_body(name='One'))
    client.post('/api/places', json=place_body(name='Two'))

    response = client.get('/api/places')

    assert response.status_code == 200
    assert [p['name'] for p in response.get_json()['data']] == ['Two', 'One']


def test_update_place_merges_fields(client):
    created = client.post('/api/places', json=place_body()).get_json()['data']

    response = client.put(f"/api/places/{created['id']}", json={
        'name': 'Renamed Trail',
        'coordinates': {'lat': 7.0, 'lng': 80.0},
        'id': 12345,
    })

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['id'] == created['id']
    assert data['name'] == 'Renamed Trail'
    assert data['category'] == created['category']
    assert json.loads(data['coordinates']) == {'lat': 7.0, 'lng': 80.0}


def test_update_missing_place_returns_404(client):
    response = client.put('/api/places/999', json={'name': 'Nope'})

    assert response.status_code == 404


def test_delete_place(client):
    created = client.post('/api/places', json=place_body()).get_json()['data']

    response = client.delete(f"/api/places/{created['id']}")

    assert response.status_code == 204
    assert response.data == b''
    assert client.get(f"/api/places/{created['id']}").status_code == 404


def test_delete_missing_place_is_no_content(client):
    assert client.delete('/api/places/999').status_code == 204


def test_storage_failure_becomes_500(app, client, monkeypatch):
    def boom():
        raise RuntimeError('database unavailable')

    monkeypatch.setattr(app.extensions['storage'], 'get_places', boom)

    response = client.get('/api/places')

    assert response.status_code == 500
    payload = response.get_json()
    assert payload['message'] == 'Internal server error'
    assert payload['error'] == 'database unavailable'


def test_unknown_route_uses_envelope(client):
    response = client.get('/api/places/not-a-number')

    assert response.status_code == 404
    assert response.get_json()['status'] == 'error'


def test_create_place_encodes_coordinate_pair(client):
    response = client.post('/api/places', json=place_body(coordinates=[5.9, 80.5]))

    assert response.status_code == 201
    assert json.loads(response.get_json()['data']['coordinates']) == [5.9, 80.5]


def test_create_place_rejects_scalar_coordinates(client):
    response = client.post('/api/places', json=place_body(coordinates='42'))

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Coordinates must be a JSON-encoded object or list'


def test_place_id_past_integer_range(client):
    too_big = 99999999999999999999

    assert client.get(f'/api/places/{too_big}').status_code == 404
    assert client.put(f'/api/places/{too_big}', json={'name': 'Nope'}).status_code == 404
    assert client.delete(f'/api/places/{too_big}').status_code == 204
