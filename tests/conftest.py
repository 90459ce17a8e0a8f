import pytest
from server import create_app
from Admin.Routes.Models.User import db


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_DEMO_DATA = False


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    return app.extensions['storage']


@pytest.fixture
def make_user(storage):
    def _make_user(**overrides):
        data = {'name': 'Sarah Miller', 'email': 'sarah@example.com', 'role': 'user', 'status': 'active'}
        data.update(overrides)
        return storage.create_user(data)
    return _make_user


@pytest.fixture
def make_place(storage):
    def _make_place(**overrides):
        data = {
            'name': 'Secret Beach Cove',
            'description': 'White sand and turquoise water.',
            'location': 'Mirissa',
            'category': 'Beach',
            'rating': '4.8',
            'status': 'active',
            'amenities': '["Parking"]',
            'coordinates': '{"lat": 5.9, "lng": 80.5}',
        }
        data.update(overrides)
        return storage.create_place(data)
    return _make_place


@pytest.fixture
def make_review(storage):
    def _make_review(**overrides):
        data = {
            'user_id': 1,
            'user_name': 'Sarah Miller',
            'place_id': 1,
            'place_name': 'Secret Beach Cove',
            'content': 'Absolutely stunning place!',
            'rating': '5',
            'status': 'pending',
        }
        data.update(overrides)
        return storage.create_review(data)
    return _make_review


@pytest.fixture
def make_photo(storage):
    def _make_photo(**overrides):
        data = {
            'uploader_id': 1,
            'uploader_name': 'Sarah Miller',
            'url': 'https://example.com/sunset.jpg',
            'caption': 'Sunset',
            'related_type': 'place',
            'related_id': 1,
            'status': 'pending',
        }
        data.update(overrides)
        return storage.create_photo(data)
    return _make_photo
