# tests/conftest.py

import pytest

from app import create_app
from app.config import TestingConfig
from db.extensions import db


@pytest.fixture
def app(tmp_path):
    class Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'rooming_lists.db'}"

    app = create_app(Config)
    yield app

    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    response = client.post('/api/auth/register', json={
        'username': 'planner',
        'email': 'planner@example.com',
        'password': 'secret123',
    })
    assert response.status_code == 201
    return {'Authorization': f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def create_event(client, auth_headers):
    def _create(event_name='Tech Conf', **fields):
        response = client.post('/api/events', json=dict(eventName=event_name, **fields), headers=auth_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _create


@pytest.fixture
def create_booking(client, auth_headers):
    def _create(event_id, guest_name='John Smith', check_in='2024-03-15', check_out='2024-03-18', **fields):
        payload = {
            'hotelId': 101,
            'eventId': event_id,
            'guestName': guest_name,
            'checkInDate': check_in,
            'checkOutDate': check_out,
        }
        payload.update(fields)
        response = client.post('/api/bookings', json=payload, headers=auth_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _create


@pytest.fixture
def create_rooming_list(client, auth_headers):
    def _create(event_id, rfp_name='RFP-2024', cut_off='2024-03-01', **fields):
        payload = {
            'eventId': event_id,
            'hotelId': 101,
            'rfpName': rfp_name,
            'cutOffDate': cut_off,
            'agreementType': 'staff',
        }
        payload.update(fields)
        response = client.post('/api/rooming-lists', json=payload, headers=auth_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _create


@pytest.fixture
def sample_data(client, auth_headers):
    response = client.post('/api/data/insert', headers=auth_headers)
    assert response.status_code == 200, response.get_json()
    return response.get_json()['data']
