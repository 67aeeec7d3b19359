# tests/test_data.py

import json
import os

import pytest

from app.config import BASE_DIR

EXPECTED_COUNTS = {'events': 4, 'bookings': 9, 'roomingLists': 6, 'roomingListBookings': 10}
ZERO_COUNTS = {'events': 0, 'bookings': 0, 'roomingLists': 0, 'roomingListBookings': 0}


def data_status(client, headers):
    response = client.get('/api/data/status', headers=headers)
    assert response.status_code == 200
    return response.get_json()['data']


@pytest.fixture
def sample_dir(tmp_path):
    """A writable copy of the bundled sample files."""
    directory = tmp_path / 'sample'
    directory.mkdir()
    for name in ('rooming-lists.json', 'bookings.json', 'rooming-list-bookings.json'):
        with open(os.path.join(BASE_DIR, 'sample_data', name), encoding='utf-8') as fh:
            (directory / name).write_text(fh.read(), encoding='utf-8')
    return directory


def rewrite(directory, name, transform):
    path = directory / name
    rows = json.loads(path.read_text(encoding='utf-8'))
    path.write_text(json.dumps(transform(rows)), encoding='utf-8')


def test_insert_is_idempotent(client, auth_headers):
    first = client.post('/api/data/insert', headers=auth_headers)
    assert first.status_code == 200
    body = first.get_json()
    assert body['data'] == EXPECTED_COUNTS
    assert body['message'] == 'Data inserted successfully from JSON files'
    assert data_status(client, auth_headers) == EXPECTED_COUNTS

    second = client.post('/api/data/insert-sample-data', headers=auth_headers)
    assert second.status_code == 200
    assert second.get_json()['data'] == EXPECTED_COUNTS
    assert data_status(client, auth_headers) == EXPECTED_COUNTS


def test_clear_leaves_no_rows(client, auth_headers, sample_data):
    response = client.delete('/api/data/clear', headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {'status': 'success', 'message': 'All data cleared successfully'}
    assert data_status(client, auth_headers) == ZERO_COUNTS

    assert client.delete('/api/data/clear-all', headers=auth_headers).status_code == 200


def test_clear_keeps_users(client, auth_headers, sample_data):
    client.delete('/api/data/clear', headers=auth_headers)
    # the token still resolves to a stored user
    assert client.get('/api/auth/me', headers=auth_headers).status_code == 200


def test_legacy_statuses_are_mapped(client, auth_headers, sample_data):
    response = client.get('/api/rooming-lists', headers=auth_headers)
    statuses = {item['roomingListId']: item['status'] for item in response.get_json()['data']}
    assert statuses == {
        1: 'Closed',
        2: 'Active',
        3: 'Active',
        4: 'Closed',
        5: 'Active',
        6: 'Cancelled',
    }


def test_events_are_derived_from_rooming_lists(client, auth_headers, sample_data):
    response = client.get('/api/events', headers=auth_headers)
    names = {item['eventId']: item['eventName'] for item in response.get_json()['data']}
    assert names == {
        1: 'Rolling Loud',
        2: 'Ultra Miami',
        3: 'Tech Conference 2025',
        4: 'Event 4',
    }


def test_events_file_takes_precedence(app, client, auth_headers, sample_dir):
    (sample_dir / 'events.json').write_text(json.dumps([
        {'eventId': 1, 'eventName': 'Rolling Loud Festival', 'description': 'Hip-hop weekend'},
        {'eventId': 2, 'eventName': 'Ultra Miami'},
        {'eventId': 3, 'eventName': 'Tech Conference 2025'},
        {'eventId': 4, 'eventName': 'Summer Retreat'},
    ]), encoding='utf-8')
    app.config['SAMPLE_DATA_DIR'] = str(sample_dir)

    assert client.post('/api/data/insert', headers=auth_headers).status_code == 200
    event = client.get('/api/events/1', headers=auth_headers).get_json()['data']
    assert event['eventName'] == 'Rolling Loud Festival'
    assert event['description'] == 'Hip-hop weekend'


def test_new_rows_after_insert_get_fresh_ids(client, auth_headers, sample_data, create_event):
    event = create_event('After Load')
    assert event['eventId'] > 4


def test_invalid_source_keeps_previous_data(app, client, auth_headers, sample_data, sample_dir):
    rewrite(sample_dir, 'rooming-lists.json', lambda rows: rows + [dict(rows[0], roomingListId=7, agreement_type='corporate')])
    app.config['SAMPLE_DATA_DIR'] = str(sample_dir)

    response = client.post('/api/data/insert', headers=auth_headers)
    assert response.status_code == 400
    assert 'corporate' in response.get_json()['error']
    assert data_status(client, auth_headers) == EXPECTED_COUNTS


def test_failed_load_rolls_back_the_clear(app, client, auth_headers, sample_data, sample_dir):
    # the link points at a booking that does not exist, so the insert fails mid-transaction
    rewrite(sample_dir, 'rooming-list-bookings.json', lambda rows: rows + [{'roomingListId': 1, 'bookingId': 999}])
    rewrite(sample_dir, 'bookings.json', lambda rows: rows[:3])
    app.config['SAMPLE_DATA_DIR'] = str(sample_dir)

    response = client.post('/api/data/insert', headers=auth_headers)
    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error'}
    assert data_status(client, auth_headers) == EXPECTED_COUNTS


def test_missing_source_file(app, client, auth_headers, tmp_path):
    app.config['SAMPLE_DATA_DIR'] = str(tmp_path)
    response = client.post('/api/data/insert', headers=auth_headers)
    assert response.status_code == 400
    assert 'rooming-lists.json not found' in response.get_json()['error']


def test_malformed_source_file(app, client, auth_headers, sample_dir):
    (sample_dir / 'bookings.json').write_text('{"bookingId": 1', encoding='utf-8')
    app.config['SAMPLE_DATA_DIR'] = str(sample_dir)
    response = client.post('/api/data/insert', headers=auth_headers)
    assert response.status_code == 400
    assert 'Invalid JSON format in bookings.json' in response.get_json()['error']


def test_data_routes_require_auth(client):
    assert client.get('/api/data/status').status_code == 401
    assert client.post('/api/data/insert').status_code == 401
    assert client.delete('/api/data/clear').status_code == 401


@pytest.mark.parametrize('path', ['/health', '/api/health'])
def test_health(client, path):
    response = client.get(path)
    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'OK'
    assert body['database'] == 'connected'


def test_unknown_route(client):
    response = client.get('/api/nowhere')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Route not found'}
