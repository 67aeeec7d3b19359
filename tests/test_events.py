# tests/test_events.py


def test_create_and_get_event(client, auth_headers, create_event):
    event = create_event('Tech Conf', description='Annual engineering summit')
    assert event['eventName'] == 'Tech Conf'
    assert event['description'] == 'Annual engineering summit'
    assert 'createdAt' in event

    response = client.get(f"/api/events/{event['eventId']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()['data']['eventName'] == 'Tech Conf'


def test_create_event_requires_name(client, auth_headers):
    response = client.post('/api/events', json={'description': 'no name'}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Missing required fields: eventName'}

    blank = client.post('/api/events', json={'eventName': '   '}, headers=auth_headers)
    assert blank.status_code == 400


def test_get_missing_event(client, auth_headers):
    response = client.get('/api/events/999', headers=auth_headers)
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Event not found'}


def test_update_only_touches_supplied_fields(client, auth_headers, create_event):
    event = create_event('Tech Conf', description='old')
    response = client.put(
        f"/api/events/{event['eventId']}",
        json={'description': 'new'},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['eventName'] == 'Tech Conf'
    assert data['description'] == 'new'

    cleared = client.put(f"/api/events/{event['eventId']}", json={'eventName': None}, headers=auth_headers)
    assert cleared.status_code == 400


def test_update_missing_event(client, auth_headers):
    response = client.put('/api/events/42', json={'eventName': 'x'}, headers=auth_headers)
    assert response.status_code == 404


def test_list_events_with_counts(client, auth_headers, create_event, create_booking, create_rooming_list):
    busy = create_event('Busy')
    quiet = create_event('Quiet')
    create_booking(busy['eventId'])
    create_booking(busy['eventId'], guest_name='Jane Doe')
    create_rooming_list(busy['eventId'])

    response = client.get('/api/events', headers=auth_headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body['count'] == 2

    by_id = {item['eventId']: item for item in body['data']}
    assert by_id[busy['eventId']]['bookingCount'] == 2
    assert by_id[busy['eventId']]['roomingListCount'] == 1
    assert by_id[quiet['eventId']]['bookingCount'] == 0
    assert by_id[quiet['eventId']]['roomingListCount'] == 0


def test_delete_event_with_rooming_list_conflicts(client, auth_headers, create_event, create_rooming_list):
    event = create_event()
    create_rooming_list(event['eventId'])

    response = client.delete(f"/api/events/{event['eventId']}", headers=auth_headers)
    assert response.status_code == 409
    assert response.get_json() == {'error': 'Cannot delete event with associated rooming lists'}


def test_delete_event_with_booking_conflicts(client, auth_headers, create_event, create_booking):
    event = create_event()
    create_booking(event['eventId'])

    response = client.delete(f"/api/events/{event['eventId']}", headers=auth_headers)
    assert response.status_code == 409


def test_delete_unreferenced_event(client, auth_headers, create_event):
    event = create_event()
    response = client.delete(f"/api/events/{event['eventId']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()['data']['eventId'] == event['eventId']

    assert client.get(f"/api/events/{event['eventId']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/events/{event['eventId']}", headers=auth_headers).status_code == 404


def test_event_rooming_lists_sorted_by_cut_off(client, auth_headers, create_event, create_rooming_list):
    event = create_event()
    create_rooming_list(event['eventId'], rfp_name='LATE', cut_off='2024-05-01')
    create_rooming_list(event['eventId'], rfp_name='EARLY', cut_off='2024-02-01')

    response = client.get(f"/api/events/{event['eventId']}/rooming-lists", headers=auth_headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body['eventId'] == event['eventId']
    assert [item['rfpName'] for item in body['data']] == ['EARLY', 'LATE']
    assert all(item['eventName'] == 'Tech Conf' for item in body['data'])


def test_event_rooming_lists_for_missing_event(client, auth_headers):
    response = client.get('/api/events/77/rooming-lists', headers=auth_headers)
    assert response.status_code == 404
