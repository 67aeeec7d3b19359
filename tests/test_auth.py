# tests/test_auth.py

from datetime import datetime, timedelta, timezone

import jwt
from sqlalchemy import select

from db.extensions import db
from models.user import User


def register(client, username='alice', email='alice@x.com', password='secret123'):
    return client.post('/api/auth/register', json={
        'username': username,
        'email': email,
        'password': password,
    })


def test_register_login_flow(client, app):
    response = register(client)
    assert response.status_code == 201
    body = response.get_json()
    assert body['token']
    assert body['user']['username'] == 'alice'
    assert body['user']['email'] == 'alice@x.com'
    assert 'password' not in body['user']

    claims = jwt.decode(body['token'], app.config['JWT_SECRET_KEY'], algorithms=['HS256'])
    assert claims['userId'] == body['user']['id']
    assert claims['username'] == 'alice'
    assert claims['exp'] - claims['iat'] == 24 * 3600

    duplicate = register(client, username='alice2')
    assert duplicate.status_code == 409
    assert duplicate.get_json() == {'error': 'User already exists with this username or email'}

    wrong = client.post('/api/auth/login', json={'username': 'alice', 'password': 'wrong'})
    assert wrong.status_code == 401
    assert wrong.get_json() == {'error': 'Invalid credentials'}

    ok = client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret123'})
    assert ok.status_code == 200
    assert ok.get_json()['token']
    assert ok.get_json()['user']['username'] == 'alice'


def test_login_accepts_email(client):
    register(client)
    response = client.post('/api/auth/login', json={'username': 'alice@x.com', 'password': 'secret123'})
    assert response.status_code == 200


def test_login_unknown_user(client):
    response = client.post('/api/auth/login', json={'username': 'nobody', 'password': 'secret123'})
    assert response.status_code == 401


def test_password_is_stored_hashed(client, app):
    register(client)
    with app.app_context():
        stored = db.session.execute(select(User.password)).scalar_one()
    assert stored != 'secret123'
    assert 'secret123' not in stored


def test_register_requires_all_fields(client):
    response = client.post('/api/auth/register', json={'username': 'bob'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Missing required fields: email, password'


def test_login_requires_fields(client):
    response = client.post('/api/auth/login', json={})
    assert response.status_code == 400


def test_protected_route_without_token(client):
    response = client.get('/api/events')
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Access token required'}


def test_protected_route_with_invalid_token(client):
    response = client.get('/api/events', headers={'Authorization': 'Bearer not-a-token'})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Invalid token'}


def test_protected_route_with_expired_token(client, app):
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {'userId': 1, 'username': 'alice', 'iat': past, 'exp': past + timedelta(hours=1)},
        app.config['JWT_SECRET_KEY'],
        algorithm='HS256',
    )
    response = client.get('/api/events', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Token has expired'}


def test_token_signed_with_other_secret_is_rejected(client):
    token = jwt.encode({'userId': 1, 'username': 'alice'}, 'some-other-secret-value-for-signing', algorithm='HS256')
    response = client.get('/api/bookings', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 401


def test_me_returns_current_user(client):
    token = register(client).get_json()['token']
    response = client.get('/api/auth/me', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 200
    assert response.get_json()['data']['username'] == 'alice'

    assert client.get('/api/auth/me').status_code == 401
