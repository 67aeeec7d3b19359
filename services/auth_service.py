# services/auth_service.py

from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from repositories.user_repository import UserRepository
from services.errors import Conflict, ConstraintViolation, Unauthorized, ValidationError
from services.utils import require_fields

JWT_ALGORITHM = 'HS256'


def generate_token(user):
    now = datetime.now(timezone.utc)
    payload = {
        'userId': user['id'],
        'username': user['username'],
        'iat': now,
        'exp': now + timedelta(hours=current_app.config['JWT_EXPIRES_HOURS']),
    }
    return jwt.encode(payload, current_app.config['JWT_SECRET_KEY'], algorithm=JWT_ALGORITHM)


def verify_token(token):
    """Decode a bearer token, raising Unauthorized for anything but a valid, unexpired one."""
    if not token:
        raise Unauthorized("Access token required")
    try:
        return jwt.decode(token, current_app.config['JWT_SECRET_KEY'], algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token has expired")
    except jwt.InvalidTokenError:
        raise Unauthorized("Invalid token")


def public_user(user):
    return {key: value for key, value in user.items() if key != 'password'}


class AuthService:

    def __init__(self, gateway):
        self.gateway = gateway
        self.users = UserRepository(gateway)

    def register(self, username, email, password):
        require_fields(
            {'username': username, 'email': email, 'password': password},
            ['username', 'email', 'password']
        )
        if not all(isinstance(v, str) for v in (username, email, password)):
            raise ValidationError("username, email and password must be strings")
        username = username.strip()
        email = email.strip()

        with self.gateway.transaction():
            if self.users.exists(username, email):
                raise Conflict("User already exists with this username or email")
            try:
                user = self.users.create(username, email, generate_password_hash(password))
            except ConstraintViolation:
                raise Conflict("User already exists with this username or email")

        current_app.logger.info(f"User registered with ID: {user['id']}")
        return {'user': public_user(user), 'token': generate_token(user)}

    def login(self, username, password):
        require_fields({'username': username, 'password': password}, ['username', 'password'])
        if not isinstance(username, str) or not isinstance(password, str):
            raise ValidationError("username and password must be strings")

        # the identifier may be either the username or the email
        user = self.users.find_by_username_or_email(username.strip())
        if not user or not check_password_hash(user['password'], password):
            current_app.logger.warning(f"⚠️  Failed login attempt for '{username}'")
            raise Unauthorized("Invalid credentials")

        return {'user': public_user(user), 'token': generate_token(user)}

    def current_user(self, claims):
        user = self.users.find_by_id(claims.get('userId'))
        if not user:
            raise Unauthorized("User no longer exists")
        return user
