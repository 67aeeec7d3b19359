# controllers/common.py

from flask import g, jsonify, request

from services.auth_service import verify_token
from services.errors import Unauthorized, ValidationError
from services.utils import serialize


def require_auth():
    """before_request hook: only let requests carrying a valid bearer token through."""
    if request.method == 'OPTIONS':
        return None
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise Unauthorized("Access token required")
    g.current_user = verify_token(token.strip())
    return None


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def success(data=None, status_code=200, **extra):
    body = {'status': 'success'}
    body.update(extra)
    if isinstance(data, list):
        body['data'] = [serialize(item) for item in data]
        body.setdefault('count', len(data))
    elif isinstance(data, dict):
        body['data'] = serialize(data)
    elif data is not None:
        body['data'] = data
    return jsonify(body), status_code
