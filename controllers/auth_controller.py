# controllers/auth_controller.py

from flask import Blueprint, g, jsonify

from controllers.common import json_body, require_auth, success
from db.gateway import get_gateway
from services.auth_service import AuthService
from services.utils import serialize

auth_bp = Blueprint('auth', __name__)


def auth_service():
    return AuthService(get_gateway())


@auth_bp.route('/auth/register', methods=['POST'])
def register():
    data = json_body()
    result = auth_service().register(data.get('username'), data.get('email'), data.get('password'))
    return jsonify({
        'message': 'User registered successfully',
        'token': result['token'],
        'user': serialize(result['user'])
    }), 201


@auth_bp.route('/auth/login', methods=['POST'])
def login():
    data = json_body()
    result = auth_service().login(data.get('username'), data.get('password'))
    return jsonify({
        'message': 'Login successful',
        'token': result['token'],
        'user': serialize(result['user'])
    }), 200


@auth_bp.route('/auth/me', methods=['GET'])
def me():
    require_auth()
    user = auth_service().current_user(g.current_user)
    return success(user)
