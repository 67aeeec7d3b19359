# controllers/rooming_list_controller.py

from flask import Blueprint, current_app, request

from controllers.common import json_body, require_auth, success
from db.gateway import get_gateway
from services.rooming_list_service import RoomingListService

rooming_list_bp = Blueprint('rooming_lists', __name__)
rooming_list_bp.before_request(require_auth)


def rooming_list_service():
    return RoomingListService(get_gateway())


@rooming_list_bp.route('/rooming-lists', methods=['GET'])
def list_rooming_lists():
    rooming_lists = rooming_list_service().list(request.args)
    return success(rooming_lists)


@rooming_list_bp.route('/rooming-lists/<int:rooming_list_id>', methods=['GET'])
def get_rooming_list(rooming_list_id):
    return success(rooming_list_service().get(rooming_list_id))


@rooming_list_bp.route('/rooming-lists/<int:rooming_list_id>/bookings', methods=['GET'])
def get_rooming_list_bookings(rooming_list_id):
    bookings = rooming_list_service().list_bookings(rooming_list_id)
    return success(bookings, roomingListId=rooming_list_id)


@rooming_list_bp.route('/rooming-lists', methods=['POST'])
def create_rooming_list():
    current_app.logger.debug("Received create rooming list request")
    rooming_list = rooming_list_service().create(json_body())
    return success(rooming_list, 201, message='Rooming list created successfully')


@rooming_list_bp.route('/rooming-lists/<int:rooming_list_id>', methods=['PUT'])
def update_rooming_list(rooming_list_id):
    rooming_list = rooming_list_service().update(rooming_list_id, json_body())
    return success(rooming_list, message='Rooming list updated successfully')


@rooming_list_bp.route('/rooming-lists/<int:rooming_list_id>', methods=['DELETE'])
def delete_rooming_list(rooming_list_id):
    rooming_list = rooming_list_service().delete(rooming_list_id)
    return success(rooming_list, message='Rooming list deleted successfully')
