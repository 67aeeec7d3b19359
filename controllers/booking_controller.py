# controllers/booking_controller.py

from flask import Blueprint, current_app, request

from controllers.common import json_body, require_auth, success
from db.gateway import get_gateway
from services.booking_service import BookingService

booking_bp = Blueprint('bookings', __name__)
booking_bp.before_request(require_auth)


def booking_service():
    return BookingService(get_gateway())


@booking_bp.route('/bookings', methods=['GET'])
def list_bookings():
    bookings = booking_service().list(request.args)
    return success(bookings)


@booking_bp.route('/bookings/<int:booking_id>', methods=['GET'])
def get_booking(booking_id):
    return success(booking_service().get(booking_id))


@booking_bp.route('/bookings', methods=['POST'])
def create_booking():
    current_app.logger.debug("Received create booking request")
    booking = booking_service().create(json_body())
    return success(booking, 201, message='Created')


@booking_bp.route('/bookings/<int:booking_id>', methods=['PUT'])
def update_booking(booking_id):
    booking = booking_service().update(booking_id, json_body())
    return success(booking, message='Updated')


@booking_bp.route('/bookings/<int:booking_id>', methods=['DELETE'])
def delete_booking(booking_id):
    booking = booking_service().delete(booking_id)
    return success(booking, message='Deleted')


@booking_bp.route('/bookings/<int:booking_id>/rooming-lists', methods=['GET'])
def get_booking_rooming_lists(booking_id):
    rooming_lists = booking_service().list_rooming_lists(booking_id)
    return success(rooming_lists, bookingId=booking_id)


@booking_bp.route('/bookings/<int:booking_id>/rooming-lists/<int:rooming_list_id>', methods=['POST'])
def link_rooming_list(booking_id, rooming_list_id):
    link = booking_service().link(booking_id, rooming_list_id)
    return success(link, 201, message='Linked successfully')


@booking_bp.route('/bookings/<int:booking_id>/rooming-lists/<int:rooming_list_id>', methods=['DELETE'])
def unlink_rooming_list(booking_id, rooming_list_id):
    booking_service().unlink(booking_id, rooming_list_id)
    return success(message='Unlinked successfully')
