# controllers/event_controller.py

from flask import Blueprint, current_app

from controllers.common import json_body, require_auth, success
from db.gateway import get_gateway
from services.event_service import EventService

event_bp = Blueprint('events', __name__)
event_bp.before_request(require_auth)


def event_service():
    return EventService(get_gateway())


@event_bp.route('/events', methods=['GET'])
def list_events():
    events = event_service().list()
    return success(events)


@event_bp.route('/events/<int:event_id>', methods=['GET'])
def get_event(event_id):
    return success(event_service().get(event_id))


@event_bp.route('/events', methods=['POST'])
def create_event():
    current_app.logger.debug("Received create event request")
    event = event_service().create(json_body())
    return success(event, 201, message='Event created')


@event_bp.route('/events/<int:event_id>', methods=['PUT'])
def update_event(event_id):
    event = event_service().update(event_id, json_body())
    return success(event, message='Event updated')


@event_bp.route('/events/<int:event_id>', methods=['DELETE'])
def delete_event(event_id):
    event = event_service().delete(event_id)
    return success(event, message='Event deleted')


@event_bp.route('/events/<int:event_id>/rooming-lists', methods=['GET'])
def get_event_rooming_lists(event_id):
    rooming_lists = event_service().list_rooming_lists(event_id)
    return success(rooming_lists, eventId=event_id)
