# services/event_service.py

from flask import current_app

from repositories.event_repository import EventRepository
from services.errors import Conflict, ConstraintViolation, NotFound
from services.utils import check_id, extract_values, parse_text, require_fields

EVENT_FIELDS = {
    'eventName': ('event_name', parse_text),
    'description': ('description', parse_text),
}


class EventService:

    def __init__(self, gateway):
        self.gateway = gateway
        self.events = EventRepository(gateway)

    def list(self):
        return self.events.list_with_counts()

    def get(self, event_id):
        check_id(event_id, 'eventId')
        event = self.events.find_by_id(event_id)
        if not event:
            raise NotFound("Event not found")
        return event

    def create(self, data):
        require_fields(data, ['eventName'])
        values = extract_values(data, EVENT_FIELDS, required=('eventName',))
        with self.gateway.transaction():
            event = self.events.create(values)
        current_app.logger.info(f"Event created with ID: {event['event_id']}")
        return event

    def update(self, event_id, data):
        check_id(event_id, 'eventId')
        values = extract_values(data, EVENT_FIELDS, required=('eventName',))
        with self.gateway.transaction():
            event = self.events.update(event_id, values)
            if not event:
                raise NotFound("Event not found")
        return event

    def delete(self, event_id):
        """
        Remove an event that nothing references any more.

        Rooming lists and bookings both point at their event, so either one
        blocks the delete with a Conflict rather than cascading.
        """
        check_id(event_id, 'eventId')
        with self.gateway.transaction():
            if not self.events.exists(event_id):
                raise NotFound("Event not found")
            if self.events.count_rooming_lists(event_id):
                raise Conflict("Cannot delete event with associated rooming lists")
            if self.events.count_bookings(event_id):
                raise Conflict("Cannot delete event with associated bookings")
            try:
                event = self.events.delete(event_id)
            except ConstraintViolation:
                raise Conflict("Cannot delete event while it is still referenced")
        current_app.logger.info(f"Event {event_id} deleted")
        return event

    def list_rooming_lists(self, event_id):
        check_id(event_id, 'eventId')
        if not self.events.exists(event_id):
            raise NotFound("Event not found")
        return self.events.list_rooming_lists(event_id)
