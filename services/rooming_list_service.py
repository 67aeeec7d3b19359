# services/rooming_list_service.py

from flask import current_app

from models.roomingList import RoomingListStatus
from repositories.booking_repository import BookingRepository
from repositories.event_repository import EventRepository
from repositories.rooming_list_booking_repository import RoomingListBookingRepository
from repositories.rooming_list_repository import RoomingListRepository
from services.errors import Conflict, ConstraintViolation, NotFound, ValidationError
from services.utils import (
    check_id,
    extract_values,
    parse_date,
    parse_int,
    parse_rooming_list_filters,
    parse_text,
    require_fields,
    validate_agreement_type,
    validate_status,
)


ROOMING_LIST_FIELDS = {
    'eventId': ('event_id', parse_int),
    'hotelId': ('hotel_id', parse_int),
    'rfpName': ('rfp_name', parse_text),
    'cutOffDate': ('cut_off_date', parse_date),
    'status': ('status', validate_status),
    'agreementType': ('agreement_type', validate_agreement_type),
}

REQUIRED_ROOMING_LIST_FIELDS = ('eventId', 'hotelId', 'rfpName', 'cutOffDate', 'agreementType')


def normalize_payload(data):
    """Accept the snake_case ``agreement_type`` key older clients send."""
    data = dict(data or {})
    if 'agreementType' not in data and 'agreement_type' in data:
        data['agreementType'] = data.pop('agreement_type')
    return data


def parse_booking_ids(raw):
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValidationError("bookingIds must be a list of integers.")
    return [parse_int(value, 'bookingIds') for value in raw]


class RoomingListService:

    def __init__(self, gateway):
        self.gateway = gateway
        self.rooming_lists = RoomingListRepository(gateway)
        self.events = EventRepository(gateway)
        self.bookings = BookingRepository(gateway)
        self.links = RoomingListBookingRepository(gateway)

    def _with_bookings(self, rows):
        """Attach nested bookings to each rooming list using one batched lookup."""
        grouped = self.links.bookings_for_rooming_lists(row['rooming_list_id'] for row in rows)
        for row in rows:
            row['bookings'] = grouped.get(row['rooming_list_id'], [])
            row['booking_count'] = len(row['bookings'])
        return rows

    def list(self, args=None):
        filters = parse_rooming_list_filters(args or {})
        return self._with_bookings(self.rooming_lists.list(filters))

    def get(self, rooming_list_id):
        check_id(rooming_list_id, 'roomingListId')
        rooming_list = self.rooming_lists.find_by_id(rooming_list_id)
        if not rooming_list:
            raise NotFound("Rooming list not found")
        return self._with_bookings([rooming_list])[0]

    def create(self, payload):
        data = normalize_payload(payload)
        require_fields(data, REQUIRED_ROOMING_LIST_FIELDS)
        values = extract_values(data, ROOMING_LIST_FIELDS, required=ROOMING_LIST_FIELDS)
        values.setdefault('status', RoomingListStatus.Active.value)
        booking_ids = parse_booking_ids(data.get('bookingIds'))

        if len(set(booking_ids)) != len(booking_ids):
            raise Conflict("bookingIds contains the same booking more than once")

        with self.gateway.transaction():
            if not self.events.exists(values['event_id']):
                raise NotFound("Event not found")

            found = self.bookings.existing_ids(booking_ids)
            missing = [b for b in booking_ids if b not in found]
            if missing:
                raise NotFound(f"Booking not found: {', '.join(str(b) for b in missing)}")

            rooming_list = self.rooming_lists.create(values)
            rooming_list_id = rooming_list['rooming_list_id']
            for booking_id in booking_ids:
                try:
                    self.links.link(booking_id, rooming_list_id)
                except ConstraintViolation:
                    raise Conflict(f"Booking {booking_id} is already linked to this rooming list")

        current_app.logger.info(
            f"Rooming list created with ID: {rooming_list_id} ({len(booking_ids)} booking(s) linked)"
        )
        return self.get(rooming_list_id)

    def update(self, rooming_list_id, payload):
        check_id(rooming_list_id, 'roomingListId')
        data = normalize_payload(payload)
        values = extract_values(data, ROOMING_LIST_FIELDS, required=ROOMING_LIST_FIELDS)

        with self.gateway.transaction():
            if not self.rooming_lists.exists(rooming_list_id):
                raise NotFound("Rooming list not found")
            if 'event_id' in values and not self.events.exists(values['event_id']):
                raise NotFound("Event not found")
            self.rooming_lists.update(rooming_list_id, values)
        return self.get(rooming_list_id)

    def delete(self, rooming_list_id):
        check_id(rooming_list_id, 'roomingListId')
        with self.gateway.transaction():
            if not self.rooming_lists.exists(rooming_list_id):
                raise NotFound("Rooming list not found")
            removed_links = self.links.delete_for_rooming_list(rooming_list_id)
            rooming_list = self.rooming_lists.delete(rooming_list_id)
        current_app.logger.info(
            f"Rooming list {rooming_list_id} deleted along with {removed_links} booking link(s)"
        )
        return rooming_list

    def list_bookings(self, rooming_list_id):
        check_id(rooming_list_id, 'roomingListId')
        if not self.rooming_lists.exists(rooming_list_id):
            raise NotFound("Rooming list not found")
        return self.links.bookings_for_rooming_list(rooming_list_id)
