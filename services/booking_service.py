# services/booking_service.py

from flask import current_app

from repositories.booking_repository import BookingRepository
from repositories.event_repository import EventRepository
from repositories.rooming_list_booking_repository import RoomingListBookingRepository
from repositories.rooming_list_repository import RoomingListRepository
from services.errors import Conflict, ConstraintViolation, NotFound, ValidationError
from services.utils import (
    check_id,
    extract_values,
    parse_booking_filters,
    parse_date,
    parse_int,
    parse_text,
    require_fields,
)

BOOKING_FIELDS = {
    'hotelId': ('hotel_id', parse_int),
    'eventId': ('event_id', parse_int),
    'guestName': ('guest_name', parse_text),
    'guestEmail': ('guest_email', parse_text),
    'guestPhoneNumber': ('guest_phone_number', parse_text),
    'checkInDate': ('check_in_date', parse_date),
    'checkOutDate': ('check_out_date', parse_date),
}

REQUIRED_BOOKING_FIELDS = ('hotelId', 'eventId', 'guestName', 'checkInDate', 'checkOutDate')


def validate_stay(check_in_date, check_out_date):
    if check_out_date <= check_in_date:
        raise ValidationError("checkOutDate must be after checkInDate")


class BookingService:

    def __init__(self, gateway):
        self.gateway = gateway
        self.bookings = BookingRepository(gateway)
        self.events = EventRepository(gateway)
        self.rooming_lists = RoomingListRepository(gateway)
        self.links = RoomingListBookingRepository(gateway)

    def list(self, args=None):
        filters = parse_booking_filters(args or {})
        return self.bookings.list(filters)

    def get(self, booking_id):
        check_id(booking_id, 'bookingId')
        booking = self.bookings.find_by_id(booking_id)
        if not booking:
            raise NotFound("Booking not found")
        return booking

    def create(self, data):
        require_fields(data, REQUIRED_BOOKING_FIELDS)
        values = extract_values(data, BOOKING_FIELDS, required=REQUIRED_BOOKING_FIELDS)
        validate_stay(values['check_in_date'], values['check_out_date'])

        with self.gateway.transaction():
            if not self.events.exists(values['event_id']):
                raise NotFound("Event not found")
            booking = self.bookings.create(values)
        current_app.logger.info(f"Booking created with ID: {booking['booking_id']}")
        return booking

    def update(self, booking_id, data):
        check_id(booking_id, 'bookingId')
        values = extract_values(data, BOOKING_FIELDS, required=REQUIRED_BOOKING_FIELDS)

        with self.gateway.transaction():
            current = self.bookings.find_by_id(booking_id)
            if not current:
                raise NotFound("Booking not found")

            # validate against the stay the row will have after the update
            validate_stay(
                values.get('check_in_date', current['check_in_date']),
                values.get('check_out_date', current['check_out_date']),
            )
            if 'event_id' in values and not self.events.exists(values['event_id']):
                raise NotFound("Event not found")

            booking = self.bookings.update(booking_id, values)
        return booking

    def delete(self, booking_id):
        check_id(booking_id, 'bookingId')
        with self.gateway.transaction():
            if not self.bookings.exists(booking_id):
                raise NotFound("Booking not found")
            removed_links = self.links.delete_for_booking(booking_id)
            booking = self.bookings.delete(booking_id)
        current_app.logger.info(f"Booking {booking_id} deleted along with {removed_links} rooming list link(s)")
        return booking

    def list_rooming_lists(self, booking_id):
        check_id(booking_id, 'bookingId')
        if not self.bookings.exists(booking_id):
            raise NotFound("Booking not found")
        return self.links.rooming_lists_for_booking(booking_id)

    def link(self, booking_id, rooming_list_id):
        check_id(booking_id, 'bookingId')
        check_id(rooming_list_id, 'roomingListId')
        with self.gateway.transaction():
            if not self.bookings.exists(booking_id):
                raise NotFound("Booking not found")
            if not self.rooming_lists.exists(rooming_list_id):
                raise NotFound("Rooming list not found")
            if self.links.is_linked(booking_id, rooming_list_id):
                raise Conflict("Booking is already linked to this rooming list")
            try:
                link = self.links.link(booking_id, rooming_list_id)
            except ConstraintViolation:
                # a concurrent request inserted the same pair first
                raise Conflict("Booking is already linked to this rooming list")
        current_app.logger.info(f"Booking {booking_id} linked to rooming list {rooming_list_id}")
        return link

    def unlink(self, booking_id, rooming_list_id):
        check_id(booking_id, 'bookingId')
        check_id(rooming_list_id, 'roomingListId')
        with self.gateway.transaction():
            link = self.links.unlink(booking_id, rooming_list_id)
            if not link:
                raise NotFound("Link not found")
        current_app.logger.info(f"Booking {booking_id} unlinked from rooming list {rooming_list_id}")
        return link
