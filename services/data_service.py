# services/data_service.py

import json
import logging
import os

from flask import current_app

from models.roomingList import LEGACY_STATUS_MAP, RoomingListStatus
from repositories.data_repository import DataRepository
from services.errors import ValidationError
from services.utils import (
    parse_date,
    parse_int,
    require_fields,
    validate_agreement_type,
    validate_status,
)

logger = logging.getLogger(__name__)

ROOMING_LISTS_FILE = 'rooming-lists.json'
BOOKINGS_FILE = 'bookings.json'
ROOMING_LIST_BOOKINGS_FILE = 'rooming-list-bookings.json'
EVENTS_FILE = 'events.json'


def read_json(directory, filename, optional=False):
    path = os.path.join(directory, filename)
    if not os.path.exists(path):
        if optional:
            return None
        raise ValidationError(f"{filename} not found in {directory}")
    try:
        with open(path, encoding='utf-8') as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON format in {filename}: {e}")
    if not isinstance(data, list):
        raise ValidationError(f"{filename} must contain a JSON array")
    return data


def migrate_status(status):
    """Map a status from the sample sources onto the canonical set."""
    if not status:
        return RoomingListStatus.Active.value
    return validate_status(LEGACY_STATUS_MAP.get(status, status))


def event_rows(events_data, rooming_lists_data, bookings_data):
    """
    Events come from events.json when it exists.

    Otherwise they are derived from the eventId/eventName pairs of the rooming
    lists, plus any further eventId the bookings mention.
    """
    if events_data is not None:
        rows = []
        for item in events_data:
            require_fields(item, ['eventId', 'eventName'])
            rows.append({
                'event_id': parse_int(item['eventId'], 'eventId'),
                'event_name': item['eventName'],
                'description': item.get('description'),
            })
        return rows

    names = {}
    for item in rooming_lists_data:
        event_id = parse_int(item.get('eventId'), 'eventId')
        if item.get('eventName'):
            names.setdefault(event_id, item['eventName'])
        else:
            names.setdefault(event_id, None)
    for item in bookings_data:
        names.setdefault(parse_int(item.get('eventId'), 'eventId'), None)

    return [
        {'event_id': event_id, 'event_name': name or f"Event {event_id}", 'description': None}
        for event_id, name in sorted(names.items())
    ]


def booking_rows(bookings_data):
    rows = []
    for item in bookings_data:
        require_fields(item, ['bookingId', 'hotelId', 'eventId', 'guestName', 'checkInDate', 'checkOutDate'])
        check_in = parse_date(item['checkInDate'], 'checkInDate')
        check_out = parse_date(item['checkOutDate'], 'checkOutDate')
        if check_out <= check_in:
            raise ValidationError(f"Booking {item['bookingId']}: checkOutDate must be after checkInDate")
        rows.append({
            'booking_id': parse_int(item['bookingId'], 'bookingId'),
            'hotel_id': parse_int(item['hotelId'], 'hotelId'),
            'event_id': parse_int(item['eventId'], 'eventId'),
            'guest_name': item['guestName'],
            'guest_email': item.get('guestEmail'),
            'guest_phone_number': item.get('guestPhoneNumber'),
            'check_in_date': check_in,
            'check_out_date': check_out,
        })
    return rows


def rooming_list_rows(rooming_lists_data):
    rows = []
    for item in rooming_lists_data:
        agreement_type = item.get('agreementType', item.get('agreement_type'))
        require_fields(
            dict(item, agreementType=agreement_type),
            ['roomingListId', 'eventId', 'hotelId', 'rfpName', 'cutOffDate', 'agreementType']
        )
        rows.append({
            'rooming_list_id': parse_int(item['roomingListId'], 'roomingListId'),
            'event_id': parse_int(item['eventId'], 'eventId'),
            'hotel_id': parse_int(item['hotelId'], 'hotelId'),
            'rfp_name': item['rfpName'],
            'cut_off_date': parse_date(item['cutOffDate'], 'cutOffDate'),
            'status': migrate_status(item.get('status')),
            'agreement_type': validate_agreement_type(agreement_type),
        })
    return rows


def link_rows(links_data):
    rows = []
    for item in links_data:
        require_fields(item, ['roomingListId', 'bookingId'])
        rows.append({
            'rooming_list_id': parse_int(item['roomingListId'], 'roomingListId'),
            'booking_id': parse_int(item['bookingId'], 'bookingId'),
        })
    return rows


class DataService:

    def __init__(self, gateway):
        self.gateway = gateway
        self.data = DataRepository(gateway)

    def get_status(self):
        return self.data.counts()

    def _clear(self):
        deleted = self.data.clear_all()
        self.data.reset_identities()
        return deleted

    def clear_all_data(self):
        with self.gateway.transaction():
            deleted = self._clear()
        current_app.logger.info(f"🧹 All data cleared: {deleted}")
        return deleted

    def insert_sample_data(self, directory=None):
        """
        Replace every event, booking, rooming list and link with the JSON sample set.

        Files are read and validated before the store is touched. The clear and
        the reload share one transaction, so a failure leaves the previous data
        in place.
        """
        directory = directory or current_app.config['SAMPLE_DATA_DIR']
        current_app.logger.info(f"🌱 Loading sample data from {directory}")

        rooming_lists_data = read_json(directory, ROOMING_LISTS_FILE)
        bookings_data = read_json(directory, BOOKINGS_FILE)
        links_data = read_json(directory, ROOMING_LIST_BOOKINGS_FILE)
        events_data = read_json(directory, EVENTS_FILE, optional=True)

        events = event_rows(events_data, rooming_lists_data, bookings_data)
        bookings = booking_rows(bookings_data)
        rooming_lists = rooming_list_rows(rooming_lists_data)
        links = link_rows(links_data)

        with self.gateway.transaction():
            self._clear()
            summary = {
                'events': self.data.insert_events(events),
                'bookings': self.data.insert_bookings(bookings),
                'roomingLists': self.data.insert_rooming_lists(rooming_lists),
                'roomingListBookings': self.data.insert_links(links),
            }
            # explicit ids were inserted, move the sequences past them
            self.data.reset_identities()

        logger.info(f"✅ Sample data inserted: {summary}")
        return summary
