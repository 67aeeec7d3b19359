# repositories/filters.py

from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy import String, cast, or_, select

from models.booking import Booking
from models.event import Event
from models.roomingList import RoomingList
from models.roomingListBooking import RoomingListBooking

events = Event.__table__
bookings = Booking.__table__
rooming_lists = RoomingList.__table__
links = RoomingListBooking.__table__

SORT_ORDERS = ('asc', 'desc')

BOOKING_SORT_COLUMNS = {
    'checkInDate': bookings.c.check_in_date,
    'guestName': bookings.c.guest_name,
}

ROOMING_LIST_SORT_COLUMNS = {
    'cutOffDate': rooming_lists.c.cut_off_date,
}


@dataclass
class BookingFilters:
    search: Optional[str] = None
    status: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    sort_by: Optional[str] = None
    sort_order: str = 'asc'


@dataclass
class RoomingListFilters:
    search: Optional[str] = None
    status: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: str = 'asc'


def _ordered(column, sort_order):
    return column.desc() if sort_order == 'desc' else column.asc()


def build_booking_query(filters):
    """Translate BookingFilters into a SELECT over bookings joined with their event name."""
    stmt = (
        select(bookings, events.c.event_name)
        .select_from(bookings.outerjoin(events, bookings.c.event_id == events.c.event_id))
    )

    if filters.search:
        term = filters.search.strip()
        stmt = stmt.where(or_(
            bookings.c.guest_name.icontains(term, autoescape=True),
            bookings.c.guest_email.icontains(term, autoescape=True),
            events.c.event_name.icontains(term, autoescape=True),
        ))

    if filters.status:
        # a booking carries no status of its own; match it through its rooming lists
        linked_ids = (
            select(links.c.booking_id)
            .join(rooming_lists, links.c.rooming_list_id == rooming_lists.c.rooming_list_id)
            .where(rooming_lists.c.status == filters.status)
        )
        stmt = stmt.where(bookings.c.booking_id.in_(linked_ids))

    if filters.date_from:
        stmt = stmt.where(bookings.c.check_in_date >= filters.date_from)
    if filters.date_to:
        stmt = stmt.where(bookings.c.check_out_date <= filters.date_to)

    if filters.sort_by:
        column = BOOKING_SORT_COLUMNS[filters.sort_by]
        stmt = stmt.order_by(_ordered(column, filters.sort_order), bookings.c.booking_id)
    else:
        stmt = stmt.order_by(bookings.c.booking_id)
    return stmt


def build_rooming_list_query(filters):
    """Translate RoomingListFilters into a SELECT over rooming lists joined with their event name."""
    stmt = (
        select(rooming_lists, events.c.event_name)
        .select_from(rooming_lists.outerjoin(events, rooming_lists.c.event_id == events.c.event_id))
    )

    if filters.status:
        stmt = stmt.where(rooming_lists.c.status == filters.status)

    if filters.search:
        term = filters.search.strip()
        stmt = stmt.where(or_(
            events.c.event_name.icontains(term, autoescape=True),
            rooming_lists.c.rfp_name.icontains(term, autoescape=True),
            cast(rooming_lists.c.agreement_type, String).icontains(term, autoescape=True),
        ))

    if filters.sort_by:
        column = ROOMING_LIST_SORT_COLUMNS[filters.sort_by]
        stmt = stmt.order_by(_ordered(column, filters.sort_order), rooming_lists.c.rooming_list_id)
    else:
        stmt = stmt.order_by(rooming_lists.c.rooming_list_id)
    return stmt
