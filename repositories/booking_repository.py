# repositories/booking_repository.py

from sqlalchemy import delete, insert, select, update

from repositories.filters import BookingFilters, bookings, build_booking_query, events


class BookingRepository:

    def __init__(self, gateway):
        self.gateway = gateway

    def list(self, filters=None):
        stmt = build_booking_query(filters or BookingFilters())
        return self.gateway.execute(stmt).rows

    def find_by_id(self, booking_id):
        stmt = (
            select(bookings, events.c.event_name)
            .select_from(bookings.outerjoin(events, bookings.c.event_id == events.c.event_id))
            .where(bookings.c.booking_id == booking_id)
        )
        return self.gateway.execute(stmt).first()

    def exists(self, booking_id):
        stmt = select(bookings.c.booking_id).where(bookings.c.booking_id == booking_id)
        return self.gateway.execute(stmt).first() is not None

    def existing_ids(self, booking_ids):
        if not booking_ids:
            return set()
        stmt = select(bookings.c.booking_id).where(bookings.c.booking_id.in_(booking_ids))
        return {row['booking_id'] for row in self.gateway.execute(stmt).rows}

    def create(self, values):
        stmt = insert(bookings).values(**values).returning(*bookings.c)
        return self.gateway.execute(stmt).first()

    def update(self, booking_id, values):
        if not values:
            return self.find_by_id(booking_id)
        stmt = (
            update(bookings)
            .where(bookings.c.booking_id == booking_id)
            .values(**values)
            .returning(*bookings.c)
        )
        return self.gateway.execute(stmt).first()

    def delete(self, booking_id):
        stmt = delete(bookings).where(bookings.c.booking_id == booking_id).returning(*bookings.c)
        return self.gateway.execute(stmt).first()
