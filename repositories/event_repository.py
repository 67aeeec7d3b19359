# repositories/event_repository.py

from sqlalchemy import delete, func, insert, select, update

from repositories.filters import bookings, events, rooming_lists


class EventRepository:

    def __init__(self, gateway):
        self.gateway = gateway

    def list_with_counts(self):
        stmt = (
            select(
                events,
                func.count(rooming_lists.c.rooming_list_id.distinct()).label('rooming_list_count'),
                func.count(bookings.c.booking_id.distinct()).label('booking_count'),
            )
            .select_from(
                events
                .outerjoin(rooming_lists, events.c.event_id == rooming_lists.c.event_id)
                .outerjoin(bookings, events.c.event_id == bookings.c.event_id)
            )
            .group_by(*events.c)
            .order_by(events.c.created_at.desc(), events.c.event_id.desc())
        )
        return self.gateway.execute(stmt).rows

    def find_by_id(self, event_id):
        stmt = select(events).where(events.c.event_id == event_id)
        return self.gateway.execute(stmt).first()

    def exists(self, event_id):
        stmt = select(events.c.event_id).where(events.c.event_id == event_id)
        return self.gateway.execute(stmt).first() is not None

    def create(self, values):
        stmt = insert(events).values(**values).returning(*events.c)
        return self.gateway.execute(stmt).first()

    def update(self, event_id, values):
        if not values:
            return self.find_by_id(event_id)
        stmt = (
            update(events)
            .where(events.c.event_id == event_id)
            .values(**values)
            .returning(*events.c)
        )
        return self.gateway.execute(stmt).first()

    def delete(self, event_id):
        stmt = delete(events).where(events.c.event_id == event_id).returning(*events.c)
        return self.gateway.execute(stmt).first()

    def count_rooming_lists(self, event_id):
        stmt = select(func.count()).select_from(rooming_lists).where(rooming_lists.c.event_id == event_id)
        return self.gateway.execute(stmt).scalar() or 0

    def count_bookings(self, event_id):
        stmt = select(func.count()).select_from(bookings).where(bookings.c.event_id == event_id)
        return self.gateway.execute(stmt).scalar() or 0

    def list_rooming_lists(self, event_id):
        stmt = (
            select(rooming_lists, events.c.event_name)
            .select_from(rooming_lists.join(events, rooming_lists.c.event_id == events.c.event_id))
            .where(rooming_lists.c.event_id == event_id)
            .order_by(rooming_lists.c.cut_off_date, rooming_lists.c.rooming_list_id)
        )
        return self.gateway.execute(stmt).rows
