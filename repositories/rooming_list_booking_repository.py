# repositories/rooming_list_booking_repository.py

from collections import defaultdict

from sqlalchemy import delete, insert, select

from repositories.filters import bookings, events, links, rooming_lists


class RoomingListBookingRepository:
    """Maintains the rooming_list_bookings junction table."""

    def __init__(self, gateway):
        self.gateway = gateway

    def is_linked(self, booking_id, rooming_list_id):
        stmt = select(links.c.id).where(
            links.c.booking_id == booking_id,
            links.c.rooming_list_id == rooming_list_id,
        )
        return self.gateway.execute(stmt).first() is not None

    def link(self, booking_id, rooming_list_id):
        stmt = (
            insert(links)
            .values(booking_id=booking_id, rooming_list_id=rooming_list_id)
            .returning(*links.c)
        )
        return self.gateway.execute(stmt).first()

    def unlink(self, booking_id, rooming_list_id):
        stmt = (
            delete(links)
            .where(links.c.booking_id == booking_id, links.c.rooming_list_id == rooming_list_id)
            .returning(*links.c)
        )
        return self.gateway.execute(stmt).first()

    def delete_for_booking(self, booking_id):
        stmt = delete(links).where(links.c.booking_id == booking_id)
        return self.gateway.execute(stmt).rows_affected

    def delete_for_rooming_list(self, rooming_list_id):
        stmt = delete(links).where(links.c.rooming_list_id == rooming_list_id)
        return self.gateway.execute(stmt).rows_affected

    def rooming_lists_for_booking(self, booking_id):
        stmt = (
            select(rooming_lists, events.c.event_name, links.c.booking_id)
            .select_from(
                rooming_lists
                .join(links, rooming_lists.c.rooming_list_id == links.c.rooming_list_id)
                .outerjoin(events, rooming_lists.c.event_id == events.c.event_id)
            )
            .where(links.c.booking_id == booking_id)
            .order_by(rooming_lists.c.cut_off_date, rooming_lists.c.rooming_list_id)
        )
        return self.gateway.execute(stmt).rows

    def bookings_for_rooming_list(self, rooming_list_id):
        return self.bookings_for_rooming_lists([rooming_list_id]).get(rooming_list_id, [])

    def bookings_for_rooming_lists(self, rooming_list_ids):
        """
        Fetch the bookings of many rooming lists with one IN query.

        Returns {rooming_list_id: [booking rows ordered by check-in date]}.
        Rooming lists without bookings are absent from the mapping.
        """
        ids = list(rooming_list_ids)
        if not ids:
            return {}

        stmt = (
            select(links.c.rooming_list_id, bookings, events.c.event_name)
            .select_from(
                links
                .join(bookings, links.c.booking_id == bookings.c.booking_id)
                .outerjoin(events, bookings.c.event_id == events.c.event_id)
            )
            .where(links.c.rooming_list_id.in_(ids))
            .order_by(bookings.c.check_in_date, bookings.c.booking_id)
        )

        grouped = defaultdict(list)
        for row in self.gateway.execute(stmt).rows:
            rooming_list_id = row.pop('rooming_list_id')
            grouped[rooming_list_id].append(row)
        return dict(grouped)
