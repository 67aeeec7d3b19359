# repositories/data_repository.py

from sqlalchemy import delete, insert

from repositories.filters import bookings, events, links, rooming_lists

# children before parents
CLEAR_ORDER = (links, rooming_lists, bookings, events)

IDENTITY_COLUMNS = (
    (events, 'event_id'),
    (bookings, 'booking_id'),
    (rooming_lists, 'rooming_list_id'),
    (links, 'id'),
)


class DataRepository:
    """Bulk statements used by the sample-data loader."""

    def __init__(self, gateway):
        self.gateway = gateway

    def clear_all(self):
        deleted = {}
        for table in CLEAR_ORDER:
            deleted[table.name] = self.gateway.execute(delete(table)).rows_affected
        return deleted

    def reset_identities(self):
        for table, column in IDENTITY_COLUMNS:
            self.gateway.reset_identity(table, column)

    def counts(self):
        return {
            'events': self.gateway.count(events),
            'bookings': self.gateway.count(bookings),
            'roomingLists': self.gateway.count(rooming_lists),
            'roomingListBookings': self.gateway.count(links),
        }

    def _insert_many(self, table, rows):
        if not rows:
            return 0
        self.gateway.execute(insert(table), rows)
        return len(rows)

    def insert_events(self, rows):
        return self._insert_many(events, rows)

    def insert_bookings(self, rows):
        return self._insert_many(bookings, rows)

    def insert_rooming_lists(self, rows):
        return self._insert_many(rooming_lists, rows)

    def insert_links(self, rows):
        return self._insert_many(links, rows)
