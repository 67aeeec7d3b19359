# repositories/rooming_list_repository.py

from sqlalchemy import delete, insert, select, update

from repositories.filters import RoomingListFilters, build_rooming_list_query, events, rooming_lists


class RoomingListRepository:

    def __init__(self, gateway):
        self.gateway = gateway

    def list(self, filters=None):
        stmt = build_rooming_list_query(filters or RoomingListFilters())
        return self.gateway.execute(stmt).rows

    def find_by_id(self, rooming_list_id):
        stmt = (
            select(rooming_lists, events.c.event_name)
            .select_from(rooming_lists.outerjoin(events, rooming_lists.c.event_id == events.c.event_id))
            .where(rooming_lists.c.rooming_list_id == rooming_list_id)
        )
        return self.gateway.execute(stmt).first()

    def exists(self, rooming_list_id):
        stmt = select(rooming_lists.c.rooming_list_id).where(rooming_lists.c.rooming_list_id == rooming_list_id)
        return self.gateway.execute(stmt).first() is not None

    def create(self, values):
        stmt = insert(rooming_lists).values(**values).returning(*rooming_lists.c)
        return self.gateway.execute(stmt).first()

    def update(self, rooming_list_id, values):
        if not values:
            return self.find_by_id(rooming_list_id)
        stmt = (
            update(rooming_lists)
            .where(rooming_lists.c.rooming_list_id == rooming_list_id)
            .values(**values)
            .returning(*rooming_lists.c)
        )
        return self.gateway.execute(stmt).first()

    def delete(self, rooming_list_id):
        stmt = (
            delete(rooming_lists)
            .where(rooming_lists.c.rooming_list_id == rooming_list_id)
            .returning(*rooming_lists.c)
        )
        return self.gateway.execute(stmt).first()
