# repositories/user_repository.py

from sqlalchemy import insert, or_, select

from models.user import User

users = User.__table__

PUBLIC_COLUMNS = (users.c.id, users.c.username, users.c.email, users.c.created_at)


class UserRepository:

    def __init__(self, gateway):
        self.gateway = gateway

    def find_by_username_or_email(self, identifier):
        stmt = select(users).where(or_(users.c.username == identifier, users.c.email == identifier))
        return self.gateway.execute(stmt).first()

    def find_by_id(self, user_id):
        stmt = select(*PUBLIC_COLUMNS).where(users.c.id == user_id)
        return self.gateway.execute(stmt).first()

    def exists(self, username, email):
        stmt = select(users.c.id).where(or_(users.c.username == username, users.c.email == email))
        return self.gateway.execute(stmt).first() is not None

    def create(self, username, email, password_hash):
        stmt = (
            insert(users)
            .values(username=username, email=email, password=password_hash)
            .returning(*PUBLIC_COLUMNS)
        )
        return self.gateway.execute(stmt).first()
