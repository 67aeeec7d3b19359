# db/gateway.py

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db.errors import ConstraintViolation, StorageError
from db.extensions import db

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    rows: list = field(default_factory=list)
    rows_affected: int = 0

    def first(self):
        return self.rows[0] if self.rows else None

    def scalar(self):
        row = self.first()
        if row is None:
            return None
        return next(iter(row.values()))


class Gateway:
    """
    Executes SQLAlchemy statements against one session and hands back plain rows.

    Statements always carry their values as bound parameters; nothing is
    formatted into SQL text. Driver failures surface as StorageError, with
    ConstraintViolation split out so services can report business conflicts.
    """

    def __init__(self, session):
        self.session = session

    @property
    def dialect(self):
        return self.session.get_bind().dialect.name

    def execute(self, statement, params=None):
        try:
            if params is None:
                result = self.session.execute(statement)
            else:
                result = self.session.execute(statement, params)
        except IntegrityError as e:
            logger.warning(f"⚠️  Constraint violation: {e.orig}")
            raise ConstraintViolation(f"Constraint violation: {e.orig}") from e
        except SQLAlchemyError as e:
            logger.error(f"❌ Statement failed: {str(e)}")
            raise StorageError(f"Database error: {str(e)}") from e

        if result.returns_rows:
            rows = [dict(row) for row in result.mappings().all()]
            return QueryResult(rows=rows, rows_affected=len(rows))
        return QueryResult(rows=[], rows_affected=result.rowcount)

    @contextmanager
    def transaction(self):
        """Commit everything executed inside the block, or nothing."""
        try:
            yield self
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def count(self, table):
        return self.execute(select(func.count()).select_from(table)).scalar() or 0

    def reset_identity(self, table, column):
        """
        Point the identity sequence of ``table.column`` just past its current maximum.

        Needed on PostgreSQL after bulk deletes or inserts that supplied explicit ids.
        SQLite allocates rowids from the table contents, so there is nothing to do.
        """
        if self.dialect != 'postgresql':
            return
        col = table.c[column]
        next_value = select(func.coalesce(func.max(col), 0) + 1).scalar_subquery()
        self.execute(
            select(
                func.setval(
                    func.pg_get_serial_sequence(table.name, column),
                    next_value,
                    False,
                )
            )
        )


def get_gateway():
    return Gateway(db.session)
