# db/extensions.py

import logging
import sqlite3

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from sqlalchemy import event, text
from sqlalchemy.engine import Engine

db = SQLAlchemy()
migrate = Migrate()

logger = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """
    SQLite ships with foreign key enforcement switched off.
    Turn it on per connection so ON DELETE CASCADE behaves like PostgreSQL.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_limiter(app):
    """
    Attach a Flask-Limiter instance to ``app``.

    Limits, storage and the on/off switch come from the RATELIMIT_* config keys.
    """
    return Limiter(get_remote_address, app=app)


def check_database_health():
    """Check database connection health"""
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"❌ Database health check failed: {str(e)}")
        db.session.rollback()
        return False
