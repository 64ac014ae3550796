"""SQLite database connection manager for meal data."""
import os
import sqlite3
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from .config import get_settings

log = logging.getLogger(__name__)

MEALS_TABLE = "meals"

_CREATE_MEALS_TABLE = f"""
CREATE TABLE IF NOT EXISTS {MEALS_TABLE} (
    id TEXT PRIMARY KEY,
    session_id TEXT NOT NULL,
    name TEXT NOT NULL,
    description TEXT NOT NULL,
    date_time TEXT NOT NULL,
    diet INTEGER NOT NULL CHECK (diet IN (0, 1))
)
"""

_CREATE_MEALS_INDEXES = (
    f"CREATE INDEX IF NOT EXISTS idx_meals_session_id ON {MEALS_TABLE}(session_id)",
    f"CREATE INDEX IF NOT EXISTS idx_meals_session_date_time ON {MEALS_TABLE}(session_id, date_time)",
)


class DatabaseManager:
    """
    SQLite database manager for the meals table.
    Hands out one short-lived connection per unit of work; writes are
    committed when the block exits cleanly and rolled back otherwise.
    """

    def __init__(self, settings=None, db_path: Optional[str] = None):
        self.settings = settings or get_settings()
        self.db_path = db_path or self.settings.meals_db_path

    @contextmanager
    def get_meals_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a read/write connection to the meals database."""
        yield from self._connect(self.db_path)

    def create_schema(self) -> None:
        """Create the meals table and its indexes if they do not exist."""
        with self.get_meals_conn() as conn:
            conn.execute(_CREATE_MEALS_TABLE)
            for statement in _CREATE_MEALS_INDEXES:
                conn.execute(statement)
        log.info(f"[DB] Schema ready at {self.db_path}")

    def drop_schema(self) -> None:
        """Drop the meals table (indexes go with it)."""
        with self.get_meals_conn() as conn:
            conn.execute(f"DROP TABLE IF EXISTS {MEALS_TABLE}")
        log.info(f"[DB] Dropped {MEALS_TABLE} at {self.db_path}")

    def _connect(self, db_path: str) -> Generator[sqlite3.Connection, None, None]:
        """
        Create a connection with dict-like row access.
        Commits on success; rolls back and re-raises on any error.
        """
        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        conn = sqlite3.connect(db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            log.error(f"[DB] Database error: {e}")
            conn.rollback()
            raise
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


# Singleton instance
db_manager = DatabaseManager()
