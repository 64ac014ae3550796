"""Session-scoped persistence for meal records.

Every operation takes the owning session id explicitly and filters on it, so a
meal is never read or changed through a request presenting another session.
"""
import logging
import sqlite3
import uuid
from datetime import datetime
from typing import Any, Optional

from ..database import DatabaseManager, MEALS_TABLE, db_manager
from ..models.meal import Meal, MealCreate, MealUpdate

logger = logging.getLogger(__name__)

# Updatable model fields and the columns they map to.
_UPDATABLE_COLUMNS = {
    "name": "name",
    "description": "description",
    "date_time": "date_time",
    "diet": "diet",
}


def _row_to_meal(row) -> Meal:
    """Convert SQLite row to Meal model."""
    return Meal(
        id=row["id"],
        session_id=row["session_id"],
        name=row["name"],
        description=row["description"],
        date_time=row["date_time"],
        diet=bool(row["diet"]),
    )


def _to_column_value(value: Any) -> Any:
    """Convert a model value to its SQLite representation."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class MealStore:
    """Queries over the meals table, always constrained to one session."""

    def __init__(self, database: DatabaseManager):
        self.database = database

    def list_meals(self, session_id: str) -> list[Meal]:
        """Get all meals of a session ordered by date_time ascending."""
        with self.database.get_meals_conn() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                SELECT * FROM {MEALS_TABLE}
                WHERE session_id = ?
                ORDER BY date_time ASC, rowid ASC
                """,
                (session_id,),
            )
            rows = cursor.fetchall()

        return [_row_to_meal(row) for row in rows]

    def get_meal(self, session_id: str, meal_id: str) -> Optional[Meal]:
        """Get one meal, or None when it is missing or owned by another session."""
        with self.database.get_meals_conn() as conn:
            return self._fetch(conn, session_id, meal_id)

    def create_meal(self, session_id: str, payload: MealCreate) -> Meal:
        """Insert a new meal under the session with a fresh id."""
        meal = Meal(
            id=str(uuid.uuid4()),
            session_id=session_id,
            name=payload.name,
            description=payload.description,
            date_time=payload.date_time,
            diet=payload.diet,
        )
        with self.database.get_meals_conn() as conn:
            conn.execute(
                f"""
                INSERT INTO {MEALS_TABLE} (id, session_id, name, description, date_time, diet)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    meal.id,
                    meal.session_id,
                    meal.name,
                    meal.description,
                    _to_column_value(meal.date_time),
                    _to_column_value(meal.diet),
                ),
            )

        logger.info(f"[MEALS] Created meal {meal.id}")
        return meal

    def update_meal(self, session_id: str, meal_id: str, payload: MealUpdate) -> Optional[Meal]:
        """
        Apply a partial update to a meal.

        Only the fields explicitly present in ``payload`` change. Returns the
        updated meal, or None when the meal is missing or foreign.
        """
        changes = payload.changes()

        with self.database.get_meals_conn() as conn:
            if not changes:
                return self._fetch(conn, session_id, meal_id)

            assignments = ", ".join(f"{_UPDATABLE_COLUMNS[field]} = ?" for field in changes)
            params = [_to_column_value(value) for value in changes.values()]
            cursor = conn.execute(
                f"UPDATE {MEALS_TABLE} SET {assignments} WHERE id = ? AND session_id = ?",
                (*params, meal_id, session_id),
            )
            if cursor.rowcount == 0:
                logger.debug(f"[MEALS] No meal {meal_id} to update for this session")
                return None

            meal = self._fetch(conn, session_id, meal_id)

        logger.info(f"[MEALS] Updated meal {meal_id}: {', '.join(changes)}")
        return meal

    def delete_meal(self, session_id: str, meal_id: str) -> bool:
        """Delete a meal; returns False when nothing matched."""
        with self.database.get_meals_conn() as conn:
            cursor = conn.execute(
                f"DELETE FROM {MEALS_TABLE} WHERE id = ? AND session_id = ?",
                (meal_id, session_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"[MEALS] Deleted meal {meal_id}")
        return deleted

    def _fetch(self, conn: sqlite3.Connection, session_id: str, meal_id: str) -> Optional[Meal]:
        cursor = conn.cursor()
        cursor.execute(
            f"SELECT * FROM {MEALS_TABLE} WHERE id = ? AND session_id = ?",
            (meal_id, session_id),
        )
        row = cursor.fetchone()
        return _row_to_meal(row) if row else None


# Singleton instance
meal_store = MealStore(db_manager)


def get_meal_store() -> MealStore:
    """FastAPI dependency returning the shared meal store."""
    return meal_store
