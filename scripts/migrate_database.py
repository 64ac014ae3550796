#!/usr/bin/env python3
"""
Create or drop the meals table for the Daily Diet API.

Usage:
    python scripts/migrate_database.py up
    python scripts/migrate_database.py down
    python scripts/migrate_database.py reset --db ./daily_diet.db
"""
import argparse
import sqlite3
import sys
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# Settings are cached on first import, so .env must be loaded before any
# server import.
load_dotenv(find_dotenv(usecwd=True))

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from server.daily_diet_api.database import DatabaseManager, MEALS_TABLE  # noqa: E402

ACTIONS = ("up", "down", "reset")


def run_migration(action: str, db_path: Optional[str] = None) -> DatabaseManager:
    """
    Apply a migration action to the meals database.

    Args:
        action: "up" creates the schema, "down" drops it, "reset" does both
        db_path: Database file; defaults to the configured location

    Returns:
        The DatabaseManager the action ran against
    """
    if action not in ACTIONS:
        raise ValueError(f"Unknown action {action!r}; expected one of {', '.join(ACTIONS)}")

    manager = DatabaseManager(db_path=db_path)

    if action in ("down", "reset"):
        manager.drop_schema()
    if action in ("up", "reset"):
        manager.create_schema()

    return manager


def count_meals(manager: DatabaseManager) -> Optional[int]:
    """Number of stored meals, or None when the table does not exist."""
    with manager.get_meals_conn() as conn:
        try:
            return conn.execute(f"SELECT COUNT(*) FROM {MEALS_TABLE}").fetchone()[0]
        except sqlite3.OperationalError:
            return None


def main():
    parser = argparse.ArgumentParser(description="Daily Diet database migrations")
    parser.add_argument("action", choices=ACTIONS, help="Migration to run")
    parser.add_argument("--db", dest="db_path", help="SQLite file (default: configured path)")
    args = parser.parse_args()

    print("=" * 60)
    print(f"Daily Diet migration: {args.action}")
    print("=" * 60)

    manager = run_migration(args.action, args.db_path)
    meals = count_meals(manager)

    print(f"\nDatabase: {manager.db_path}")
    if meals is None:
        print(f"  Table {MEALS_TABLE}: absent")
    else:
        print(f"  Table {MEALS_TABLE}: {meals} rows")


if __name__ == "__main__":
    main()
