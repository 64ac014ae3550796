"""
Pytest fixtures for Daily Diet API tests.
"""
import atexit
import os
import shutil
import tempfile
import pytest
from datetime import datetime, timedelta
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Keep the application's default database out of the working tree; settings
# are cached on first import, so this must run before any server import.
DEFAULT_DATA_DIR = tempfile.mkdtemp(prefix="daily-diet-")
atexit.register(shutil.rmtree, DEFAULT_DATA_DIR, ignore_errors=True)
os.environ.setdefault("DAILY_DIET_DATA_PATH", DEFAULT_DATA_DIR)

from fastapi.testclient import TestClient  # noqa: E402

from server.daily_diet_api.database import DatabaseManager  # noqa: E402
from server.daily_diet_api.main import app  # noqa: E402
from server.daily_diet_api.models.meal import Meal  # noqa: E402
from server.daily_diet_api.services.meal_store import MealStore, get_meal_store  # noqa: E402


BASE_TIME = datetime(2024, 3, 4, 8, 0, 0)


@pytest.fixture
def database(tmp_path):
    """A DatabaseManager backed by a fresh SQLite file with the schema applied."""
    manager = DatabaseManager(db_path=str(tmp_path / "meals.db"))
    manager.create_schema()
    return manager


@pytest.fixture
def store(database):
    """MealStore over the per-test database."""
    return MealStore(database)


@pytest.fixture
def make_client(store):
    """
    Factory fixture for HTTP clients sharing the per-test store.

    Each client keeps its own cookie jar, so two clients behave like two
    browsers with separate sessions.
    """
    clients = []
    app.dependency_overrides[get_meal_store] = lambda: store

    def _make_client() -> TestClient:
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make_client

    # Cleanup
    for client in clients:
        client.close()
    app.dependency_overrides.pop(get_meal_store, None)


@pytest.fixture
def client(make_client):
    """A single HTTP client with an empty cookie jar."""
    return make_client()


@pytest.fixture
def meal_payload():
    """Factory for valid create-meal request bodies."""

    def _payload(**overrides) -> dict:
        body = {
            "name": "Oatmeal",
            "description": "Oats with banana",
            "dateTime": "2024-03-04T08:00:00",
            "diet": True,
        }
        body.update(overrides)
        return body

    return _payload


def make_meals(flags, session_id: str = "session-a", start: datetime = BASE_TIME) -> list[Meal]:
    """
    Build chronologically spaced meals from a list of diet flags.

    Args:
        flags: Diet flag per meal, in chronological order
        session_id: Owning session for every meal
        start: Timestamp of the first meal; each next meal is one hour later

    Returns:
        List of Meal models
    """
    return [
        Meal(
            id=f"meal-{index}",
            session_id=session_id,
            name=f"Meal {index}",
            description="",
            date_time=start + timedelta(hours=index),
            diet=flag,
        )
        for index, flag in enumerate(flags)
    ]


@pytest.fixture
def meals_from_flags():
    """Fixture wrapper around make_meals."""
    return make_meals
