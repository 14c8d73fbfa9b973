"""
Shared fixtures.

Every test gets its own application backed by a fresh SQLite file in
``tmp_path``, so tests never share state.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from tsse_api.app.core.config import Settings
from tsse_api.app.core.db import Database
from tsse_api.app.main import create_app
from tsse_api.app.repositories.exercise_repository import ExerciseRepository
from tsse_api.app.repositories.schedule_repository import ScheduleRepository
from tsse_api.app.repositories.workout_repository import WorkoutRepository

USERNAME = "tsse"
PASSWORD = "sport"


def basic_auth(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=str(tmp_path / "tsse-test.db"),
        auth_username=USERNAME,
        auth_password=PASSWORD,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Authenticated client; entering the context runs the migrations."""
    with TestClient(app, headers=basic_auth(USERNAME, PASSWORD)) as test_client:
        yield test_client


@pytest.fixture
def anonymous_client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(tmp_path) -> Database:
    db = Database(str(tmp_path / "tsse-repo.db"))
    db.init()
    return db


@pytest.fixture
def workout_repository(database) -> WorkoutRepository:
    return WorkoutRepository(database)


@pytest.fixture
def schedule_repository(database) -> ScheduleRepository:
    return ScheduleRepository(database)


@pytest.fixture
def exercise_repository(database) -> ExerciseRepository:
    return ExerciseRepository(database)
