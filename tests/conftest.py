# Shared fixtures: a fresh store and a fresh app per test so ids always
# start at 1.
import pytest
from fastapi.testclient import TestClient

from task_api.config import Settings
from task_api.main import create_app
from task_api.repositories.tasks_repo import TaskStore


@pytest.fixture
def settings():
    return Settings(
        host="127.0.0.1",
        port=3000,
        public_url="http://localhost:3000",
        allowed_origins=["*"],
        request_logging=True,
    )


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def client(store, settings):
    return TestClient(create_app(store=store, settings=settings))
