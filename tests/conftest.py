import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.config import Settings
from todo_api.app.main import create_app
from todo_api.app.services.todo_store import TodoStore


@pytest.fixture
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture
def app(store):
    return create_app(Settings(), store=store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
