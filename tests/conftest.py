import pytest
from fastapi.testclient import TestClient

from task_api.main import create_app
from task_api.services import TaskService
from task_api.storage import TaskStore


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def client(service: TaskService):
    """TestClient over a fresh application; every test starts with an empty store."""
    with TestClient(create_app(service)) as test_client:
        yield test_client


@pytest.fixture()
def create_task(client: TestClient):
    def _create(title: str = "Task", **fields) -> dict:
        response = client.post("/api/tasks", json={"title": title, **fields})
        assert response.status_code == 201
        return response.json()["data"]

    return _create
