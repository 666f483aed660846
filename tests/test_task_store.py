import threading

import pytest

from task_api.errors import TaskNotFoundError
from task_api.models import Task
from task_api.storage import TaskStore


def test_insert_and_get(store: TaskStore):
    task = Task(title="Write tests")
    store.insert(task)

    assert task.id in store
    assert store.get(task.id) == task


def test_list_preserves_insertion_order(store: TaskStore):
    tasks = [Task(title=title) for title in ("b", "a", "c")]
    for task in tasks:
        store.insert(task)

    assert [task.title for task in store.list()] == ["b", "a", "c"]


def test_get_returns_copies(store: TaskStore):
    task = Task(title="Original")
    store.insert(task)

    fetched = store.get(task.id)
    fetched.title = "Changed outside"
    task.title = "Changed by caller"

    assert store.get(task.id).title == "Original"


def test_update_applies_changes_and_refreshes_updated_at(store: TaskStore):
    task = Task(title="Old")
    store.insert(task)

    updated = store.update(task.id, {"title": "New", "completed": True})

    assert updated.title == "New"
    assert updated.completed is True
    assert updated.description == ""
    assert updated.updated_at >= task.updated_at
    assert updated.created_at == task.created_at


def test_update_never_moves_updated_at_backwards(store: TaskStore, monkeypatch):
    task = Task(title="Clock")
    store.insert(task)
    earlier = task.updated_at.replace(year=task.updated_at.year - 1)
    monkeypatch.setattr("task_api.storage.task_store.utcnow", lambda: earlier)

    updated = store.update(task.id, {})

    assert updated.updated_at == task.updated_at


@pytest.mark.parametrize("operation", ["get", "delete"])
def test_missing_task_raises_not_found(store: TaskStore, operation):
    with pytest.raises(TaskNotFoundError) as excinfo:
        getattr(store, operation)("missing")
    assert excinfo.value.task_id == "missing"
    assert excinfo.value.status_code == 404


def test_update_missing_task_raises_not_found(store: TaskStore):
    with pytest.raises(TaskNotFoundError):
        store.update("missing", {"completed": True})


def test_delete_removes_task(store: TaskStore):
    task = Task(title="Gone")
    store.insert(task)

    store.delete(task.id)

    assert task.id not in store
    assert len(store) == 0


def test_clear_empties_store(store: TaskStore):
    for title in ("one", "two"):
        store.insert(Task(title=title))

    store.clear()

    assert store.list() == []


def test_concurrent_inserts_are_all_kept(store: TaskStore):
    def worker():
        for _ in range(50):
            store.insert(Task(title="parallel"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 400
