import threading
from typing import Any, Dict, List, Mapping

from ..errors import TaskNotFoundError
from ..models import Task, utcnow


class TaskStore:
    """In-memory task storage keyed by id.

    Enumeration follows insertion order. Every operation holds one lock so
    concurrent request threads see each mutation as a single step. Tasks are
    copied on the way in and out; callers never share a stored instance.
    """

    def __init__(self):
        self._store: Dict[str, Task] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._store

    def list(self) -> List[Task]:
        with self._lock:
            return [task.model_copy() for task in self._store.values()]

    def insert(self, task: Task) -> None:
        with self._lock:
            self._store[task.id] = task.model_copy()

    def get(self, task_id: str) -> Task:
        with self._lock:
            return self._lookup(task_id).model_copy()

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        """Apply ``changes`` to the stored task and refresh ``updated_at``.

        ``updated_at`` never moves backwards, even if the clock does.
        """
        with self._lock:
            task = self._lookup(task_id)
            for field, value in changes.items():
                setattr(task, field, value)
            task.updated_at = max(utcnow(), task.updated_at)
            return task.model_copy()

    def delete(self, task_id: str) -> None:
        with self._lock:
            self._lookup(task_id)
            del self._store[task_id]

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def _lookup(self, task_id: str) -> Task:
        task = self._store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
