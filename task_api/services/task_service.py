"""Task service: builds tasks and applies changes against the store."""
import logging
from typing import List, Optional
from uuid import uuid4

from ..models import Task, utcnow
from ..schemas.task import TaskCreate, TaskUpdate
from ..storage import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Owns the task store for the lifetime of the application."""

    def __init__(self, store: Optional[TaskStore] = None):
        self._store = store if store is not None else TaskStore()

    @property
    def task_count(self) -> int:
        return len(self._store)

    def list_tasks(self) -> List[Task]:
        return self._store.list()

    def create_task(self, payload: TaskCreate) -> Task:
        """Create a task with a fresh id and matching timestamps.

        Args:
            payload: Validated creation request; ``title`` is already trimmed.

        Returns:
            The stored task.
        """
        now = utcnow()
        task = Task(
            id=str(uuid4()),
            title=payload.title,
            description=payload.description,
            completed=False,
            created_at=now,
            updated_at=now,
        )
        self._store.insert(task)
        logger.info("Created task %s", task.id)
        return task

    def get_task(self, task_id: str) -> Task:
        return self._store.get(task_id)

    def update_task(self, task_id: str, payload: Optional[TaskUpdate] = None) -> Task:
        """Overwrite the provided fields; ``updated_at`` is refreshed even when none are."""
        changes = payload.model_dump(exclude_unset=True) if payload is not None else {}
        task = self._store.update(task_id, changes)
        logger.info("Updated task %s (%s)", task_id, ", ".join(sorted(changes)) or "no fields")
        return task

    def delete_task(self, task_id: str) -> None:
        self._store.delete(task_id)
        logger.info("Deleted task %s", task_id)

    def reset(self) -> None:
        self._store.clear()
