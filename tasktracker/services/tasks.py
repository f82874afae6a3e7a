"""Task lifecycle: validation and ownership rules on top of a TaskStore."""

import logging

from tasktracker.schemas.task import TASK_STATUS_VALUES, TaskFilter, TaskRead, parse_task_status
from tasktracker.services.errors import InvalidFilter, InvalidInput, InvalidStatus, TaskNotFound
from tasktracker.services.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """
    Owner-scoped task operations.

    Every call takes the authenticated owner's id; the store never sees a query
    that is not restricted to that owner. Invalid input is rejected before the
    store is touched.
    """

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def list_tasks(self, owner_id: int, task_filter: TaskFilter | None = None) -> list[TaskRead]:
        """Return the owner's tasks, optionally narrowed by status and search text."""
        task_filter = task_filter or TaskFilter()
        if task_filter.status is not None:
            status = parse_task_status(task_filter.status)
            if status is None:
                raise InvalidFilter(
                    f"status must be one of {sorted(TASK_STATUS_VALUES)}, "
                    f"got {task_filter.status!r}"
                )
            task_filter = task_filter.model_copy(update={"status": status.value})
        return self.store.list(owner_id, task_filter)

    def get_task_by_id(self, task_id: int, owner_id: int) -> TaskRead:
        task = self.store.get(task_id, owner_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def create_task(self, owner_id: int, title: str, description: str | None = "") -> TaskRead:
        """Create an OPEN task for the owner. title must be non-empty."""
        if not title or not title.strip():
            raise InvalidInput("title must be a non-empty string")
        task = self.store.create(owner_id, title, description or "")
        logger.info("Task created id=%s owner=%s", task.id, owner_id)
        return task

    def update_task_status(self, task_id: int, owner_id: int, new_status: object) -> TaskRead:
        """Set the status of the owner's task. Any state may follow any other."""
        status = parse_task_status(new_status)
        if status is None:
            raise InvalidStatus(f'"{new_status}" is an invalid status')
        task = self.store.update_status(task_id, owner_id, status)
        if task is None:
            raise TaskNotFound(task_id)
        logger.info("Task status updated id=%s owner=%s status=%s", task_id, owner_id, status.value)
        return task

    def delete_task(self, task_id: int, owner_id: int) -> None:
        if self.store.delete(task_id, owner_id) == 0:
            raise TaskNotFound(task_id)
        logger.info("Task deleted id=%s owner=%s", task_id, owner_id)
