"""Task storage: owner-scoped CRUD and filtered listing behind a swappable interface."""

import itertools
import logging
import threading
from abc import ABC, abstractmethod

from sqlalchemy import func
from sqlalchemy.orm import Session

from tasktracker.models import Task
from tasktracker.schemas.task import TaskFilter, TaskRead, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore(ABC):
    """
    Collection of task records scoped by owner.

    A task owned by someone else is reported exactly like a missing task.
    """

    @abstractmethod
    def list(self, owner_id: int, task_filter: TaskFilter | None = None) -> list[TaskRead]:
        """Owner's tasks in insertion order, narrowed by status and/or search (AND)."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int, owner_id: int) -> TaskRead | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, owner_id: int, title: str, description: str) -> TaskRead:
        raise NotImplementedError

    @abstractmethod
    def update_status(
        self, task_id: int, owner_id: int, new_status: TaskStatus
    ) -> TaskRead | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int, owner_id: int) -> int:
        """Remove the owner's task; return the number of records removed (0 or 1)."""
        raise NotImplementedError


def _status_value(task_filter: TaskFilter | None) -> str | None:
    if task_filter is None or task_filter.status is None:
        return None
    status = task_filter.status
    return status.value if isinstance(status, TaskStatus) else status


def _search_text(task_filter: TaskFilter | None) -> str | None:
    if task_filter is None or not task_filter.search:
        return None
    return task_filter.search


class InMemoryTaskStore(TaskStore):
    """
    Process-local store. Each instance owns its records; nothing is shared globally.

    Every mutation holds the lock for its single read-modify-write, and callers
    always receive copies so stored records change only through the store.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, TaskRead] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list(self, owner_id: int, task_filter: TaskFilter | None = None) -> list[TaskRead]:
        status = _status_value(task_filter)
        search = _search_text(task_filter)
        with self._lock:
            tasks = [t for t in self._tasks.values() if t.user_id == owner_id]
            if status is not None:
                tasks = [t for t in tasks if t.status.value == status]
            if search is not None:
                tasks = [t for t in tasks if search in t.title or search in t.description]
            return [t.model_copy() for t in tasks]

    def get(self, task_id: int, owner_id: int) -> TaskRead | None:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None or task.user_id != owner_id:
            return None
        return task.model_copy()

    def create(self, owner_id: int, title: str, description: str) -> TaskRead:
        with self._lock:
            task = TaskRead(
                id=next(self._ids),
                title=title,
                description=description,
                status=TaskStatus.OPEN,
                user_id=owner_id,
            )
            self._tasks[task.id] = task
        return task.model_copy()

    def update_status(
        self, task_id: int, owner_id: int, new_status: TaskStatus
    ) -> TaskRead | None:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None or task.user_id != owner_id:
                return None
            task.status = new_status
            return task.model_copy()

    def delete(self, task_id: int, owner_id: int) -> int:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None or task.user_id != owner_id:
                return 0
            del self._tasks[task_id]
            return 1


class SqlTaskStore(TaskStore):
    """Store backed by the tasks table; commits after each mutation."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _contains(self, column, needle: str):
        # LIKE ignores case on SQLite, so match on character position instead.
        bind = self._session.get_bind()
        if bind.dialect.name == "postgresql":
            return func.strpos(column, needle) > 0
        return func.instr(column, needle) > 0

    def _owned(self, task_id: int, owner_id: int):
        return self._session.query(Task).filter(Task.id == task_id, Task.user_id == owner_id)

    def list(self, owner_id: int, task_filter: TaskFilter | None = None) -> list[TaskRead]:
        query = self._session.query(Task).filter(Task.user_id == owner_id)
        status = _status_value(task_filter)
        if status is not None:
            query = query.filter(Task.status == status)
        search = _search_text(task_filter)
        if search is not None:
            query = query.filter(
                self._contains(Task.title, search) | self._contains(Task.description, search)
            )
        return [TaskRead.model_validate(row) for row in query.order_by(Task.id).all()]

    def get(self, task_id: int, owner_id: int) -> TaskRead | None:
        row = self._owned(task_id, owner_id).first()
        return TaskRead.model_validate(row) if row is not None else None

    def create(self, owner_id: int, title: str, description: str) -> TaskRead:
        row = Task(
            title=title,
            description=description,
            status=TaskStatus.OPEN.value,
            user_id=owner_id,
        )
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return TaskRead.model_validate(row)

    def update_status(
        self, task_id: int, owner_id: int, new_status: TaskStatus
    ) -> TaskRead | None:
        row = self._owned(task_id, owner_id).first()
        if row is None:
            return None
        row.status = new_status.value
        self._session.commit()
        self._session.refresh(row)
        return TaskRead.model_validate(row)

    def delete(self, task_id: int, owner_id: int) -> int:
        deleted_count = self._owned(task_id, owner_id).delete(synchronize_session=False)
        self._session.commit()
        if deleted_count:
            logger.debug("Deleted task id=%s owner=%s", task_id, owner_id)
        return deleted_count
