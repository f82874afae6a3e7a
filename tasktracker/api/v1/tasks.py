"""Task endpoints. Every route is scoped to the authenticated user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from tasktracker.api.v1.auth import get_current_user
from tasktracker.core.config import get_settings
from tasktracker.core.database import get_db
from tasktracker.schemas.auth import CurrentUser
from tasktracker.schemas.task import TaskCreate, TaskFilter, TaskRead, TaskStatusUpdate
from tasktracker.services.errors import (
    InvalidFilter,
    InvalidInput,
    InvalidStatus,
    TaskNotFound,
    TaskTrackerError,
)
from tasktracker.services.task_store import InMemoryTaskStore, SqlTaskStore
from tasktracker.services.tasks import TaskService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_task_service(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Dependency: TaskService over the store selected by TASK_STORE_BACKEND."""
    if get_settings().TASK_STORE_BACKEND == "memory":
        store = getattr(request.app.state, "memory_task_store", None)
        if store is None:
            store = request.app.state.memory_task_store = InMemoryTaskStore()
        return TaskService(store)
    return TaskService(SqlTaskStore(db))


def _to_http(e: TaskTrackerError) -> HTTPException:
    if isinstance(e, TaskNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    if isinstance(e, (InvalidFilter, InvalidInput, InvalidStatus)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)


@router.get("", response_model=list[TaskRead])
def get_tasks(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    search: str | None = None,
) -> list[TaskRead]:
    """List the user's tasks, optionally filtered by status and/or search text."""
    task_filter = TaskFilter(status=status_filter, search=search)
    logger.info(
        'User "%s" retrieving all tasks. Filters: %s',
        user.username,
        task_filter.model_dump_json(exclude_none=True),
    )
    try:
        return service.list_tasks(user.id, task_filter)
    except TaskTrackerError as e:
        raise _to_http(e) from e


@router.get("/{task_id}", response_model=TaskRead)
def get_task_by_id(
    task_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskRead:
    try:
        return service.get_task_by_id(task_id, user.id)
    except TaskTrackerError as e:
        raise _to_http(e) from e


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskRead:
    """Create a task for the user; it always starts OPEN."""
    logger.info('User "%s" creating a new task. Title: %r', user.username, body.title)
    try:
        return service.create_task(user.id, body.title, body.description)
    except TaskTrackerError as e:
        raise _to_http(e) from e


@router.patch("/{task_id}/status", response_model=TaskRead)
def update_task_status(
    task_id: int,
    body: TaskStatusUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskRead:
    try:
        return service.update_task_status(task_id, user.id, body.status)
    except TaskTrackerError as e:
        raise _to_http(e) from e


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    try:
        service.delete_task(task_id, user.id)
    except TaskTrackerError as e:
        raise _to_http(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
