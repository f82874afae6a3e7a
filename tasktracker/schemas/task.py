"""Pydantic schemas for tasks: status enumeration, request payloads, and the task record."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Closed set of task states. Any state may move to any other."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


TASK_STATUS_VALUES: frozenset[str] = frozenset(s.value for s in TaskStatus)


def parse_task_status(value: object) -> TaskStatus | None:
    """Return the TaskStatus for value, or None if it is not a member of the enumeration."""
    if isinstance(value, TaskStatus):
        return value
    if isinstance(value, str) and value in TASK_STATUS_VALUES:
        return TaskStatus(value)
    return None


class TaskCreate(BaseModel):
    """Payload for creating a task. Status is always OPEN on creation."""

    title: str = Field(..., max_length=255, description="Short task title (non-empty)")
    description: str = Field(default="", description="Free-form description, may be empty")


class TaskFilter(BaseModel):
    """
    Optional listing filter.

    status is kept as a plain string so the service can reject values outside
    the enumeration; search is a case-sensitive substring of title or description.
    """

    status: str | None = Field(default=None, description="OPEN, IN_PROGRESS or DONE")
    search: str | None = Field(default=None, description="Substring of title or description")


class TaskStatusUpdate(BaseModel):
    """Payload for PATCH /tasks/{id}/status."""

    status: str = Field(..., description="New status: OPEN, IN_PROGRESS or DONE")


class TaskRead(BaseModel):
    """A persisted task as returned by every store and by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    user_id: int
