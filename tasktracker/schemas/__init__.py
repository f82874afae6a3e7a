"""Pydantic request/response schemas."""

from tasktracker.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from tasktracker.schemas.health import HealthResponse
from tasktracker.schemas.task import (
    TaskCreate,
    TaskFilter,
    TaskRead,
    TaskStatus,
    TaskStatusUpdate,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "TaskCreate",
    "TaskFilter",
    "TaskRead",
    "TaskStatus",
    "TaskStatusUpdate",
    "TokenResponse",
]
