"""SQLAlchemy ORM models."""

from tasktracker.models.base import Base
from tasktracker.models.task import Task
from tasktracker.models.user import User

__all__ = ["Base", "Task", "User"]
