"""Core app configuration, database and security."""

from tasktracker.core.config import get_settings, settings
from tasktracker.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
