"""Test environment: settings are read at import time, so set them before tasktracker loads."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("TASK_STORE_BACKEND", "sql")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-bytes")
