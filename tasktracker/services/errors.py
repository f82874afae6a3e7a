"""Typed failures raised by the task and auth services."""


class TaskTrackerError(Exception):
    """Base class for service failures; message is safe to show to the caller."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidFilter(TaskTrackerError):
    """Listing filter status is not a member of the status enumeration."""


class InvalidInput(TaskTrackerError):
    """Required create-task fields are missing or empty."""


class InvalidStatus(TaskTrackerError):
    """Status update value is not a member of the status enumeration."""


class TaskNotFound(TaskTrackerError):
    """No task with this id exists for the requesting owner."""

    def __init__(self, task_id: int | str) -> None:
        self.task_id = task_id
        super().__init__(f'Task with ID "{task_id}" not found')


class AuthenticationFailed(TaskTrackerError):
    """Unknown username or wrong password (deliberately not told apart)."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class UsernameTaken(TaskTrackerError):
    """A user with this username already exists."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"User '{username}' already exists.")
