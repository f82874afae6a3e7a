"""Unit tests for tasktracker.services.tasks: validation, not-found mapping, and ownership."""

import unittest
from unittest.mock import MagicMock

from tasktracker.schemas.task import TaskFilter, TaskRead, TaskStatus
from tasktracker.services.errors import InvalidFilter, InvalidInput, InvalidStatus, TaskNotFound
from tasktracker.services.task_store import InMemoryTaskStore, TaskStore
from tasktracker.services.tasks import TaskService


def _task(**kwargs: object) -> TaskRead:
    defaults = {
        "id": 1,
        "title": "Test task",
        "description": "Test desc",
        "status": TaskStatus.OPEN,
        "user_id": 1,
    }
    defaults.update(kwargs)
    return TaskRead(**defaults)


class TestWithMockStore(unittest.TestCase):
    """Service decisions made against a mocked store."""

    def setUp(self) -> None:
        self.store = MagicMock(spec=TaskStore)
        self.service = TaskService(self.store)

    def test_list_tasks_passes_filter_to_store(self) -> None:
        self.store.list.return_value = [_task()]
        task_filter = TaskFilter(status="OPEN", search="Some search query")
        result = self.service.list_tasks(1, task_filter)
        self.assertEqual(result, [_task()])
        self.store.list.assert_called_once_with(1, task_filter)

    def test_list_tasks_without_filter_uses_empty_filter(self) -> None:
        self.store.list.return_value = []
        self.service.list_tasks(1)
        self.store.list.assert_called_once_with(1, TaskFilter())

    def test_list_tasks_invalid_status_never_queries_store(self) -> None:
        for bad in ("CLOSED", "open", ""):
            with self.subTest(status=bad):
                with self.assertRaises(InvalidFilter):
                    self.service.list_tasks(1, TaskFilter(status=bad))
        self.store.list.assert_not_called()

    def test_get_task_by_id_returns_task(self) -> None:
        self.store.get.return_value = _task()
        self.assertEqual(self.service.get_task_by_id(1, 1), _task())
        self.store.get.assert_called_once_with(1, 1)

    def test_get_task_by_id_missing_raises_not_found_with_id(self) -> None:
        self.store.get.return_value = None
        with self.assertRaises(TaskNotFound) as ctx:
            self.service.get_task_by_id(7, 1)
        self.assertEqual(ctx.exception.task_id, 7)
        self.assertEqual(ctx.exception.message, 'Task with ID "7" not found')

    def test_create_task_delegates_to_store(self) -> None:
        self.store.create.return_value = _task()
        result = self.service.create_task(1, "Test task", "Test desc")
        self.store.create.assert_called_once_with(1, "Test task", "Test desc")
        self.assertEqual(result, _task())

    def test_create_task_empty_title_raises_invalid_input(self) -> None:
        for title in ("", "   "):
            with self.subTest(title=title):
                with self.assertRaises(InvalidInput):
                    self.service.create_task(1, title, "desc")
        self.store.create.assert_not_called()

    def test_create_task_missing_description_is_empty(self) -> None:
        self.service.create_task(1, "Title", None)
        self.store.create.assert_called_once_with(1, "Title", "")

    def test_update_task_status_accepts_strings_and_members(self) -> None:
        self.store.update_status.return_value = _task(status=TaskStatus.DONE)
        self.service.update_task_status(1, 1, "DONE")
        self.store.update_status.assert_called_with(1, 1, TaskStatus.DONE)
        self.service.update_task_status(1, 1, TaskStatus.IN_PROGRESS)
        self.store.update_status.assert_called_with(1, 1, TaskStatus.IN_PROGRESS)

    def test_update_task_status_invalid_never_touches_store(self) -> None:
        for bad in ("ARCHIVED", "done", None, 3):
            with self.subTest(status=bad):
                with self.assertRaises(InvalidStatus):
                    self.service.update_task_status(1, 1, bad)
        self.store.get.assert_not_called()
        self.store.update_status.assert_not_called()

    def test_update_task_status_missing_raises_not_found(self) -> None:
        self.store.update_status.return_value = None
        with self.assertRaises(TaskNotFound):
            self.service.update_task_status(1, 1, "DONE")

    def test_delete_task_succeeds_when_one_deleted(self) -> None:
        self.store.delete.return_value = 1
        self.assertIsNone(self.service.delete_task(1, 1))
        self.store.delete.assert_called_once_with(1, 1)

    def test_delete_task_nothing_deleted_raises_not_found(self) -> None:
        self.store.delete.return_value = 0
        with self.assertRaises(TaskNotFound):
            self.service.delete_task(1, 1)


class TestTaskLifecycle(unittest.TestCase):
    """End-to-end service behaviour over the in-memory store."""

    def setUp(self) -> None:
        self.service = TaskService(InMemoryTaskStore())

    def test_buy_milk_scenario(self) -> None:
        task = self.service.create_task(1, "Buy milk", "2%")
        self.assertEqual(task.status, TaskStatus.OPEN)

        found = self.service.list_tasks(1, TaskFilter(search="milk"))
        self.assertEqual([t.id for t in found], [task.id])

        self.service.update_task_status(task.id, 1, "DONE")
        self.assertEqual(self.service.get_task_by_id(task.id, 1).status, TaskStatus.DONE)

        self.service.delete_task(task.id, 1)
        with self.assertRaises(TaskNotFound):
            self.service.get_task_by_id(task.id, 1)

    def test_other_owner_cannot_touch_task(self) -> None:
        task = self.service.create_task(1, "Buy milk", "2%")

        with self.assertRaises(TaskNotFound):
            self.service.get_task_by_id(task.id, 2)
        with self.assertRaises(TaskNotFound):
            self.service.update_task_status(task.id, 2, "DONE")
        with self.assertRaises(TaskNotFound):
            self.service.delete_task(task.id, 2)
        self.assertEqual(self.service.list_tasks(2), [])

        still_there = self.service.get_task_by_id(task.id, 1)
        self.assertEqual(still_there.status, TaskStatus.OPEN)

    def test_invalid_status_leaves_record_unchanged(self) -> None:
        task = self.service.create_task(1, "Gym", "")
        self.service.update_task_status(task.id, 1, "IN_PROGRESS")
        with self.assertRaises(InvalidStatus):
            self.service.update_task_status(task.id, 1, "FINISHED")
        self.assertEqual(self.service.get_task_by_id(task.id, 1).status, TaskStatus.IN_PROGRESS)

    def test_any_status_may_follow_any_other(self) -> None:
        task = self.service.create_task(1, "Loop", "")
        for status in ("DONE", "OPEN", "IN_PROGRESS", "DONE", "IN_PROGRESS", "OPEN"):
            with self.subTest(status=status):
                updated = self.service.update_task_status(task.id, 1, status)
                self.assertEqual(updated.status.value, status)

    def test_create_task_always_open(self) -> None:
        task = self.service.create_task(3, "Title", "desc")
        self.assertEqual(task.status, TaskStatus.OPEN)
        self.assertEqual(task.user_id, 3)


if __name__ == "__main__":
    unittest.main()
