"""Unit tests for tasktrack.services.tasks: ownership scoping, filters and ordering."""

import unittest
from datetime import date

from support import DatabaseTestCase, claims_for
from tasktrack.models import Task
from tasktrack.schemas.task import TaskFilters
from tasktrack.services.errors import NotFoundError, ValidationError
from tasktrack.services.tasks import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)


class TestCreateTask(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner = self.add_user()
        self.claims = claims_for(self.owner.id)

    def test_owned_by_caller(self) -> None:
        task = create_task(
            self.db,
            self.claims,
            title="Test Task",
            priority="High",
            description="This is a test task",
            deadline=date(2024, 12, 31),
        )
        self.assertEqual(task.user_id, self.owner.id)
        self.assertEqual(task.deadline, date(2024, 12, 31))

    def test_title_and_priority_required(self) -> None:
        for title, priority in ((None, "High"), ("Task", None), ("   ", "High")):
            with self.subTest(title=title, priority=priority):
                with self.assertRaises(ValidationError) as ctx:
                    create_task(self.db, self.claims, title=title, priority=priority)
                self.assertEqual(ctx.exception.message, "Title and priority are required.")
        self.assertEqual(self.db.query(Task).count(), 0)


class TestListTasks(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner = self.add_user()
        self.other = self.add_user(username="other", email="other@example.com")
        self.claims = claims_for(self.owner.id)
        self.add_task(self.owner, "Task 1", "High", "First task", date(2024, 12, 31))
        self.add_task(self.owner, "Task 2", "Medium", "Second task", date(2024, 11, 30))
        self.add_task(self.owner, "Task 3", "High", "Third task", date(2024, 10, 1))
        self.add_task(self.owner, "Someday", "Low", None, None)
        self.add_task(self.other, "Second opinion", "High", "Not yours", date(2024, 1, 1))

    def _titles(self, **filters: object) -> list[str]:
        return [t.title for t in list_tasks(self.db, self.claims, TaskFilters(**filters))]

    def test_no_filters_returns_own_tasks_by_deadline_undated_first(self) -> None:
        self.assertEqual(self._titles(), ["Someday", "Task 3", "Task 2", "Task 1"])

    def test_priority_is_exact_match_in_deadline_order(self) -> None:
        self.assertEqual(self._titles(priority="High"), ["Task 3", "Task 1"])

    def test_due_before_is_inclusive(self) -> None:
        self.assertEqual(self._titles(due_before=date(2024, 12, 1)), ["Task 3", "Task 2"])
        self.assertEqual(
            self._titles(due_before=date(2024, 11, 30)),
            ["Task 3", "Task 2"],
        )

    def test_search_matches_title_or_description_case_insensitive(self) -> None:
        self.assertEqual(self._titles(search="Second"), ["Task 2"])
        self.assertEqual(self._titles(search="THIRD"), ["Task 3"])
        self.assertEqual(self._titles(search="task 1"), ["Task 1"])

    def test_search_treats_wildcards_literally(self) -> None:
        self.assertEqual(self._titles(search="%"), [])
        self.assertEqual(self._titles(search="_"), [])

    def test_filters_combine(self) -> None:
        self.assertEqual(
            self._titles(priority="High", due_before=date(2024, 11, 1)),
            ["Task 3"],
        )

    def test_nothing_matches_returns_empty(self) -> None:
        self.assertEqual(self._titles(search="nope"), [])

    def test_user_without_tasks_sees_nothing_of_others(self) -> None:
        stranger = self.add_user(username="stranger", email="stranger@example.com")
        tasks = list_tasks(self.db, claims_for(stranger.id), TaskFilters())
        self.assertEqual(tasks, [])


class TestOwnershipScopedLookups(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner = self.add_user()
        self.intruder = self.add_user(username="intruder", email="intruder@example.com")
        self.task = self.add_task(
            self.owner, "Original Task", "Low", "Original description", date(2024, 12, 31)
        )
        self.owner_claims = claims_for(self.owner.id)
        self.intruder_claims = claims_for(self.intruder.id)

    def test_get_own_task(self) -> None:
        self.assertEqual(get_task(self.db, self.owner_claims, self.task.id).id, self.task.id)

    def test_other_users_task_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            get_task(self.db, self.intruder_claims, self.task.id)
        self.assertEqual(ctx.exception.message, "Task not found or unauthorized.")

    def test_update_replaces_only_provided_fields(self) -> None:
        task = update_task(
            self.db,
            self.owner_claims,
            self.task.id,
            {"title": "Updated Task", "priority": "High"},
        )
        self.assertEqual(task.title, "Updated Task")
        self.assertEqual(task.priority, "High")
        self.assertEqual(task.description, "Original description")
        self.assertEqual(task.deadline, date(2024, 12, 31))
        self.assertEqual(task.user_id, self.owner.id)

    def test_update_can_clear_optional_fields(self) -> None:
        task = update_task(
            self.db,
            self.owner_claims,
            self.task.id,
            {"description": None, "deadline": None},
        )
        self.assertIsNone(task.description)
        self.assertIsNone(task.deadline)

    def test_update_rejects_blank_title_and_null_priority(self) -> None:
        with self.assertRaises(ValidationError):
            update_task(self.db, self.owner_claims, self.task.id, {"title": " "})
        with self.assertRaises(ValidationError):
            update_task(self.db, self.owner_claims, self.task.id, {"priority": None})

    def test_update_rejects_owner_change(self) -> None:
        with self.assertRaises(ValidationError):
            update_task(
                self.db, self.owner_claims, self.task.id, {"user_id": self.intruder.id}
            )

    def test_intruder_update_is_not_found_and_task_unchanged(self) -> None:
        with self.assertRaises(NotFoundError):
            update_task(self.db, self.intruder_claims, self.task.id, {"title": "Hijacked"})
        self.db.expire_all()
        stored = self.db.get(Task, self.task.id)
        self.assertEqual(stored.title, "Original Task")

    def test_intruder_delete_is_not_found_and_task_kept(self) -> None:
        with self.assertRaises(NotFoundError):
            delete_task(self.db, self.intruder_claims, self.task.id)
        self.assertIsNotNone(self.db.get(Task, self.task.id))

    def test_malformed_id_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            update_task(self.db, self.owner_claims, "invalidTaskId", {"title": "x"})
        with self.assertRaises(NotFoundError):
            delete_task(self.db, self.owner_claims, "invalidTaskId")

    def test_delete_then_get_is_not_found(self) -> None:
        delete_task(self.db, self.owner_claims, self.task.id)
        with self.assertRaises(NotFoundError):
            get_task(self.db, self.owner_claims, self.task.id)


if __name__ == "__main__":
    unittest.main()
