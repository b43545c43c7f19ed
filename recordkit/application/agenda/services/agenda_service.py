"""
Application service for agenda tasks.

Handles task lifecycle (add, remove, complete) and task queries.
"""

from datetime import date

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.agenda.entities.task import Task
from recordkit.domain.common.validators import require_date, require_key
from recordkit.domain.common.value_objects.ids import TaskId


class AgendaService(CollectionService[Task]):
    """Ordered list of tasks."""

    entity_type = Task
    id_type = TaskId
    entity_label = "Task"
    done_command = "complete"

    def complete(self, task_id: int | TaskId) -> Task:
        """
        Complete a task. Completing it again changes nothing.

        Raises:
            NotFoundError: If the agenda has no task with that id
        """
        return self.mark_done(task_id)

    def get(self, task_id: int | TaskId) -> Task:
        return self.get_by_id(task_id)

    def filter_active(self) -> tuple[Task, ...]:
        return self.filter_by_flag("completed", False)

    def filter_completed(self) -> tuple[Task, ...]:
        return self.filter_by_flag("completed", True)

    def filter_by_category(self, category: str) -> tuple[Task, ...]:
        """
        Tasks in a category, compared case-insensitively.

        Returns an empty tuple when no task has the category.

        Raises:
            ValidationError: If category is not a non-blank string
        """
        key = require_key(category, "category", message="Category is required")
        return self.filter_by("category", key)

    def filter_by_due_date(self, due_date: date | str) -> tuple[Task, ...]:
        """
        Tasks due on a given day, in insertion order.

        Raises:
            ValidationError: If due_date is not a valid date
        """
        return self.filter_by("due_date", require_date(due_date, "due_date"))

    def describe(self) -> str:
        return self._describe_items("Agenda tasks:")
