"""Task entity for the agenda."""

from dataclasses import dataclass
from datetime import date

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import (
    require_bool,
    require_date,
    require_instance,
    require_key,
    require_text,
)
from recordkit.domain.common.value_objects.ids import TaskId

# Domain constraints
MIN_DESCRIPTION_LENGTH = 3


@dataclass(eq=False)
class Task(Entity[TaskId]):
    """
    A to-do item in an agenda.

    Business Rules:
    - Description has at least MIN_DESCRIPTION_LENGTH characters once whitespace is collapsed
    - Category is a lowercase lookup key
    - Due date is a calendar date
    - Completion is one-way: a completed task never becomes pending again
    """

    id: TaskId
    description: str
    category: str
    due_date: date
    completed: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        require_instance(self.id, TaskId, "id")
        self.description = require_text(
            self.description,
            "description",
            min_length=MIN_DESCRIPTION_LENGTH,
            message=f"Description must have at least {MIN_DESCRIPTION_LENGTH} characters",
        )
        self.category = require_key(self.category, "category", message="Category is required")
        self.due_date = require_date(self.due_date, "due_date")
        self.completed = require_bool(self.completed, "completed")

    def complete(self) -> None:
        """Mark this task as done."""
        self.completed = True

    def is_due_on(self, day: date) -> bool:
        return self.due_date == day

    def describe(self) -> str:
        status = " [done]" if self.completed else ""
        return (
            f"Task {self.id}: {self.description} ({self.category})"
            f" - due {self.due_date.isoformat()}{status}"
        )

    @classmethod
    def create(
        cls,
        description: str,
        category: str,
        due_date: date | str,
        *,
        ids: IdSequence,
    ) -> "Task":
        """
        Create a new pending task.

        Args:
            description: What has to be done
            category: Grouping key, compared case-insensitively
            due_date: A date or an ISO ``YYYY-MM-DD`` string
            ids: Sequence the task id is drawn from once every field is valid

        Returns:
            New Task instance

        Raises:
            ValidationError: If any field is invalid (no id is drawn in that case)
        """
        task = cls(
            id=TaskId.generate(),
            description=description,
            category=category,
            due_date=due_date,  # type: ignore[arg-type]
        )
        task.id = ids.issue(TaskId)
        return task

    @classmethod
    def create_with_id(
        cls,
        id: TaskId,
        description: str,
        category: str,
        due_date: date | str,
        completed: bool = False,
    ) -> "Task":
        """Reconstitute a task whose id was issued elsewhere."""
        return cls(
            id=id,
            description=description,
            category=category,
            due_date=due_date,  # type: ignore[arg-type]
            completed=completed,
        )
