"""
Identity-bearing domain objects.

An entity keeps its identity while its mutable fields change: a task is the
same task after it is completed. Equality and hashing therefore look at the
concrete type and the id only.

Concrete entities are dataclasses declared with ``eq=False`` so the
identity-based ``__eq__``/``__hash__`` below are not replaced by the
field-wise ones the decorator would otherwise generate::

    @dataclass(eq=False)
    class Task(Entity[TaskId]):
        id: TaskId
        description: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Typed wrapper around a non-negative integer id.

    Each entity type gets its own subclass, so ``TaskId(1)`` and
    ``ProductId(1)`` never compare equal. The value 0 is the placeholder an
    entity carries until an IdSequence issues its real id.
    """

    value: int

    def __post_init__(self) -> None:
        name = type(self).__name__
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"{name} must be an integer", field="id", value=self.value)
        if self.value < 0:
            raise ValidationError(f"{name} must be non-negative", field="id", value=self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_assigned(self) -> bool:
        """Whether this id was issued by a sequence (placeholder ids are 0)."""
        return self.value > 0

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id. The real value is issued by an IdSequence."""
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Common base of every entity managed by a CollectionService.

    Subclasses declare an ``id`` field of their own EntityId type, validate
    every field in ``__post_init__`` and change state only through command
    methods that re-run the same validation.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
