"""Monotonic identifier source owned by a collection."""

from typing import TypeVar

from .entity import EntityId
from .exceptions import ValidationError

IdT = TypeVar("IdT", bound=EntityId)


class IdSequence:
    """
    Issues strictly increasing integer ids.

    Each collection service owns one sequence, so two agendas number their
    tasks independently. Pass the same sequence to several services to make
    them share a numbering. Ids are never reused, even after the entity that
    carried them is removed.
    """

    def __init__(self, start: int = 1) -> None:
        if isinstance(start, bool) or not isinstance(start, int) or start < 1:
            raise ValidationError("Sequence start must be a positive integer", "start", start)
        self._next = start
        self._last: int | None = None

    @property
    def last_issued(self) -> int | None:
        """Most recently issued value, or None if nothing was issued yet."""
        return self._last

    def peek(self) -> int:
        """Value the next call to next_value() will return."""
        return self._next

    def next_value(self) -> int:
        value = self._next
        self._next += 1
        self._last = value
        return value

    def issue(self, id_type: type[IdT]) -> IdT:
        """Draw the next value wrapped in a typed id."""
        return id_type(self.next_value())

    def __repr__(self) -> str:
        return f"IdSequence(next={self._next})"
