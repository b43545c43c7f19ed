"""
Generic in-memory collection service.

Every concrete service (agenda, cart, bookstore...) owns an ordered list of
one entity type and inherits the CRUD, query and aggregate operations below.
Items keep their insertion order; nothing is sorted implicitly.

Services are not thread-safe. Operations such as validate-then-append or
find-index-then-pop are multi-step, so a caller sharing a service between
threads has to guard every call with one lock per service instance.
"""

import math
from collections.abc import Callable, Iterable, Iterator
from operator import attrgetter
from typing import Any, ClassVar, Generic, Protocol, TypeVar, cast

import structlog

from recordkit.config import get_settings
from recordkit.domain.common.entity import Entity, EntityId
from recordkit.domain.common.exceptions import (
    CategoryNotFoundError,
    DomainInvariantError,
    DuplicateIdError,
    NotFoundError,
    ValidationError,
)
from recordkit.domain.common.formatting import render_block
from recordkit.domain.common.id_sequence import IdSequence

logger = structlog.get_logger(__name__)

EntityT = TypeVar("EntityT", bound=Entity[Any])


class Describable(Protocol):
    def describe(self) -> str: ...


class CollectionService(Generic[EntityT]):
    """
    Owner of an ordered collection of entities of one type.

    Subclasses declare which entity and id types they manage:

        class AgendaService(CollectionService[Task]):
            entity_type = Task
            id_type = TaskId
            entity_label = "Task"

    The service owns the IdSequence its entities draw their ids from,
    exposed as ``service.ids`` so callers can write
    ``Task.create(..., ids=agenda.ids)``.
    """

    entity_type: ClassVar[type[Entity[Any]]]
    id_type: ClassVar[type[EntityId]]
    entity_label: ClassVar[str] = "Entity"
    # Name of the entity method that flips its one-way flag, None when it has none
    done_command: ClassVar[str | None] = None

    def __init__(self, ids: IdSequence | None = None) -> None:
        self.ids = ids if ids is not None else IdSequence(get_settings().ID_START)
        self._items: list[EntityT] = []

    # Identity helpers

    def _key(self, item_id: object) -> int:
        """Accept a raw int or this service's typed id and return the int value."""
        if isinstance(item_id, EntityId):
            if not isinstance(item_id, self.id_type):
                raise ValidationError(
                    f"Expected {self.id_type.__name__}, got {item_id.__class__.__name__}",
                    field="id",
                    value=item_id,
                )
            return item_id.value
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise ValidationError(f"{self.entity_label} id must be an integer", "id", item_id)
        return item_id

    def _index_of(self, key: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.id.value == key:
                return index
        return None

    # Mutation

    def add(self, item: EntityT) -> EntityT:
        """
        Append an entity to the end of the collection.

        Args:
            item: Entity built through its create() factory

        Returns:
            The same entity

        Raises:
            ValidationError: If item is not the managed type or has no issued id
            DuplicateIdError: If an item with the same id is already present
        """
        if not isinstance(item, self.entity_type):
            raise ValidationError(
                f"Expected a {self.entity_label} instance", field="item", value=item
            )
        if not item.id.is_assigned:
            raise ValidationError(f"{self.entity_label} has no id", field="id", value=item.id)
        if self._index_of(item.id.value) is not None:
            raise DuplicateIdError(self.entity_label, item.id.value)

        self._items.append(item)
        logger.info("collection_item_added", entity=self.entity_label, entity_id=item.id.value)
        return item

    def remove(self, item_id: int | EntityId) -> EntityT:
        """
        Remove the item with the given id, keeping the others in order.

        Raises:
            NotFoundError: If no item has that id
        """
        key = self._key(item_id)
        index = self._index_of(key)
        if index is None:
            raise NotFoundError(self.entity_label, key)

        item = self._items.pop(index)
        logger.info("collection_item_removed", entity=self.entity_label, entity_id=key)
        return item

    def clear(self) -> int:
        """Remove every item. The id sequence is not rewound. Returns how many were removed."""
        removed = len(self._items)
        self._items.clear()
        logger.info("collection_cleared", entity=self.entity_label, removed=removed)
        return removed

    def update_field(self, item_id: int | EntityId, mutate: Callable[[EntityT], None]) -> EntityT:
        """
        Apply one of the entity's own command methods to a single item.

        The command validates its input before writing, so a rejected value
        leaves the item untouched.

        Args:
            item_id: Id of the item to change
            mutate: Callable receiving the item, e.g. ``lambda p: p.change_quantity(3)``

        Returns:
            The updated item

        Raises:
            NotFoundError: If no item has that id
            ValidationError: If the command rejects the new value
        """
        item = self.get_by_id(item_id)
        mutate(item)
        logger.info("collection_item_updated", entity=self.entity_label, entity_id=item.id.value)
        return item

    def mark_done(self, item_id: int | EntityId) -> EntityT:
        """
        Flip the item's one-way flag through ``done_command``. Calling it twice is harmless.

        Raises:
            DomainInvariantError: If this collection's entities have no one-way flag
            NotFoundError: If no item has that id
        """
        if self.done_command is None:
            raise DomainInvariantError(
                self.entity_label, f"{self.entity_label} has no one-way flag to mark"
            )
        item = self.get_by_id(item_id)
        getattr(item, self.done_command)()
        logger.info("collection_item_completed", entity=self.entity_label, entity_id=item.id.value)
        return item

    # Queries

    def get_by_id(self, item_id: int | EntityId) -> EntityT:
        """
        Return the stored item (a live reference, not a copy).

        Raises:
            NotFoundError: If no item has that id
        """
        item = self.find_by_id(item_id)
        if item is None:
            raise NotFoundError(self.entity_label, self._key(item_id))
        return item

    def find_by_id(self, item_id: int | EntityId) -> EntityT | None:
        index = self._index_of(self._key(item_id))
        return None if index is None else self._items[index]

    def get_all(self) -> tuple[EntityT, ...]:
        """All items in insertion order. The tuple is a copy of the internal list."""
        return tuple(self._items)

    def filter_where(self, predicate: Callable[[EntityT], bool]) -> tuple[EntityT, ...]:
        return tuple(item for item in self._items if predicate(item))

    def filter_by(
        self,
        field: str,
        value: object,
        *,
        normalize: Callable[[Any], Any] | None = None,
        where: Callable[[EntityT], bool] | None = None,
        require_match: bool = False,
    ) -> tuple[EntityT, ...]:
        """
        Return items whose ``field`` equals ``value``.

        Args:
            field: Attribute name, dotted paths allowed (``"author.name"``)
            value: Raw value to compare against
            normalize: Applied to value first, the same rule the field uses on write
            where: Extra predicate narrowing the result
            require_match: Fail when no item in the whole collection has the value

        Returns:
            Matching items in insertion order, possibly empty

        Raises:
            CategoryNotFoundError: If require_match is set and no item carries the value
        """
        target = normalize(value) if normalize else value
        getter = attrgetter(field)
        carrying = [item for item in self._items if getter(item) == target]

        if require_match and not carrying:
            raise CategoryNotFoundError(self.entity_label, field, value)

        if where is None:
            return tuple(carrying)
        return tuple(item for item in carrying if where(item))

    def filter_by_flag(self, flag: str, value: bool = True) -> tuple[EntityT, ...]:
        return tuple(item for item in self._items if getattr(item, flag) is value)

    # Aggregates

    def reduce_to_total(
        self,
        amount: str | Callable[[EntityT], float],
        predicate: Callable[[EntityT], bool] | None = None,
    ) -> float:
        """
        Sum an amount over the items matching predicate.

        Args:
            amount: Attribute name or callable giving each item's amount
            predicate: Optional filter, all items when omitted

        Returns:
            The sum, 0.0 when nothing matches
        """
        value_of = attrgetter(amount) if isinstance(amount, str) else amount
        return math.fsum(
            value_of(item) for item in self._items if predicate is None or predicate(item)
        )

    @staticmethod
    def merge_unique(*groups: Iterable[EntityT]) -> tuple[EntityT, ...]:
        """
        Union several result sets, drop repeated identities, newest id first.

        Args:
            *groups: Result sets to merge, typically filter_where() outputs

        Returns:
            Distinct items sorted by id descending
        """
        seen: set[int] = set()
        merged: list[EntityT] = []
        for group in groups:
            for item in group:
                if item.id.value not in seen:
                    seen.add(item.id.value)
                    merged.append(item)
        return tuple(sorted(merged, key=lambda item: item.id.value, reverse=True))

    # Rendering

    def _describe_items(self, title: str) -> str:
        lines = [cast(Describable, item).describe() for item in self._items]
        return render_block(title, lines)

    # Container protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[EntityT]:
        return iter(tuple(self._items))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, self.entity_type):
            return self._index_of(item.id.value) is not None
        try:
            key = self._key(item)
        except ValidationError:
            return False
        return self._index_of(key) is not None
