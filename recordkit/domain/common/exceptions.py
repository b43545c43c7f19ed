"""
Errors raised by recordkit.

Every failure is raised synchronously to the immediate caller as one of
these types. Nothing in the library catches its own errors to log and
carry on. Each error carries a ``details`` dict with the values that
identify what went wrong, so callers can report failures uniformly.
"""


class DomainError(Exception):
    """Root of the recordkit error hierarchy."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} - {self.details}"


class ValidationError(DomainError):
    """
    A field value failed its type, range or format rule.

    Example: negative price, non-integer quantity, unparseable date.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        details = {"field": field, "value": value}
        super().__init__(message, {k: v for k, v in details.items() if v is not None})


class NotFoundError(DomainError):
    """
    An operation referenced an id or unique key absent from the collection.

    Example: removing task 7 from an agenda that never had it.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class CategoryNotFoundError(NotFoundError):
    """
    A lookup required at least one item to carry the requested value.

    Example: filtering a bookstore by a genre none of its books has.
    """

    def __init__(self, entity_type: str, field: str, value: object) -> None:
        self.entity_type = entity_type
        self.entity_id = None
        self.field = field
        self.value = value
        DomainError.__init__(
            self,
            f"No {entity_type} with {field} '{value}'",
            {"entity_type": entity_type, "field": field, "value": value},
        )


class DuplicateIdError(DomainError):
    """
    An add would introduce a colliding identity or unique key.

    Example: adding the same product to a cart twice.
    """

    def __init__(self, entity_type: str, entity_id: object, key: str = "id") -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.key = key
        super().__init__(
            f"{entity_type} with {key} {entity_id} already exists",
            {"entity_type": entity_type, "key": key, "entity_id": entity_id},
        )


class DomainInvariantError(DomainError):
    """
    An operation would break a rule spanning more than one field or object.

    Example: accelerating a car that is switched off, dividing by zero.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        self.aggregate = aggregate
        self.invariant = invariant
        super().__init__(
            f"Invariant violation in {aggregate}: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
