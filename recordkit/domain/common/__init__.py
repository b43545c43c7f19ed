"""
Domain common module.

Contains base classes and helpers for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- IdSequence: Monotonic identifier source
- validators / normalization / formatting: field rules and rendering
"""

from .entity import Entity, EntityId
from .exceptions import (
    CategoryNotFoundError,
    DomainError,
    DomainInvariantError,
    DuplicateIdError,
    NotFoundError,
    ValidationError,
)
from .id_sequence import IdSequence
from .value_object import ValueObject

__all__ = [
    "CategoryNotFoundError",
    "DomainError",
    "DomainInvariantError",
    "DuplicateIdError",
    "Entity",
    "EntityId",
    "IdSequence",
    "NotFoundError",
    "ValidationError",
    "ValueObject",
]
