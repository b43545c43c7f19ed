"""
Value objects: immutable values with no identity of their own.

Concrete value objects (Author, the typed ids) are frozen dataclasses, so
equality, hashing and repr are generated field by field. Two Authors with
the same normalized name and nationality are interchangeable.
"""

from dataclasses import fields
from typing import Any


class ValueObject:
    """
    Helpers shared by frozen-dataclass value objects.

    Subclasses validate in ``__post_init__`` and store the normalized form
    of each field through ``_normalize``.
    """

    def _normalize(self, name: str, value: Any) -> None:
        """Overwrite a field on a frozen instance. Only call from __post_init__."""
        object.__setattr__(self, name, value)

    def to_primitive(self) -> object:
        """Single-field objects collapse to that field; others become a dict."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]
        if len(values) == 1:
            return next(iter(values.values()))
        return values
