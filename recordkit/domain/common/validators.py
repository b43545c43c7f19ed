"""
Field validators shared by every entity.

Each validator is a pure function over the raw input: it either returns the
normalized value to store or raises ValidationError naming the field. None
of them coerce implicitly, so ``"3"`` is not a number and ``2.0`` is not an
integer.
"""

import math
import re
from datetime import date, datetime
from typing import TypeVar

from .exceptions import ValidationError
from .normalization import collapse_whitespace, normalize_key

T = TypeVar("T")

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LETTERS = re.compile(r"^[a-zA-ZÁÉÍÓÚÜáéíóúüÑñ]+$")
_LETTERS_AND_SPACES = re.compile(r"^[a-zA-ZÁÉÍÓÚÜáéíóúüÑñ\s]+$")


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def require_text(
    value: object, field: str, *, min_length: int = 1, message: str | None = None
) -> str:
    """
    Validate a required string and collapse its whitespace.

    Args:
        value: Raw input
        field: Field name reported in the error
        min_length: Minimum length after normalization
        message: Overrides the default error message

    Returns:
        The stripped, whitespace-collapsed text

    Raises:
        ValidationError: If value is not a string or is too short after stripping
    """
    if not isinstance(value, str):
        raise ValidationError(message or f"{field} must be a string", field=field, value=value)
    text = collapse_whitespace(value)
    if not text:
        raise ValidationError(message or f"{field} cannot be empty", field=field, value=value)
    if len(text) < min_length:
        raise ValidationError(
            message or f"{field} must have at least {min_length} characters",
            field=field,
            value=value,
        )
    return text


def require_key(value: object, field: str, *, message: str | None = None) -> str:
    """Validate a required lookup key and return it lowercased."""
    return normalize_key(require_text(value, field, message=message))


def require_letters(
    value: object, field: str, *, allow_spaces: bool = False, message: str | None = None
) -> str:
    """Validate a key made only of letters (and spaces when allowed)."""
    text = require_key(value, field, message=message)
    pattern = _LETTERS_AND_SPACES if allow_spaces else _LETTERS
    if not pattern.match(text):
        raise ValidationError(
            message or f"{field} may only contain letters", field=field, value=value
        )
    return text


def require_number(
    value: object,
    field: str,
    *,
    minimum: float | None = None,
    exclusive: bool = False,
    message: str | None = None,
) -> float:
    """
    Validate a finite real number.

    Args:
        value: Raw input
        field: Field name reported in the error
        minimum: Lower bound, inclusive unless exclusive is set
        exclusive: Treat minimum as a strict bound
        message: Overrides the default error message

    Returns:
        The number, unchanged

    Raises:
        ValidationError: If value is not a number, is NaN or infinite, or is out of range
    """
    if not _is_number(value):
        raise ValidationError(message or f"{field} must be a number", field=field, value=value)
    number = float(value)  # type: ignore[arg-type]
    if not math.isfinite(number):
        raise ValidationError(
            message or f"{field} must be a finite number", field=field, value=value
        )
    if minimum is not None:
        below = number <= minimum if exclusive else number < minimum
        if below:
            bound = "greater than" if exclusive else "at least"
            raise ValidationError(
                message or f"{field} must be {bound} {minimum}", field=field, value=value
            )
    return value  # type: ignore[return-value]


def require_integer(
    value: object,
    field: str,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
    message: str | None = None,
) -> int:
    """Validate an integer within optional inclusive bounds. Floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(message or f"{field} must be an integer", field=field, value=value)
    if minimum is not None and value < minimum:
        raise ValidationError(
            message or f"{field} must be at least {minimum}", field=field, value=value
        )
    if maximum is not None and value > maximum:
        raise ValidationError(
            message or f"{field} must be at most {maximum}", field=field, value=value
        )
    return value


def require_bool(value: object, field: str, *, message: str | None = None) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(message or f"{field} must be a boolean", field=field, value=value)
    return value


def require_date(value: object, field: str, *, message: str | None = None) -> date:
    """
    Validate a calendar date.

    Accepts a date, a datetime (its date part is kept) or an ISO
    ``YYYY-MM-DD`` string naming a real day.

    Raises:
        ValidationError: If the value does not resolve to a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _ISO_DATE.match(value.strip()):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as err:
            raise ValidationError(
                message or f"{field} must be a valid date", field=field, value=value
            ) from err
    raise ValidationError(
        message or f"{field} must be a valid date (YYYY-MM-DD)", field=field, value=value
    )


def require_instance(value: object, cls: type[T], field: str) -> T:
    if not isinstance(value, cls):
        raise ValidationError(
            f"{field} must be an instance of {cls.__name__}", field=field, value=value
        )
    return value
