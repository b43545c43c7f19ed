"""Tests for field validators and normalization helpers."""

import math
from datetime import date, datetime

import pytest

from recordkit.domain.common.exceptions import ValidationError
from recordkit.domain.common.normalization import collapse_whitespace, normalize_key
from recordkit.domain.common.validators import (
    require_bool,
    require_date,
    require_instance,
    require_integer,
    require_key,
    require_letters,
    require_number,
    require_text,
)


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("  buy \t  milk\n now ") == "buy milk now"


def test_normalize_key_lowercases() -> None:
    assert normalize_key("  Science   Fiction ") == "science fiction"


class TestRequireText:
    """Test suite for require_text."""

    def test_returns_collapsed_text(self) -> None:
        assert require_text("  Go   shopping ", "description") == "Go shopping"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_blank_rejected(self, value: str) -> None:
        with pytest.raises(ValidationError, match="description cannot be empty"):
            require_text(value, "description")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be a string"):
            require_text(42, "description")

    def test_min_length_measured_after_normalization(self) -> None:
        with pytest.raises(ValidationError, match="at least 4 characters"):
            require_text("  a b  ", "description", min_length=4)
        assert require_text("  a b  ", "description", min_length=3) == "a b"

    def test_custom_message(self) -> None:
        with pytest.raises(ValidationError, match="Name is required"):
            require_text("", "name", message="Name is required")

    def test_error_carries_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_text(None, "title")
        assert exc_info.value.field == "title"
        assert exc_info.value.details == {"field": "title"}


def test_require_key_lowercases() -> None:
    assert require_key(" Work ", "category") == "work"


class TestRequireLetters:
    """Test suite for require_letters."""

    def test_accepts_accented_letters(self) -> None:
        assert require_letters("Márquez", "name") == "márquez"

    def test_spaces_only_when_allowed(self) -> None:
        assert require_letters("Isabel Allende", "name", allow_spaces=True) == "isabel allende"
        with pytest.raises(ValidationError, match="may only contain letters"):
            require_letters("Isabel Allende", "name")

    def test_digits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            require_letters("R2D2", "name", allow_spaces=True)


class TestRequireNumber:
    """Test suite for require_number."""

    def test_returns_value_unchanged(self) -> None:
        assert require_number(3, "price") == 3
        assert require_number(15.6, "price") == 15.6

    @pytest.mark.parametrize("value", ["3", None, True, [1]])
    def test_non_numbers_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError, match="price must be a number"):
            require_number(value, "price")

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            require_number(value, "price")

    def test_inclusive_minimum(self) -> None:
        assert require_number(0, "price", minimum=0) == 0
        with pytest.raises(ValidationError, match="at least 0"):
            require_number(-0.01, "price", minimum=0)

    def test_exclusive_minimum(self) -> None:
        with pytest.raises(ValidationError, match="greater than 0"):
            require_number(0, "amount", minimum=0, exclusive=True)


class TestRequireInteger:
    """Test suite for require_integer."""

    def test_bounds(self) -> None:
        assert require_integer(5, "month", minimum=1, maximum=12) == 5
        with pytest.raises(ValidationError, match="at least 1"):
            require_integer(0, "month", minimum=1)
        with pytest.raises(ValidationError, match="at most 12"):
            require_integer(13, "month", maximum=12)

    @pytest.mark.parametrize("value", [2.0, "2", False])
    def test_non_integers_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError, match="must be an integer"):
            require_integer(value, "quantity")


def test_require_bool() -> None:
    assert require_bool(False, "taxed") is False
    with pytest.raises(ValidationError, match="must be a boolean"):
        require_bool(0, "taxed")


class TestRequireDate:
    """Test suite for require_date."""

    def test_iso_string(self) -> None:
        assert require_date("2025-05-14", "due_date") == date(2025, 5, 14)

    def test_date_and_datetime(self) -> None:
        assert require_date(date(2025, 1, 2), "due_date") == date(2025, 1, 2)
        assert require_date(datetime(2025, 1, 2, 15, 30), "due_date") == date(2025, 1, 2)

    @pytest.mark.parametrize(
        "value", ["2025-02-30", "2025-5-14", "14/05/2025", "", "tomorrow", 20250514, None]
    )
    def test_invalid_dates_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError, match="valid date"):
            require_date(value, "due_date")


def test_require_instance() -> None:
    assert require_instance("x", str, "name") == "x"
    with pytest.raises(ValidationError, match="must be an instance of str"):
        require_instance(1, str, "name")
