"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from recordkit.application.agenda.services import AgendaService
from recordkit.application.cart.services import CartService
from recordkit.config import get_settings
from recordkit.domain.common.id_sequence import IdSequence


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ids() -> IdSequence:
    """A sequence starting at 1."""
    return IdSequence()


@pytest.fixture
def agenda() -> AgendaService:
    return AgendaService()


@pytest.fixture
def cart() -> CartService:
    return CartService(tax_rate=0.10)
