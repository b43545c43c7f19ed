"""Tests for BookstoreService."""

import pytest

from recordkit.application.bookstore.services import BookstoreService
from recordkit.domain.bookstore.entities.book import Book
from recordkit.domain.bookstore.value_objects.author import Author
from recordkit.domain.common.exceptions import (
    CategoryNotFoundError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def store() -> BookstoreService:
    store = BookstoreService()
    garcia = Author("Gabriel García Márquez", "colombiano")
    borges = Author("Jorge Luis Borges", "argentino")
    store.add(Book.create("Cien años de soledad", garcia, 20.5, "novel", 2, ids=store.ids))
    store.add(Book.create("El otoño del patriarca", garcia, 15, "novel", 0, ids=store.ids))
    store.add(Book.create("Ficciones", borges, 12, "short stories", 5, ids=store.ids))
    return store


class TestBookstoreService:
    """Test suite for BookstoreService."""

    def test_get_by_title(self, store: BookstoreService) -> None:
        assert store.get_by_title("  FICCIONES ").id.value == 3

    def test_get_by_unknown_title(self, store: BookstoreService) -> None:
        with pytest.raises(NotFoundError, match="Book with id rayuela not found"):
            store.get_by_title("Rayuela")

    def test_filter_by_author(self, store: BookstoreService) -> None:
        found = store.filter_by_author("Gabriel  GARCÍA Márquez")
        assert [book.id.value for book in found] == [1, 2]

    def test_filter_by_unknown_author(self, store: BookstoreService) -> None:
        with pytest.raises(CategoryNotFoundError):
            store.filter_by_author("Julio Cortázar")

    def test_filter_by_genre(self, store: BookstoreService) -> None:
        assert len(store.filter_by_genre("Short Stories")) == 1
        with pytest.raises(CategoryNotFoundError, match="No Book with genre 'poetry'"):
            store.filter_by_genre("poetry")
        with pytest.raises(ValidationError):
            store.filter_by_genre("")

    def test_purchase_skips_missing_and_out_of_stock(self, store: BookstoreService) -> None:
        receipt = store.purchase([1, 1, 1, 2, 99])

        assert receipt.purchased == (1, 1)
        assert receipt.skipped == (1, 2, 99)
        assert receipt.total == pytest.approx(41.0)
        assert store.get_by_id(1).stock == 0
        assert store.earnings == pytest.approx(41.0)
        assert receipt.describe() == "Purchase completed. Total spent: $41.00"

    def test_earnings_accumulate(self, store: BookstoreService) -> None:
        store.purchase([1])
        store.purchase([3])
        assert store.earnings == pytest.approx(32.5)

    @pytest.mark.parametrize("book_ids", [[], "12", [1, "2"], None])
    def test_purchase_rejects_bad_input(self, store: BookstoreService, book_ids: object) -> None:
        with pytest.raises(ValidationError, match="Provide the ids of the books to purchase"):
            store.purchase(book_ids)  # type: ignore[arg-type]
        assert store.earnings == 0

    def test_describe(self, store: BookstoreService) -> None:
        lines = store.describe().splitlines()
        assert lines[0] == "Bookstore catalogue:"
        assert lines[3] == (
            "Book 3: ficciones by jorge luis borges (short stories) - $12.00 - stock 5"
        )
