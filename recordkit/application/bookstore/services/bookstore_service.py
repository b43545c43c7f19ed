"""
Application service for the bookstore.

Handles the book catalogue, catalogue lookups and purchases.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.bookstore.entities.book import Book
from recordkit.domain.common.exceptions import NotFoundError, ValidationError
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.normalization import normalize_key
from recordkit.domain.common.validators import require_key
from recordkit.domain.common.value_objects.ids import BookId

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PurchaseReceipt:
    """Outcome of a purchase: which books were sold, which were skipped, and the amount spent."""

    purchased: tuple[int, ...]
    skipped: tuple[int, ...]
    total: float

    def describe(self) -> str:
        return f"Purchase completed. Total spent: ${self.total:.2f}"


class BookstoreService(CollectionService[Book]):
    """Book catalogue with stock and accumulated earnings."""

    entity_type = Book
    id_type = BookId
    entity_label = "Book"

    def __init__(self, ids: IdSequence | None = None) -> None:
        super().__init__(ids)
        self._earnings = 0.0

    @property
    def earnings(self) -> float:
        """Money taken by every purchase so far."""
        return self._earnings

    def get_by_title(self, title: str) -> Book:
        """
        Look a book up by title, case-insensitively.

        Raises:
            ValidationError: If title is blank
            NotFoundError: If no book has that title
        """
        key = require_key(title, "title", message="Book title is required")
        for book in self._items:
            if book.title == key:
                return book
        raise NotFoundError(self.entity_label, key)

    def filter_by_author(self, author_name: str) -> tuple[Book, ...]:
        """
        Books written by an author, matched on the normalized name.

        Raises:
            ValidationError: If the name is blank
            CategoryNotFoundError: If no book in the catalogue has that author
        """
        require_key(author_name, "author", message="Author name is required")
        return self.filter_by(
            "author.name", author_name, normalize=normalize_key, require_match=True
        )

    def filter_by_genre(self, genre: str) -> tuple[Book, ...]:
        """
        Books of a genre.

        Raises:
            ValidationError: If genre is blank
            CategoryNotFoundError: If no book in the catalogue has that genre
        """
        require_key(genre, "genre", message="Genre is required")
        return self.filter_by("genre", genre, normalize=normalize_key, require_match=True)

    def purchase(self, book_ids: Sequence[int]) -> PurchaseReceipt:
        """
        Buy one copy of each listed book.

        Books that are not in the catalogue or are out of stock are skipped
        and reported on the receipt. A book listed twice is bought twice.

        Args:
            book_ids: Ids of the books to buy

        Returns:
            PurchaseReceipt with the sold and skipped ids and the total spent

        Raises:
            ValidationError: If book_ids is empty or contains something other than ints
        """
        if (
            isinstance(book_ids, str | bytes)
            or not isinstance(book_ids, Sequence)
            or not book_ids
            or any(isinstance(i, bool) or not isinstance(i, int) for i in book_ids)
        ):
            raise ValidationError(
                "Provide the ids of the books to purchase", field="book_ids", value=book_ids
            )

        purchased: list[int] = []
        skipped: list[int] = []
        spent: list[float] = []
        for book_id in book_ids:
            book = self.find_by_id(book_id)
            if book is None or not book.has_stock():
                skipped.append(book_id)
                continue
            book.sell_one()
            spent.append(book.price)
            purchased.append(book_id)

        total = round(sum(spent), 2)
        self._earnings += total
        logger.info(
            "books_purchased",
            purchased=purchased,
            skipped=skipped,
            total=total,
        )
        return PurchaseReceipt(purchased=tuple(purchased), skipped=tuple(skipped), total=total)

    def describe(self) -> str:
        return self._describe_items("Bookstore catalogue:")
