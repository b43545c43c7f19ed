"""Book entity for the bookstore."""

from dataclasses import dataclass

from recordkit.domain.bookstore.value_objects.author import Author
from recordkit.domain.common.entity import Entity
from recordkit.domain.common.exceptions import DomainInvariantError
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import (
    require_instance,
    require_integer,
    require_key,
    require_number,
)
from recordkit.domain.common.value_objects.ids import BookId


def _valid_price(price: object) -> float:
    return require_number(price, "price", minimum=0, message="Price must be a number >= 0")


def _valid_stock(stock: object) -> int:
    return require_integer(stock, "stock", minimum=0, message="Stock must be an integer >= 0")


@dataclass(eq=False)
class Book(Entity[BookId]):
    """
    A title on sale.

    Business Rules:
    - Title and genre are lowercase lookup keys
    - Author is an Author value object shared by reference
    - Price and stock have 0 as their minimum and change through commands
    """

    id: BookId
    title: str
    author: Author
    price: float
    genre: str
    stock: int

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        require_instance(self.id, BookId, "id")
        self.title = require_key(self.title, "title", message="Book title is required")
        self.author = require_instance(self.author, Author, "author")
        self.price = _valid_price(self.price)
        self.genre = require_key(self.genre, "genre", message="Book genre is required")
        self.stock = _valid_stock(self.stock)

    def has_stock(self) -> bool:
        return self.stock > 0

    def change_price(self, price: float) -> None:
        self.price = _valid_price(price)

    def change_stock(self, stock: int) -> None:
        self.stock = _valid_stock(stock)

    def sell_one(self) -> None:
        """
        Take one copy out of stock.

        Raises:
            DomainInvariantError: If the book is out of stock
        """
        if not self.has_stock():
            raise DomainInvariantError("Book", f"book {self.id} is out of stock")
        self.stock -= 1

    def describe(self) -> str:
        return (
            f"Book {self.id}: {self.title} by {self.author.name} ({self.genre})"
            f" - ${self.price:.2f} - stock {self.stock}"
        )

    @classmethod
    def create(
        cls,
        title: str,
        author: Author,
        price: float,
        genre: str,
        stock: int,
        *,
        ids: IdSequence,
    ) -> "Book":
        """
        Create a new book.

        Args:
            title: Book title
            author: Author value object
            price: Unit price, >= 0
            genre: Genre key
            stock: Copies available, >= 0
            ids: Sequence the book id is drawn from once every field is valid

        Returns:
            New Book instance
        """
        book = cls(
            id=BookId.generate(), title=title, author=author, price=price, genre=genre, stock=stock
        )
        book.id = ids.issue(BookId)
        return book

    @classmethod
    def create_with_id(
        cls, id: BookId, title: str, author: Author, price: float, genre: str, stock: int
    ) -> "Book":
        """Reconstitute a book whose id was issued elsewhere."""
        return cls(id=id, title=title, author=author, price=price, genre=genre, stock=stock)
