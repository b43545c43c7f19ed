"""Product entity for the shopping cart."""

from dataclasses import dataclass

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import (
    require_bool,
    require_instance,
    require_integer,
    require_number,
    require_text,
)
from recordkit.domain.common.value_objects.ids import ProductId


def _valid_price(price: object) -> float:
    return require_number(
        price, "price", minimum=0, message="Price must be a number greater than or equal to 0"
    )


def _valid_quantity(quantity: object) -> int:
    return require_integer(
        quantity, "quantity", minimum=1, message="Quantity must be an integer greater than 0"
    )


@dataclass(eq=False)
class Product(Entity[ProductId]):
    """
    A line in a shopping cart.

    Business Rules:
    - Price is a finite number >= 0
    - Quantity is an integer > 0, never zero
    - Name is write-once; price and quantity change through commands
    """

    id: ProductId
    name: str
    price: float
    quantity: int
    taxed: bool

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        require_instance(self.id, ProductId, "id")
        self.name = require_text(self.name, "name", message="Product name is required")
        self.price = _valid_price(self.price)
        self.quantity = _valid_quantity(self.quantity)
        self.taxed = require_bool(self.taxed, "taxed")

    @property
    def subtotal(self) -> float:
        """Price times quantity, before tax."""
        return self.price * self.quantity

    def tax(self, rate: float) -> float:
        """Tax owed for the whole line at the given rate, 0 for untaxed products."""
        if not self.taxed:
            return 0.0
        return self.price * rate * self.quantity

    def change_quantity(self, quantity: int) -> None:
        """
        Set a new quantity.

        Raises:
            ValidationError: If quantity is not an integer > 0
        """
        self.quantity = _valid_quantity(quantity)

    def change_price(self, price: float) -> None:
        """
        Set a new unit price.

        Raises:
            ValidationError: If price is negative or not finite
        """
        self.price = _valid_price(price)

    def describe(self) -> str:
        return f"Name: {self.name} - Price: {self.price:.2f} - Quantity: {self.quantity}"

    @classmethod
    def create(
        cls,
        name: str,
        price: float,
        quantity: int,
        taxed: bool,
        *,
        ids: IdSequence,
    ) -> "Product":
        """
        Create a new product.

        Args:
            name: Display name
            price: Unit price, >= 0
            quantity: Units, > 0
            taxed: Whether the cart's tax rate applies
            ids: Sequence the product id is drawn from once every field is valid

        Returns:
            New Product instance
        """
        product = cls(
            id=ProductId.generate(), name=name, price=price, quantity=quantity, taxed=taxed
        )
        product.id = ids.issue(ProductId)
        return product

    @classmethod
    def create_with_id(
        cls, id: ProductId, name: str, price: float, quantity: int, taxed: bool
    ) -> "Product":
        """Reconstitute a product whose id was issued elsewhere."""
        return cls(id=id, name=name, price=price, quantity=quantity, taxed=taxed)
