"""Application service for the shopping cart."""

from recordkit.application.common.collection_service import CollectionService
from recordkit.config import get_settings
from recordkit.domain.cart.entities.product import Product
from recordkit.domain.common.formatting import format_money, render_block
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_number
from recordkit.domain.common.value_objects.ids import ProductId


class CartService(CollectionService[Product]):
    """
    Shopping cart holding products.

    Taxed products pay ``tax_rate`` on top of their price. Money totals are
    rounded to two decimals.
    """

    entity_type = Product
    id_type = ProductId
    entity_label = "Product"

    def __init__(self, tax_rate: float | None = None, ids: IdSequence | None = None) -> None:
        super().__init__(ids)
        rate = get_settings().TAX_RATE if tax_rate is None else tax_rate
        self.tax_rate = require_number(rate, "tax_rate", minimum=0)

    def add_product(self, product: Product) -> Product:
        """
        Add a product to the cart.

        Raises:
            DuplicateIdError: If the product is already in the cart
        """
        return self.add(product)

    def update_quantity(self, product_id: int | ProductId, quantity: int) -> Product:
        """
        Change the quantity of one product.

        Args:
            product_id: Product to change
            quantity: New quantity, an integer > 0

        Returns:
            The updated product

        Raises:
            NotFoundError: If the product is not in the cart
            ValidationError: If quantity is invalid
        """
        return self.update_field(product_id, lambda product: product.change_quantity(quantity))

    def update_price(self, product_id: int | ProductId, price: float) -> Product:
        return self.update_field(product_id, lambda product: product.change_price(price))

    def remove_product(self, product_id: int | ProductId) -> Product:
        return self.remove(product_id)

    def subtotal(self) -> float:
        """Sum of price times quantity, without taxes."""
        return round(self.reduce_to_total("subtotal"), 2)

    def tax_total(self) -> float:
        """Sum of the taxes owed by taxed products."""
        return round(self.reduce_to_total(lambda product: product.tax(self.tax_rate)), 2)

    def total(self) -> float:
        """Cart total with taxes included."""
        return round(
            self.reduce_to_total(lambda product: product.subtotal + product.tax(self.tax_rate)), 2
        )

    def total_quantity(self) -> int:
        """Number of units across all products."""
        return sum(product.quantity for product in self._items)

    def describe(self) -> str:
        lines = [product.describe() for product in self._items]
        lines += [
            f"Products subtotal: {format_money(self.subtotal())}",
            f"Taxes subtotal: {format_money(self.tax_total())}",
            f"Total: {format_money(self.total())}",
        ]
        return render_block("Products:", lines)
