"""
Application service for a virtual wallet.

The balance is derived from the initial amount and the recorded operations,
so it always agrees with the operation list.
"""

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.common.exceptions import ValidationError
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.normalization import normalize_key
from recordkit.domain.common.validators import require_integer, require_key, require_number
from recordkit.domain.common.value_objects.ids import OperationId
from recordkit.domain.wallet.entities.operation import Operation, OperationKind


def _valid_month(month: object) -> int:
    return require_integer(
        month, "month", minimum=1, maximum=12, message="Month must be an integer from 1 to 12"
    )


class WalletService(CollectionService[Operation]):
    """Wallet recording expenses and incomes."""

    entity_type = Operation
    id_type = OperationId
    entity_label = "Operation"

    def __init__(self, initial_balance: float = 0.0, ids: IdSequence | None = None) -> None:
        super().__init__(ids)
        self.initial_balance = require_number(initial_balance, "initial_balance")

    @property
    def balance(self) -> float:
        """Initial balance plus incomes minus expenses."""
        return round(self.initial_balance + self.reduce_to_total("signed_amount"), 2)

    def _add_kind(self, operation: Operation, kind: OperationKind) -> Operation:
        if isinstance(operation, Operation) and operation.kind is not kind:
            raise ValidationError(
                f"Expected an {kind.value} operation", field="kind", value=operation.kind.value
            )
        return self.add(operation)

    def add_expense(self, operation: Operation) -> Operation:
        """
        Record an expense.

        Raises:
            ValidationError: If operation is not an expense
            DuplicateIdError: If the operation was already recorded
        """
        return self._add_kind(operation, OperationKind.EXPENSE)

    def add_income(self, operation: Operation) -> Operation:
        """
        Record an income.

        Raises:
            ValidationError: If operation is not an income
            DuplicateIdError: If the operation was already recorded
        """
        return self._add_kind(operation, OperationKind.INCOME)

    def expenses_by_month(self, month: int) -> tuple[Operation, ...]:
        """Expenses of a calendar month (1-12), any year."""
        month = _valid_month(month)
        return self.filter_where(lambda op: op.is_expense and op.occurred_in_month(month))

    def incomes_by_month(self, month: int) -> tuple[Operation, ...]:
        month = _valid_month(month)
        return self.filter_where(lambda op: op.is_income and op.occurred_in_month(month))

    def _by_category(self, category: str, kind: OperationKind) -> tuple[Operation, ...]:
        require_key(category, "category", message="Category is required")
        return self.filter_by(
            "category",
            category,
            normalize=normalize_key,
            where=lambda op: op.kind is kind,
            require_match=True,
        )

    def expenses_by_category(self, category: str) -> tuple[Operation, ...]:
        """
        Expenses of a category.

        Raises:
            ValidationError: If category is blank
            CategoryNotFoundError: If no operation of any kind uses the category
        """
        return self._by_category(category, OperationKind.EXPENSE)

    def incomes_by_category(self, category: str) -> tuple[Operation, ...]:
        """
        Incomes of a category.

        Raises:
            ValidationError: If category is blank
            CategoryNotFoundError: If no operation of any kind uses the category
        """
        return self._by_category(category, OperationKind.INCOME)

    def total_by_month(self, month: int) -> float:
        """Incomes minus expenses in a calendar month. 0 when the month is empty."""
        month = _valid_month(month)
        return round(
            self.reduce_to_total("signed_amount", lambda op: op.occurred_in_month(month)), 2
        )

    def total_by_category(self, category: str) -> float:
        """Incomes minus expenses in a category. 0 when nothing uses the category."""
        key = require_key(category, "category", message="Category is required")
        return round(self.reduce_to_total("signed_amount", lambda op: op.category == key), 2)

    def describe(self) -> str:
        return self._describe_items(f"Wallet balance: {self.balance:.2f}")
