"""Wallet operation entity."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import (
    require_date,
    require_instance,
    require_key,
    require_number,
    require_text,
)
from recordkit.domain.common.value_objects.ids import OperationId


class OperationKind(StrEnum):
    EXPENSE = "expense"
    INCOME = "income"


@dataclass(eq=False)
class Operation(Entity[OperationId]):
    """
    Money going out of (expense) or into (income) a wallet.

    Business Rules:
    - Amount is a finite number > 0; the kind gives the sign
    - Category is a lowercase lookup key
    """

    id: OperationId
    kind: OperationKind
    description: str
    amount: float
    occurred_on: date
    category: str

    def __post_init__(self) -> None:
        require_instance(self.id, OperationId, "id")
        self.kind = require_instance(self.kind, OperationKind, "kind")
        self.description = require_text(
            self.description, "description", message="Description is required"
        )
        self.amount = require_number(
            self.amount, "amount", minimum=0, exclusive=True, message="Amount must be positive"
        )
        self.occurred_on = require_date(self.occurred_on, "occurred_on")
        self.category = require_key(self.category, "category", message="Category is required")

    @property
    def is_expense(self) -> bool:
        return self.kind is OperationKind.EXPENSE

    @property
    def is_income(self) -> bool:
        return self.kind is OperationKind.INCOME

    @property
    def signed_amount(self) -> float:
        """Amount as it affects the balance: negative for expenses."""
        return -self.amount if self.is_expense else self.amount

    def occurred_in_month(self, month: int) -> bool:
        return self.occurred_on.month == month

    def describe(self) -> str:
        return (
            f"{self.occurred_on.isoformat()} {self.kind.value} {self.amount:.2f}"
            f" - {self.description} ({self.category})"
        )

    @classmethod
    def create(
        cls,
        kind: OperationKind,
        description: str,
        amount: float,
        occurred_on: date | str,
        category: str,
        *,
        ids: IdSequence,
    ) -> "Operation":
        """
        Create a new operation.

        Args:
            kind: Expense or income
            description: What the money was for
            amount: Positive amount
            occurred_on: Day of the operation
            category: Grouping key
            ids: Sequence the operation id is drawn from once every field is valid

        Returns:
            New Operation instance
        """
        operation = cls(
            id=OperationId.generate(),
            kind=kind,
            description=description,
            amount=amount,
            occurred_on=occurred_on,  # type: ignore[arg-type]
            category=category,
        )
        operation.id = ids.issue(OperationId)
        return operation

    @classmethod
    def expense(
        cls,
        description: str,
        amount: float,
        occurred_on: date | str,
        category: str,
        *,
        ids: IdSequence,
    ) -> "Operation":
        return cls.create(
            OperationKind.EXPENSE, description, amount, occurred_on, category, ids=ids
        )

    @classmethod
    def income(
        cls,
        description: str,
        amount: float,
        occurred_on: date | str,
        category: str,
        *,
        ids: IdSequence,
    ) -> "Operation":
        return cls.create(
            OperationKind.INCOME, description, amount, occurred_on, category, ids=ids
        )
