"""Tests for WalletService."""

import pytest

from recordkit.application.wallet.services import WalletService
from recordkit.domain.common.exceptions import CategoryNotFoundError, ValidationError
from recordkit.domain.wallet.entities.operation import Operation


@pytest.fixture
def wallet() -> WalletService:
    wallet = WalletService(initial_balance=100)
    wallet.add_income(Operation.income("Salary", 200, "2025-03-01", "Work", ids=wallet.ids))
    wallet.add_expense(Operation.expense("Groceries", 30, "2025-03-10", "Food", ids=wallet.ids))
    wallet.add_expense(Operation.expense("Restaurant", 45.5, "2025-04-02", "food", ids=wallet.ids))
    wallet.add_expense(Operation.expense("Bus pass", 20, "2024-04-15", "transport", ids=wallet.ids))
    return wallet


class TestWalletService:
    """Test suite for WalletService."""

    def test_balance(self, wallet: WalletService) -> None:
        assert wallet.balance == pytest.approx(204.5)

    def test_empty_wallet_balance(self) -> None:
        assert WalletService().balance == 0
        assert WalletService(initial_balance=50).balance == 50

    def test_add_checks_kind(self, wallet: WalletService) -> None:
        income = Operation.income("Gift", 10, "2025-03-02", "gifts", ids=wallet.ids)
        with pytest.raises(ValidationError, match="Expected an expense operation"):
            wallet.add_expense(income)
        assert len(wallet) == 4

    def test_by_month_ignores_year(self, wallet: WalletService) -> None:
        assert [op.description for op in wallet.expenses_by_month(4)] == [
            "Restaurant",
            "Bus pass",
        ]
        assert [op.description for op in wallet.incomes_by_month(3)] == ["Salary"]
        assert wallet.expenses_by_month(12) == ()

    @pytest.mark.parametrize("month", [0, 13, "3", 3.0])
    def test_invalid_month(self, wallet: WalletService, month: object) -> None:
        with pytest.raises(ValidationError, match="Month must be an integer from 1 to 12"):
            wallet.expenses_by_month(month)  # type: ignore[arg-type]

    def test_by_category(self, wallet: WalletService) -> None:
        assert len(wallet.expenses_by_category("FOOD")) == 2
        assert wallet.incomes_by_category("food") == ()
        assert len(wallet.incomes_by_category("work")) == 1

    def test_unknown_category(self, wallet: WalletService) -> None:
        with pytest.raises(CategoryNotFoundError):
            wallet.expenses_by_category("travel")

    def test_totals(self, wallet: WalletService) -> None:
        assert wallet.total_by_month(3) == pytest.approx(170)
        assert wallet.total_by_month(4) == pytest.approx(-65.5)
        assert wallet.total_by_month(7) == 0
        assert wallet.total_by_category("food") == pytest.approx(-75.5)
        assert wallet.total_by_category("travel") == 0

    def test_initial_balance_must_be_number(self) -> None:
        with pytest.raises(ValidationError):
            WalletService(initial_balance="100")  # type: ignore[arg-type]

    def test_describe(self, wallet: WalletService) -> None:
        lines = wallet.describe().splitlines()
        assert lines[0] == "Wallet balance: 204.50"
        assert lines[2] == "2025-03-10 expense 30.00 - Groceries (food)"
