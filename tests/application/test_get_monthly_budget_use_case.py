"""Tests for the GetMonthlyBudgetUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.application.use_cases.get_monthly_budget import (
    GetMonthlyBudgetUseCase,
)
from src.domain.errors import MissingDataError
from src.domain.models import (
    Category,
    IncomeCategory,
    MonthlyBudgetEntry,
    Transaction,
    TransactionSplit,
)


class FakeBudgetRepository(BudgetSnapshotRepositoryPort):
    """In-memory repository standing in for SQL or JSON storage."""

    def __init__(self, categories, transactions, income) -> None:
        self._categories = categories
        self._transactions = transactions
        self._income = income

    def fetch_categories(self) -> list[Category]:
        return list(self._categories)

    def fetch_transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def fetch_income_categories(self) -> list[IncomeCategory]:
        return list(self._income)


def _category(category_id: str, amount: str, **overrides) -> Category:
    values = {
        "id": category_id,
        "name": category_id.title(),
        "order": 100,
        "icon": "Circle",
        "color": "#eab308",
        "start_month": "2025-01",
        "monthly_budgets": (MonthlyBudgetEntry(Decimal(amount), "2025-01"),),
    }
    values.update(overrides)
    return Category(**values)


def _repository(transactions=(), categories=None):
    return FakeBudgetRepository(
        categories=categories
        or [_category("groceries", "500"), _category("home", "1500")],
        transactions=transactions,
        income=[IncomeCategory("income", Decimal("5000"), "2025-01")],
    )


def test_execute_expands_splits_before_computing() -> None:
    """Split parts should count toward their own categories."""
    split = Transaction(
        id="t1",
        date="2025-01-12",
        description="Warehouse store",
        amount=Decimal("-200"),
        account_id="visa",
        splits=(
            TransactionSplit(Decimal("-150"), "groceries"),
            TransactionSplit(Decimal("-50"), "home"),
        ),
    )
    use_case = GetMonthlyBudgetUseCase(
        budget_repository=_repository([split]),
        logger=MagicMock(),
    )

    chain = use_case.execute("2025-02")

    january = chain.monthly_budgets["2025-01"]
    assert january.get_category_monthly_budget("groceries").spent == (
        Decimal("-150")
    )
    assert january.get_category_monthly_budget("home").spent == Decimal("-50")
    assert january.orphaned_transactions == ()
    assert chain.current is chain.monthly_budgets["2025-02"]
    assert chain.current.get_category_monthly_budget(
        "groceries"
    ).previous_month_rollover == Decimal("350")


def test_execute_without_expansion_reports_split_as_orphan() -> None:
    """Uncategorised split parents are orphans when not expanded."""
    split = Transaction(
        id="t1",
        date="2025-01-12",
        description="",
        amount=Decimal("-20"),
        account_id="visa",
        splits=(TransactionSplit(Decimal("-20"), "groceries"),),
    )
    use_case = GetMonthlyBudgetUseCase(
        budget_repository=_repository([split]),
        logger=MagicMock(),
    )

    chain = use_case.execute("2025-01", expand_split_transactions=False)

    assert [t.id for t in chain.current.orphaned_transactions] == ["t1"]


def test_execute_logs_orphaned_money() -> None:
    """Orphaned transactions and cash should be logged as warnings."""
    logger = MagicMock()
    categories = [
        _category("groceries", "500"),
        _category("gym", "40", end_month="2025-01"),
    ]
    stray = Transaction(
        id="t9",
        date="2025-02-02",
        description="",
        amount=Decimal("-5"),
        account_id="cash",
    )
    use_case = GetMonthlyBudgetUseCase(
        budget_repository=_repository([stray], categories=categories),
        logger=logger,
    )

    chain = use_case.execute("2025-02")

    assert chain.current.orphaned_cash_from_previous_month == Decimal("40")
    warnings = [call.args[0] for call in logger.warning.call_args_list]
    assert "1 orphaned transactions in 2025-02" in warnings
    assert "Orphaned cash from previous month in 2025-02: 40" in warnings


def test_execute_before_first_income_month_returns_empty_chain() -> None:
    """A target before the chain start yields no current month."""
    logger = MagicMock()
    use_case = GetMonthlyBudgetUseCase(
        budget_repository=_repository(),
        logger=logger,
    )

    chain = use_case.execute("2024-06")

    assert chain.monthly_budgets == {}
    assert chain.current is None
    logger.warning.assert_called_once()


def test_execute_propagates_missing_income() -> None:
    """Domain errors are not swallowed by the use case."""
    repository = FakeBudgetRepository([], [], [])
    use_case = GetMonthlyBudgetUseCase(
        budget_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(MissingDataError):
        use_case.execute("2025-01")
