"""Use case to compute the monthly budget chain up to a target month."""

from dataclasses import dataclass

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.domain.services.budget_chain import calculate_monthly_budget
from src.domain.services.monthly_budget import MonthlyBudget
from src.domain.services.transactions import expand_splits
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MonthlyBudgetChain:
    """Computed budgets from the first income month to a target month.

    Attributes:
        month: Requested target month.
        monthly_budgets: Budgets keyed by month, in month order.
    """

    month: str
    monthly_budgets: dict[str, MonthlyBudget]

    @property
    def current(self) -> MonthlyBudget | None:
        """Return the target month's budget, None before the first month."""
        return self.monthly_budgets.get(self.month)


class GetMonthlyBudgetUseCase:
    """Load a budget snapshot and run the rollover chain."""

    def __init__(
        self,
        budget_repository: BudgetSnapshotRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budget_repository: Port providing categories, transactions and
                income records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget_repository = budget_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        month: str,
        expand_split_transactions: bool = True,
    ) -> MonthlyBudgetChain:
        """Return the monthly budgets up to ``month``.

        Args:
            month: Target month key ("YYYY-MM").
            expand_split_transactions: Allocate split transactions to their
                split categories before computing.

        Returns:
            MonthlyBudgetChain: Every computed month and the target month.
        """
        categories = self._budget_repository.fetch_categories()
        transactions = self._budget_repository.fetch_transactions()
        income = self._budget_repository.fetch_income_categories()
        self._logger.info(
            f"Loaded {len(categories)} categories, "
            f"{len(transactions)} transactions and {len(income)} income "
            f"records"
        )
        if expand_split_transactions:
            transactions = expand_splits(transactions)

        monthly_budgets = calculate_monthly_budget(
            month=month,
            all_income=income,
            all_categories=categories,
            all_transactions=transactions,
        )
        for key, monthly_budget in monthly_budgets.items():
            self._warn_orphans(key, monthly_budget)

        chain = MonthlyBudgetChain(month=month, monthly_budgets=monthly_budgets)
        current = chain.current
        if current is None:
            self._logger.warning(
                f"Month {month} precedes the first income month; "
                "no budget computed"
            )
        else:
            self._logger.info(
                f"Monthly budget computed for {month} over "
                f"{len(monthly_budgets)} months: "
                f"budgeted={current.total_budgeted_amount}, "
                f"spent={current.total_spent}, "
                f"net={current.total_net_for_month}"
            )
        return chain

    def _warn_orphans(self, month: str, monthly_budget: MonthlyBudget) -> None:
        orphaned_transactions = monthly_budget.orphaned_transactions
        if orphaned_transactions:
            self._logger.warning(
                f"{len(orphaned_transactions)} orphaned transactions in {month}"
            )
        if monthly_budget.orphaned_rollovers_from_previous_month:
            self._logger.warning(
                f"Orphaned cash from previous month in {month}: "
                f"{monthly_budget.orphaned_cash_from_previous_month}"
            )


__all__ = ["GetMonthlyBudgetUseCase", "MonthlyBudgetChain"]
