"""Use case comparing a month's income with its budgeted total."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.domain.policies.category_activity import is_category_active_for_month
from src.domain.services.budget_resolver import get_budgeted_amount_for_month
from src.domain.services.category_lifecycle import get_income_for_month
from src.domain.services.months import parse_month
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BudgetAllocation:
    """Income versus budgeted amounts for a month."""

    month: str
    income: Decimal
    total_budgeted: Decimal

    @property
    def unallocated(self) -> Decimal:
        """Return income minus total_budgeted."""
        return self.income - self.total_budgeted


class GetBudgetAllocationUseCase:
    """Compute how much of a month's income is budgeted."""

    def __init__(
        self,
        budget_repository: BudgetSnapshotRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budget_repository: Port providing categories and income records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget_repository = budget_repository
        self._logger = logger or get_app_logger()

    def execute(self, month: str) -> BudgetAllocation:
        """Return the allocation summary for ``month``."""
        parse_month(month)
        categories = self._budget_repository.fetch_categories()
        income = get_income_for_month(
            self._budget_repository.fetch_income_categories(),
            month,
        )
        total_budgeted = sum(
            (
                get_budgeted_amount_for_month(category, month)
                for category in categories
                if is_category_active_for_month(category, month)
            ),
            Decimal("0"),
        )
        allocation = BudgetAllocation(
            month=month,
            income=income,
            total_budgeted=total_budgeted,
        )
        if allocation.unallocated < 0:
            self._logger.warning(
                f"Budget for {month} exceeds income by "
                f"{abs(allocation.unallocated)}"
            )
        self._logger.info(
            f"Budget allocation for {month}: income={income}, "
            f"budgeted={total_budgeted}"
        )
        return allocation


__all__ = ["GetBudgetAllocationUseCase", "BudgetAllocation"]
