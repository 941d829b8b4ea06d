"""Per-category and per-month budget calculations.

Both result types compute every figure once at construction and expose it
through read-only properties backed by tuples, so a built result can be
shared freely and always reflects the inputs it was built from.
"""

from collections.abc import Iterable
from dataclasses import asdict
from decimal import Decimal

from src.domain.errors import ConfigError, ValidationError
from src.domain.models.budget import Category, MonthlyBudgetEntry, Transaction
from src.domain.models.rollover import (
    ConditionalRollover,
    RolloverConfig,
    RolloverForNextMonth,
    RolloverToSelf,
    TransferRollover,
)
from src.domain.services.budget_resolver import resolve_budget
from src.domain.services.months import is_date_in_month, previous_month


class CategoryMonthlyBudget:
    """Budget, spending and rollover figures for one category in one month."""

    def __init__(
        self,
        *,
        category: Category,
        month: str,
        this_month_transactions: Iterable[Transaction],
        previous_months_category_monthly_budgets: Iterable[
            "CategoryMonthlyBudget"
        ],
    ) -> None:
        """Validate inputs and compute the month's figures.

        Args:
            category: Category the figures belong to.
            month: Month key ("YYYY-MM").
            this_month_transactions: The category's transactions in the month.
            previous_months_category_monthly_budgets: Results of the previous
                month whose rollovers may be addressed to this category.

        Raises:
            ValidationError: If a transaction or previous result does not
                belong to this category and month.
            StateError: If no budget entry applies to the month.
            ConfigError: If the rollover policy is not supported.
        """
        transactions = tuple(this_month_transactions)
        previous_results = tuple(previous_months_category_monthly_budgets)
        self._verify_transactions(transactions, category, month)
        self._verify_previous_results(previous_results, month)

        self._category = category
        self._month = month
        self._monthly_budget = resolve_budget(category, month)
        self._this_month_transactions = transactions
        self._previous_results = previous_results

        self._spent = sum(
            (transaction.amount for transaction in transactions),
            Decimal("0"),
        )
        self._previous_month_rollover = sum(
            (
                rollover.amount
                for result in previous_results
                for rollover in result.rollovers_for_next_month
                if rollover.category_id == category.id
            ),
            Decimal("0"),
        )
        self._net_for_month = (
            self.budgeted_amount + self._previous_month_rollover + self._spent
        )
        self._rollovers_for_next_month = self._compute_rollovers()

    @property
    def category(self) -> Category:
        return self._category

    @property
    def month(self) -> str:
        return self._month

    @property
    def monthly_budget(self) -> MonthlyBudgetEntry:
        """Budget entry resolved for the month."""
        return self._monthly_budget

    @property
    def this_month_transactions(self) -> tuple[Transaction, ...]:
        return self._this_month_transactions

    @property
    def previous_months_category_monthly_budgets(
        self,
    ) -> tuple["CategoryMonthlyBudget", ...]:
        return self._previous_results

    @property
    def rollover_config(self) -> RolloverConfig:
        """Effective rollover policy; rollover when none is configured."""
        return self._monthly_budget.rollover_config or RolloverToSelf()

    @property
    def spent(self) -> Decimal:
        """Signed sum of the month's transactions."""
        return self._spent

    @property
    def budgeted_amount(self) -> Decimal:
        return self._monthly_budget.budgeted_amount

    @property
    def previous_month_rollover(self) -> Decimal:
        """Money received from the previous month, from any category."""
        return self._previous_month_rollover

    @property
    def net_for_month(self) -> Decimal:
        """Budgeted amount plus incoming rollover plus signed spending."""
        return self._net_for_month

    @property
    def rollovers_for_next_month(self) -> tuple[RolloverForNextMonth, ...]:
        return self._rollovers_for_next_month

    def to_dict(self) -> dict:
        """Return a flat snapshot for display or serialization."""
        return {
            "category_id": self._category.id,
            "month": self._month,
            "budgeted_amount": self.budgeted_amount,
            "previous_month_rollover": self._previous_month_rollover,
            "spent": self._spent,
            "net_for_month": self._net_for_month,
            "rollovers_for_next_month": [
                rollover.to_dict()
                for rollover in self._rollovers_for_next_month
            ],
        }

    def __repr__(self) -> str:
        return (
            f"CategoryMonthlyBudget(category_id={self._category.id!r}, "
            f"month={self._month!r}, net_for_month={self._net_for_month})"
        )

    def _compute_rollovers(self) -> tuple[RolloverForNextMonth, ...]:
        config = self.rollover_config
        net = self._net_for_month
        if isinstance(config, RolloverToSelf):
            return (RolloverForNextMonth(self._category.id, net),)
        if isinstance(config, TransferRollover):
            return (RolloverForNextMonth(config.target_category_id, net),)
        if isinstance(config, ConditionalRollover):
            cap = config.max_rollover_amount
            # Debt stays with the category; the target never receives < 0.
            return (
                RolloverForNextMonth(self._category.id, min(net, cap)),
                RolloverForNextMonth(
                    config.target_category_id,
                    max(Decimal("0"), net - cap),
                ),
            )
        raise ConfigError(f"Invalid rollover config: {config!r}")

    @staticmethod
    def _verify_transactions(
        transactions: tuple[Transaction, ...],
        category: Category,
        month: str,
    ) -> None:
        for transaction in transactions:
            if transaction.category_id != category.id:
                raise ValidationError(
                    f"Transaction {transaction.id} is not for category "
                    f"{category.id}"
                )
            if not is_date_in_month(transaction.date, month):
                raise ValidationError(
                    f"Transaction {transaction.id} dated {transaction.date} "
                    f"is not in month {month}"
                )

    @staticmethod
    def _verify_previous_results(
        previous_results: tuple["CategoryMonthlyBudget", ...],
        month: str,
    ) -> None:
        expected = previous_month(month)
        for result in previous_results:
            if result.month != expected:
                raise ValidationError(
                    f"Category monthly budget for {result.month} is not for "
                    f"the previous month {expected}"
                )


class MonthlyBudget:
    """Aggregated budget figures for every active category in a month."""

    def __init__(
        self,
        *,
        categories: Iterable[Category],
        month: str,
        this_month_transactions: Iterable[Transaction],
        previous_months_categories_monthly_budgets: Iterable[
            CategoryMonthlyBudget
        ],
    ) -> None:
        """Build the category results and aggregates for a month.

        Args:
            categories: Categories active for the month.
            month: Month key ("YYYY-MM").
            this_month_transactions: Every transaction dated in the month.
            previous_months_categories_monthly_budgets: All category results
                of the previous month.
        """
        self._categories = tuple(categories)
        self._month = month
        self._this_month_transactions = tuple(this_month_transactions)
        self._previous_results = tuple(
            previous_months_categories_monthly_budgets
        )
        self._categories_monthly_budgets = self._build_category_results()

        active_ids = {
            result.category.id for result in self._categories_monthly_budgets
        }
        self._orphaned_transactions = tuple(
            transaction
            for transaction in self._this_month_transactions
            if transaction.category_id not in active_ids
        )
        self._orphaned_rollovers = tuple(
            rollover
            for result in self._previous_results
            for rollover in result.rollovers_for_next_month
            if rollover.category_id not in active_ids
        )

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    @property
    def month(self) -> str:
        return self._month

    @property
    def this_month_transactions(self) -> tuple[Transaction, ...]:
        return self._this_month_transactions

    @property
    def previous_months_categories_monthly_budgets(
        self,
    ) -> tuple[CategoryMonthlyBudget, ...]:
        return self._previous_results

    @property
    def categories_monthly_budgets(self) -> tuple[CategoryMonthlyBudget, ...]:
        """Category results ordered by order, spent desc, then name."""
        return self._categories_monthly_budgets

    @property
    def total_spent(self) -> Decimal:
        return self._sum(
            result.spent for result in self._categories_monthly_budgets
        )

    @property
    def total_budgeted_amount(self) -> Decimal:
        return self._sum(
            result.budgeted_amount
            for result in self._categories_monthly_budgets
        )

    @property
    def total_previous_month_rollover(self) -> Decimal:
        return self._sum(
            result.previous_month_rollover
            for result in self._categories_monthly_budgets
        )

    @property
    def total_net_for_month(self) -> Decimal:
        return self._sum(
            result.net_for_month for result in self._categories_monthly_budgets
        )

    @property
    def total_rollovers_for_next_month(
        self,
    ) -> tuple[RolloverForNextMonth, ...]:
        return tuple(
            rollover
            for result in self._categories_monthly_budgets
            for rollover in result.rollovers_for_next_month
        )

    @property
    def orphaned_transactions(self) -> tuple[Transaction, ...]:
        """Transactions matching no active category this month."""
        return self._orphaned_transactions

    @property
    def orphaned_rollovers_from_previous_month(
        self,
    ) -> tuple[RolloverForNextMonth, ...]:
        """Incoming rollovers addressed to inactive or unknown categories."""
        return self._orphaned_rollovers

    @property
    def orphaned_cash_from_previous_month(self) -> Decimal:
        return self._sum(
            rollover.amount for rollover in self._orphaned_rollovers
        )

    def get_category_monthly_budget(
        self,
        category_id: str,
    ) -> CategoryMonthlyBudget | None:
        """Return the result for a category, None when it is not active."""
        for result in self._categories_monthly_budgets:
            if result.category.id == category_id:
                return result
        return None

    def to_dict(self) -> dict:
        """Return a flat snapshot for display or serialization."""
        return {
            "month": self._month,
            "total_spent": self.total_spent,
            "total_budgeted_amount": self.total_budgeted_amount,
            "total_previous_month_rollover": self.total_previous_month_rollover,
            "total_net_for_month": self.total_net_for_month,
            "total_rollovers_for_next_month": [
                rollover.to_dict()
                for rollover in self.total_rollovers_for_next_month
            ],
            "orphaned_transactions": [
                asdict(transaction)
                for transaction in self._orphaned_transactions
            ],
            "orphaned_rollovers_from_previous_month": [
                rollover.to_dict() for rollover in self._orphaned_rollovers
            ],
            "orphaned_cash_from_previous_month": (
                self.orphaned_cash_from_previous_month
            ),
            "categories_monthly_budgets": [
                result.to_dict() for result in self._categories_monthly_budgets
            ],
        }

    def __repr__(self) -> str:
        return (
            f"MonthlyBudget(month={self._month!r}, "
            f"categories={len(self._categories_monthly_budgets)})"
        )

    def _build_category_results(self) -> tuple[CategoryMonthlyBudget, ...]:
        results = [
            CategoryMonthlyBudget(
                category=category,
                month=self._month,
                this_month_transactions=[
                    transaction
                    for transaction in self._this_month_transactions
                    if transaction.category_id == category.id
                ],
                previous_months_category_monthly_budgets=[
                    result
                    for result in self._previous_results
                    if any(
                        rollover.category_id == category.id
                        for rollover in result.rollovers_for_next_month
                    )
                ],
            )
            for category in self._categories
        ]
        results.sort(
            key=lambda result: (
                result.category.order,
                -result.spent,
                result.category.name,
            )
        )
        return tuple(results)

    @staticmethod
    def _sum(values: Iterable[Decimal]) -> Decimal:
        return sum(values, Decimal("0"))


__all__ = ["CategoryMonthlyBudget", "MonthlyBudget"]
