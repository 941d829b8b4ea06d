"""Monthly budget chain from the first income month to a target month."""

from collections.abc import Iterable, Iterator

from src.domain.errors import MissingDataError
from src.domain.models.budget import Category, IncomeCategory, Transaction
from src.domain.policies.category_activity import is_category_active_for_month
from src.domain.services.monthly_budget import (
    CategoryMonthlyBudget,
    MonthlyBudget,
)
from src.domain.services.months import iter_months, parse_month
from src.domain.services.transactions import transactions_for_month


def get_chain_start_month(all_income: Iterable[IncomeCategory]) -> str:
    """Return the earliest income start month.

    Raises:
        MissingDataError: If there is no income record.
    """
    start_months = [income.start_month for income in all_income]
    if not start_months:
        raise MissingDataError("No start month found: no income records")
    return min(start_months)


def iter_monthly_budgets(
    month: str,
    all_income: Iterable[IncomeCategory],
    all_categories: Iterable[Category],
    all_transactions: Iterable[Transaction],
) -> Iterator[tuple[str, MonthlyBudget]]:
    """Yield each month's budget in chronological order.

    Every step receives the category results of the step before it, which
    is the only state carried between months.

    Args:
        month: Target month key, inclusive.
        all_income: Income records; the earliest one starts the chain.
        all_categories: Every category, active or not.
        all_transactions: Every transaction, any month.

    Yields:
        tuple[str, MonthlyBudget]: Month key and its computed budget.

    Raises:
        MissingDataError: If there is no income record.
        ValidationError: If the target month key is malformed.
    """
    parse_month(month)
    start_month = get_chain_start_month(all_income)
    categories = tuple(all_categories)
    transactions = tuple(all_transactions)

    previous_results: tuple[CategoryMonthlyBudget, ...] = ()
    for current in iter_months(start_month, month):
        monthly_budget = MonthlyBudget(
            categories=[
                category for category in categories
                if is_category_active_for_month(category, current)
            ],
            month=current,
            this_month_transactions=transactions_for_month(
                transactions, current
            ),
            previous_months_categories_monthly_budgets=previous_results,
        )
        yield current, monthly_budget
        previous_results = monthly_budget.categories_monthly_budgets


def calculate_monthly_budget(
    month: str,
    all_income: Iterable[IncomeCategory],
    all_categories: Iterable[Category],
    all_transactions: Iterable[Transaction],
) -> dict[str, MonthlyBudget]:
    """Compute the budget of every month up to ``month``.

    Args:
        month: Target month key, inclusive.
        all_income: Income records; the earliest one starts the chain.
        all_categories: Every category, active or not.
        all_transactions: Every transaction, any month.

    Returns:
        dict[str, MonthlyBudget]: Budgets keyed by month, in month order.
    """
    return dict(
        iter_monthly_budgets(
            month,
            all_income,
            all_categories,
            all_transactions,
        )
    )


__all__ = [
    "get_chain_start_month",
    "iter_monthly_budgets",
    "calculate_monthly_budget",
]
