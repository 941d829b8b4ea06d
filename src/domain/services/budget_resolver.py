"""Resolve which budget entry of a category applies to a month."""

from decimal import Decimal

from src.domain.errors import StateError
from src.domain.models.budget import Category, MonthlyBudgetEntry
from src.domain.models.rollover import RolloverConfig, RolloverToSelf
from src.domain.policies.category_activity import is_category_active_for_month


def resolve_budget(category: Category, month: str) -> MonthlyBudgetEntry:
    """Return the budget entry applicable to ``month``.

    The entry with the greatest start month not after ``month`` wins.

    Args:
        category: Category holding the budget entries.
        month: Month key ("YYYY-MM").

    Returns:
        MonthlyBudgetEntry: Applicable entry.

    Raises:
        StateError: If the category is not active for the month or has no
            entry starting on or before it.
    """
    if not is_category_active_for_month(category, month):
        raise StateError(
            f"Category {category.id} is not active for month {month}"
        )
    candidates = [
        entry for entry in category.monthly_budgets
        if entry.start_month <= month
    ]
    if not candidates:
        raise StateError(
            f"No applicable monthly budget for category {category.id} "
            f"in month {month}"
        )
    return max(candidates, key=lambda entry: entry.start_month)


def get_budgeted_amount_for_month(category: Category, month: str) -> Decimal:
    """Return the budgeted amount for display, 0 when unresolvable."""
    try:
        return resolve_budget(category, month).budgeted_amount
    except StateError:
        return Decimal("0")


def get_rollover_config_for_month(
    category: Category,
    month: str,
) -> RolloverConfig | None:
    """Return the effective rollover policy, None when unresolvable.

    An entry without a stored policy rolls over to itself.
    """
    try:
        entry = resolve_budget(category, month)
    except StateError:
        return None
    return entry.rollover_config or RolloverToSelf()


def get_earliest_budget_month(category: Category) -> str | None:
    """Return the earliest start month across the category's entries."""
    if not category.monthly_budgets:
        return None
    return min(entry.start_month for entry in category.monthly_budgets)


__all__ = [
    "resolve_budget",
    "get_budgeted_amount_for_month",
    "get_rollover_config_for_month",
    "get_earliest_budget_month",
]
