"""Pure helpers producing updated category and income records."""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from src.domain.errors import ValidationError
from src.domain.models.budget import (
    Category,
    IncomeCategory,
    MonthlyBudgetEntry,
)
from src.domain.models.rollover import RolloverConfig
from src.domain.services.months import parse_month, previous_month
from src.utils.decimal_utils import coerce_decimal


def set_monthly_budget(
    category: Category,
    month: str,
    amount,
    rollover_config: RolloverConfig | None = None,
) -> Category:
    """Return a copy of the category budgeting ``amount`` from ``month``.

    An entry already starting in ``month`` is updated and keeps its rollover
    policy unless a new one is given; otherwise a new entry is inserted.

    Args:
        category: Category to update.
        month: Month the amount takes effect.
        amount: Non-negative budgeted amount.
        rollover_config: Optional policy for the entry.

    Returns:
        Category: Updated category with entries sorted by start month.

    Raises:
        ValidationError: If the amount is negative or the month malformed.
    """
    parse_month(month)
    budgeted_amount = _non_negative(amount, "budget")
    entries = [
        entry for entry in category.monthly_budgets
        if entry.start_month != month
    ]
    existing = next(
        (
            entry for entry in category.monthly_budgets
            if entry.start_month == month
        ),
        None,
    )
    if existing is not None and rollover_config is None:
        rollover_config = existing.rollover_config
    entries.append(
        MonthlyBudgetEntry(
            budgeted_amount=budgeted_amount,
            start_month=month,
            rollover_config=rollover_config,
        )
    )
    entries.sort(key=lambda entry: entry.start_month)
    return replace(category, monthly_budgets=tuple(entries))


def retire_category(category: Category, month: str) -> Category | None:
    """Remove a category from ``month`` onwards.

    Returns:
        Category | None: None when the category starts in ``month`` and is
        deleted outright, otherwise a copy ending the month before.
    """
    if category.start_month == month:
        return None
    return replace(
        category,
        end_month=previous_month(month),
        monthly_budgets=tuple(
            entry for entry in category.monthly_budgets
            if entry.start_month < month
        ),
    )


def rename_category(category: Category, name: str) -> Category:
    """Return a copy of the category with a new name."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Category name cannot be empty")
    return replace(category, name=cleaned)


def get_income_for_month(
    income_categories: Iterable[IncomeCategory],
    month: str,
) -> Decimal:
    """Return the income applicable to ``month``, 0 when none started."""
    candidates = [
        income for income in income_categories
        if income.start_month <= month
    ]
    if not candidates:
        return Decimal("0")
    return max(candidates, key=lambda income: income.start_month).budgeted_amount


def set_income_for_month(
    income_categories: Iterable[IncomeCategory],
    month: str,
    amount,
    new_id: str,
) -> list[IncomeCategory]:
    """Return income records with ``amount`` effective from ``month``.

    Args:
        income_categories: Existing income records.
        month: Month the amount takes effect.
        amount: Non-negative income amount.
        new_id: Identifier used when a new record is needed.

    Returns:
        list[IncomeCategory]: Records sorted by start month.
    """
    parse_month(month)
    budgeted_amount = _non_negative(amount, "income")
    updated: list[IncomeCategory] = []
    found = False
    for income in income_categories:
        if income.start_month == month:
            updated.append(replace(income, budgeted_amount=budgeted_amount))
            found = True
        else:
            updated.append(income)
    if not found:
        updated.append(
            IncomeCategory(
                id=new_id,
                budgeted_amount=budgeted_amount,
                start_month=month,
            )
        )
    updated.sort(key=lambda income: income.start_month)
    return updated


def _non_negative(amount, label: str) -> Decimal:
    value = coerce_decimal(amount)
    if value < 0:
        raise ValidationError(f"Invalid {label} amount: {value}")
    return value


__all__ = [
    "set_monthly_budget",
    "retire_category",
    "rename_category",
    "get_income_for_month",
    "set_income_for_month",
]
