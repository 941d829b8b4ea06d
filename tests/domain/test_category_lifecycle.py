"""Tests for category and income editing helpers."""

from decimal import Decimal

import pytest

from src.domain.errors import ValidationError
from src.domain.models import (
    Category,
    IncomeCategory,
    MonthlyBudgetEntry,
    TransferRollover,
)
from src.domain.services.category_lifecycle import (
    get_income_for_month,
    rename_category,
    retire_category,
    set_income_for_month,
    set_monthly_budget,
)


def _category(**overrides) -> Category:
    values = {
        "id": "home",
        "name": "Home",
        "order": 400,
        "icon": "Home",
        "color": "#3b82f6",
        "start_month": "2025-01",
        "monthly_budgets": (
            MonthlyBudgetEntry(Decimal("1500"), "2025-01"),
            MonthlyBudgetEntry(
                Decimal("1600"),
                "2025-05",
                TransferRollover("saving"),
            ),
        ),
    }
    values.update(overrides)
    return Category(**values)


def test_set_monthly_budget_inserts_sorted_entry() -> None:
    """A new month gets its own entry, kept in start month order."""
    original = _category()

    updated = set_monthly_budget(original, "2025-03", "1550")

    assert [e.start_month for e in updated.monthly_budgets] == [
        "2025-01",
        "2025-03",
        "2025-05",
    ]
    assert updated.monthly_budgets[1].budgeted_amount == Decimal("1550")
    assert len(original.monthly_budgets) == 2


def test_set_monthly_budget_updates_existing_entry_keeping_policy() -> None:
    """Updating a month keeps the stored rollover policy."""
    updated = set_monthly_budget(_category(), "2025-05", Decimal("1700"))

    entry = updated.monthly_budgets[-1]
    assert len(updated.monthly_budgets) == 2
    assert entry.budgeted_amount == Decimal("1700")
    assert entry.rollover_config == TransferRollover("saving")


def test_set_monthly_budget_rejects_negative_amount() -> None:
    """Negative budgets are invalid input."""
    with pytest.raises(ValidationError):
        set_monthly_budget(_category(), "2025-03", "-1")


def test_retire_category_deletes_when_started_this_month() -> None:
    """A category removed in its start month disappears entirely."""
    assert retire_category(_category(), "2025-01") is None


def test_retire_category_ends_previous_month() -> None:
    """Later removals end the category and drop future entries."""
    retired = retire_category(_category(), "2025-05")

    assert retired.end_month == "2025-04"
    assert [e.start_month for e in retired.monthly_budgets] == ["2025-01"]


def test_rename_category_strips_and_validates() -> None:
    """Names are trimmed and cannot be empty."""
    assert rename_category(_category(), "  House ").name == "House"
    with pytest.raises(ValidationError):
        rename_category(_category(), "   ")


def test_income_for_month_uses_latest_applicable_record() -> None:
    """Income resolves like budget entries, 0 before the first one."""
    incomes = [
        IncomeCategory("i1", Decimal("5000"), "2025-01"),
        IncomeCategory("i2", Decimal("5200"), "2025-04"),
    ]

    assert get_income_for_month(incomes, "2024-12") == Decimal("0")
    assert get_income_for_month(incomes, "2025-03") == Decimal("5000")
    assert get_income_for_month(incomes, "2025-09") == Decimal("5200")


def test_set_income_for_month_updates_or_appends() -> None:
    """Existing months are updated, new months get a new record."""
    incomes = [IncomeCategory("i1", Decimal("5000"), "2025-02")]

    updated = set_income_for_month(incomes, "2025-02", "5100", new_id="x")
    appended = set_income_for_month(incomes, "2025-01", 4800, new_id="i0")

    assert updated == [IncomeCategory("i1", Decimal("5100"), "2025-02")]
    assert [i.id for i in appended] == ["i0", "i1"]
    assert appended[0].budgeted_amount == Decimal("4800")
