"""Domain records supplied to the budget engine."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.rollover import RolloverConfig


@dataclass(frozen=True)
class MonthlyBudgetEntry:
    """Budget configuration effective from a month until superseded.

    Attributes:
        budgeted_amount: Amount budgeted per month.
        start_month: First month the entry applies to ("YYYY-MM").
        rollover_config: Policy for leftover money; None means rollover.
    """

    budgeted_amount: Decimal
    start_month: str
    rollover_config: RolloverConfig | None = None


@dataclass(frozen=True)
class Category:
    """Budget category with its time-ordered budget entries.

    Attributes:
        id: Stable category identifier.
        name: Display name.
        order: Display position, lower first. Imported exports may use
            fractional positions, kept exactly as Decimal.
        icon: Icon name used by the UI.
        color: Color code used by the UI.
        start_month: First active month, inclusive.
        monthly_budgets: Budget entries with distinct start months.
        end_month: Last active month, inclusive, or None when open-ended.
    """

    id: str
    name: str
    order: int | Decimal
    icon: str
    color: str
    start_month: str
    monthly_budgets: tuple[MonthlyBudgetEntry, ...] = ()
    end_month: str | None = None


@dataclass(frozen=True)
class TransactionSplit:
    """Part of a transaction allocated to one category."""

    amount: Decimal
    category_id: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Signed money movement; expenses are negative.

    Attributes:
        id: Transaction identifier.
        date: Day-level date string ("YYYY-MM-DD").
        description: Free-form description.
        amount: Signed amount.
        account_id: Account the transaction was booked on.
        category_id: Assigned category, None when uncategorised.
        splits: Optional per-category allocation of the amount.
    """

    id: str
    date: str
    description: str
    amount: Decimal
    account_id: str
    category_id: str | None = None
    splits: tuple[TransactionSplit, ...] = ()


@dataclass(frozen=True)
class IncomeCategory:
    """Monthly income record; the earliest one starts the budget chain."""

    id: str
    budgeted_amount: Decimal
    start_month: str


__all__ = [
    "MonthlyBudgetEntry",
    "Category",
    "TransactionSplit",
    "Transaction",
    "IncomeCategory",
]
