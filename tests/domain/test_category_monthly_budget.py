"""Tests for the per-category monthly calculation."""

from decimal import Decimal

import pytest

from src.domain.errors import ConfigError, StateError, ValidationError
from src.domain.models import (
    Category,
    ConditionalRollover,
    MonthlyBudgetEntry,
    RolloverForNextMonth,
    RolloverToSelf,
    Transaction,
    TransferRollover,
)
from src.domain.services.monthly_budget import CategoryMonthlyBudget


def _category(
    category_id: str = "groceries",
    amount: str = "500",
    rollover_config=None,
    **overrides,
) -> Category:
    values = {
        "id": category_id,
        "name": category_id.title(),
        "order": 100,
        "icon": "ShoppingCart",
        "color": "#f97316",
        "start_month": "2025-01",
        "monthly_budgets": (
            MonthlyBudgetEntry(Decimal(amount), "2025-01", rollover_config),
        ),
    }
    values.update(overrides)
    return Category(**values)


def _transaction(
    transaction_id: str,
    amount: str,
    day: str = "2025-01-15",
    category_id: str | None = "groceries",
) -> Transaction:
    return Transaction(
        id=transaction_id,
        date=day,
        description=f"Purchase {transaction_id}",
        amount=Decimal(amount),
        account_id="cash-account-default",
        category_id=category_id,
    )


def _calculate(category, transactions=(), previous=(), month="2025-01"):
    return CategoryMonthlyBudget(
        category=category,
        month=month,
        this_month_transactions=transactions,
        previous_months_category_monthly_budgets=previous,
    )


def test_figures_follow_net_for_month_identity() -> None:
    """Net should equal budgeted plus incoming rollover plus spent."""
    result = _calculate(
        _category(),
        [
            _transaction("t1", "-300"),
            _transaction("t2", "-150.50"),
            _transaction("t3", "20"),
        ],
    )

    assert result.budgeted_amount == Decimal("500")
    assert result.spent == Decimal("-430.50")
    assert result.previous_month_rollover == Decimal("0")
    assert result.net_for_month == Decimal("69.50")
    assert result.rollovers_for_next_month == (
        RolloverForNextMonth("groceries", Decimal("69.50")),
    )


def test_missing_rollover_config_behaves_like_rollover_policy() -> None:
    """An entry without a policy should match an explicit rollover."""
    transactions = [_transaction("t1", "-120")]
    implicit = _calculate(_category(), transactions)
    explicit = _calculate(_category(rollover_config=RolloverToSelf()), transactions)

    assert implicit.rollover_config == RolloverToSelf()
    assert implicit.to_dict() == explicit.to_dict()


def test_transfer_moves_whole_net_to_target() -> None:
    """Transfer policy should send the full net amount elsewhere."""
    result = _calculate(
        _category(amount="80", rollover_config=TransferRollover("savings")),
    )

    assert result.rollovers_for_next_month == (
        RolloverForNextMonth("savings", Decimal("80")),
    )


@pytest.mark.parametrize(
    ("budget", "spent", "expected_self", "expected_target"),
    [
        ("100", "0", "30", "70"),
        ("20", "0", "20", "0"),
        ("0", "-50", "-50", "0"),
    ],
)
def test_conditional_split_caps_self_and_never_transfers_debt(
    budget: str,
    spent: str,
    expected_self: str,
    expected_target: str,
) -> None:
    """Conditional policy keeps up to the cap and floors the target at 0."""
    category = _category(
        amount=budget,
        rollover_config=ConditionalRollover("savings", Decimal("30")),
    )
    transactions = [_transaction("t1", spent)] if spent != "0" else []

    result = _calculate(category, transactions)

    assert result.rollovers_for_next_month == (
        RolloverForNextMonth("groceries", Decimal(expected_self)),
        RolloverForNextMonth("savings", Decimal(expected_target)),
    )


def test_previous_month_rollover_sums_contributions_for_category() -> None:
    """Incoming rollover should include own carry and transfers in."""
    own_previous = _calculate(_category(amount="50"))
    donor = _category(
        "dining",
        amount="25",
        rollover_config=TransferRollover("groceries"),
    )
    donor_previous = _calculate(donor)
    unrelated = _calculate(_category("home", amount="900"))

    result = _calculate(
        _category(),
        [_transaction("t1", "-100", day="2025-02-03")],
        [own_previous, donor_previous, unrelated],
        month="2025-02",
    )

    assert result.previous_month_rollover == Decimal("75")
    assert result.net_for_month == Decimal("475")


def test_rejects_transaction_from_another_category() -> None:
    """A foreign transaction is a caller bug and must fail."""
    with pytest.raises(ValidationError):
        _calculate(_category(), [_transaction("t1", "-5", category_id="home")])


def test_rejects_transaction_outside_month() -> None:
    """Transactions dated in another month must fail validation."""
    with pytest.raises(ValidationError):
        _calculate(_category(), [_transaction("t1", "-5", day="2025-02-01")])


def test_rejects_previous_results_not_from_previous_month() -> None:
    """Previous results must be exactly one month earlier."""
    january = _calculate(_category())

    with pytest.raises(ValidationError):
        _calculate(_category(), previous=[january], month="2025-03")


def test_inactive_category_cannot_be_calculated() -> None:
    """Resolving a budget for an ended category is a state error."""
    with pytest.raises(StateError):
        _calculate(_category(end_month="2025-01"), month="2025-02")


def test_unknown_rollover_policy_raises_config_error() -> None:
    """Policies outside the closed set must not silently default."""

    class _FuturePolicy:
        type = "savings-goal"

    with pytest.raises(ConfigError):
        _calculate(_category(rollover_config=_FuturePolicy()))


def test_to_dict_exposes_flat_snapshot() -> None:
    """Snapshot keys should mirror the computed properties."""
    result = _calculate(_category(), [_transaction("t1", "-450")])

    assert result.to_dict() == {
        "category_id": "groceries",
        "month": "2025-01",
        "budgeted_amount": Decimal("500"),
        "previous_month_rollover": Decimal("0"),
        "spent": Decimal("-450"),
        "net_for_month": Decimal("50"),
        "rollovers_for_next_month": [
            {"category_id": "groceries", "amount": Decimal("50")},
        ],
    }


def test_results_expose_immutable_collections() -> None:
    """Stored collections should be tuples, not caller lists."""
    transactions = [_transaction("t1", "-10")]
    result = _calculate(_category(), transactions)
    transactions.append(_transaction("t2", "-1000"))

    assert isinstance(result.this_month_transactions, tuple)
    assert result.spent == Decimal("-10")
