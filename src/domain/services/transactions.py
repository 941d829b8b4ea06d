"""Transaction selection and split expansion."""

from collections.abc import Iterable
from dataclasses import replace

from src.domain.constants import SPLIT_ID_SEPARATOR
from src.domain.models.budget import Transaction
from src.domain.services.months import month_of


def transactions_for_month(
    transactions: Iterable[Transaction],
    month: str,
) -> list[Transaction]:
    """Return the transactions dated within ``month``."""
    return [
        transaction for transaction in transactions
        if month_of(transaction.date) == month
    ]


def expand_splits(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Replace split transactions by one transaction per split.

    Split transactions get ids suffixed with the split position and carry
    the split's amount and category. Transactions without splits are
    returned unchanged.

    Args:
        transactions: Transactions as stored.

    Returns:
        list[Transaction]: Transactions with at most one category each.
    """
    expanded: list[Transaction] = []
    for transaction in transactions:
        if not transaction.splits:
            expanded.append(transaction)
            continue
        for index, split in enumerate(transaction.splits):
            expanded.append(
                replace(
                    transaction,
                    id=f"{transaction.id}{SPLIT_ID_SEPARATOR}{index}",
                    amount=split.amount,
                    category_id=split.category_id,
                    splits=(),
                )
            )
    return expanded


__all__ = ["transactions_for_month", "expand_splits"]
