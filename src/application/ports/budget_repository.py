"""Application port for budget snapshot access."""

from typing import Protocol

from src.domain.models import Category, IncomeCategory, Transaction


class BudgetSnapshotRepositoryPort(Protocol):
    """Port exposing the records the budget engine computes from."""

    def fetch_categories(self) -> list[Category]:
        """Return every budget category, including ended ones."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return every transaction with its splits."""

    def fetch_income_categories(self) -> list[IncomeCategory]:
        """Return every income record."""


__all__ = ["BudgetSnapshotRepositoryPort"]
