"""SQLAlchemy-backed repository for budget snapshot records."""

from collections import defaultdict
from datetime import date

from sqlalchemy import text

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import (
    Category,
    IncomeCategory,
    MonthlyBudgetEntry,
    Transaction,
    TransactionSplit,
    rollover_config_from_record,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyBudgetRepository(BudgetSnapshotRepositoryPort):
    """Repository reading budget records with plain SQL queries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def fetch_categories(self) -> list[Category]:
        category_query = text(
            """
            SELECT id, name, sort_order, icon, color, start_month, end_month
            FROM categories
            ORDER BY sort_order, id
            """
        )
        budget_query = text(
            """
            SELECT category_id,
                   budgeted_amount,
                   start_month,
                   rollover_type,
                   rollover_target_category_id,
                   rollover_max_amount
            FROM monthly_budgets
            ORDER BY category_id, start_month
            """
        )
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            category_rows = conn.execute(category_query).all()
            budget_rows = conn.execute(budget_query).all()

        entries: dict[str, list[MonthlyBudgetEntry]] = defaultdict(list)
        for row in budget_rows:
            entries[row.category_id].append(
                MonthlyBudgetEntry(
                    budgeted_amount=coerce_decimal(row.budgeted_amount),
                    start_month=row.start_month,
                    rollover_config=rollover_config_from_record(
                        row.rollover_type,
                        row.rollover_target_category_id,
                        row.rollover_max_amount,
                    ),
                )
            )
        return [
            Category(
                id=row.id,
                name=row.name,
                order=int(row.sort_order),
                icon=row.icon or "",
                color=row.color or "",
                start_month=row.start_month,
                end_month=row.end_month,
                monthly_budgets=tuple(entries.get(row.id, ())),
            )
            for row in category_rows
        ]

    def fetch_transactions(self) -> list[Transaction]:
        transaction_query = text(
            """
            SELECT id, date, description, amount, account_id, category_id
            FROM transactions
            ORDER BY date, id
            """
        )
        split_query = text(
            """
            SELECT transaction_id, category_id, amount
            FROM transaction_splits
            ORDER BY transaction_id, position
            """
        )
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            transaction_rows = conn.execute(transaction_query).all()
            split_rows = conn.execute(split_query).all()

        splits: dict[str, list[TransactionSplit]] = defaultdict(list)
        for row in split_rows:
            splits[row.transaction_id].append(
                TransactionSplit(
                    amount=coerce_decimal(row.amount),
                    category_id=row.category_id,
                )
            )
        return [
            Transaction(
                id=row.id,
                date=self._coerce_date(row.date),
                description=row.description or "",
                amount=coerce_decimal(row.amount),
                account_id=row.account_id,
                category_id=row.category_id,
                splits=tuple(splits.get(row.id, ())),
            )
            for row in transaction_rows
        ]

    def fetch_income_categories(self) -> list[IncomeCategory]:
        query = text(
            """
            SELECT id, budgeted_amount, start_month
            FROM income_categories
            ORDER BY start_month, id
            """
        )
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            IncomeCategory(
                id=row.id,
                budgeted_amount=coerce_decimal(row.budgeted_amount),
                start_month=row.start_month,
            )
            for row in rows
        ]

    @staticmethod
    def _coerce_date(raw_value) -> str:
        if isinstance(raw_value, date):
            return raw_value.isoformat()[:10]
        return str(raw_value)


__all__ = ["SqlAlchemyBudgetRepository"]
