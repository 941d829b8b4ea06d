"""JSON-file repository for budget exports.

The export holds ``categories``, ``transactions`` and ``incomeCategories``
arrays using the camelCase field names of the web application's stores.
"""

from datetime import datetime, timezone
from decimal import Decimal
import json
from pathlib import Path

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.domain.models import (
    Category,
    IncomeCategory,
    MonthlyBudgetEntry,
    Transaction,
    TransactionSplit,
    rollover_config_from_record,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class JsonBudgetRepository(BudgetSnapshotRepositoryPort):
    """Repository reading a JSON budget export from disk."""

    def __init__(self, snapshot_path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            snapshot_path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_path = Path(snapshot_path)
        self._logger = logger or get_app_logger()
        self._payload: dict | None = None

    def fetch_categories(self) -> list[Category]:
        return [
            self._parse_category(raw)
            for raw in self._load().get("categories", [])
        ]

    def fetch_transactions(self) -> list[Transaction]:
        return [
            self._parse_transaction(raw)
            for raw in self._load().get("transactions", [])
        ]

    def fetch_income_categories(self) -> list[IncomeCategory]:
        return [
            IncomeCategory(
                id=raw["id"],
                budgeted_amount=coerce_decimal(raw["budgetedAmount"]),
                start_month=raw["startMonth"],
            )
            for raw in self._load().get("incomeCategories", [])
        ]

    def _load(self) -> dict:
        if self._payload is None:
            try:
                content = self._snapshot_path.read_text(encoding="utf-8")
                payload = json.loads(content, parse_float=Decimal)
            except (OSError, json.JSONDecodeError) as exc:
                raise RuntimeError(
                    f"Cannot read budget snapshot {self._snapshot_path}: {exc}"
                ) from exc
            if not isinstance(payload, dict):
                raise RuntimeError(
                    f"Budget snapshot {self._snapshot_path} must be an object"
                )
            self._logger.info(f"Loaded budget snapshot {self._snapshot_path}")
            self._payload = payload
        return self._payload

    @staticmethod
    def _parse_category(raw: dict) -> Category:
        entries = []
        for budget in raw.get("monthlyBudgets", []):
            config = budget.get("rolloverConfig") or {}
            entries.append(
                MonthlyBudgetEntry(
                    budgeted_amount=coerce_decimal(budget["budgetedAmount"]),
                    start_month=budget["startMonth"],
                    rollover_config=rollover_config_from_record(
                        config.get("type"),
                        config.get("targetCategoryId"),
                        config.get("maxRolloverAmount"),
                    ),
                )
            )
        entries.sort(key=lambda entry: entry.start_month)
        return Category(
            id=raw["id"],
            name=raw.get("name", ""),
            order=_coerce_order(raw.get("order", 0)),
            icon=raw.get("icon", ""),
            color=raw.get("color", ""),
            start_month=raw["startMonth"],
            end_month=raw.get("endMonth"),
            monthly_budgets=tuple(entries),
        )

    @classmethod
    def _parse_transaction(cls, raw: dict) -> Transaction:
        return Transaction(
            id=raw["id"],
            date=cls._coerce_date(raw["date"]),
            description=raw.get("description", ""),
            amount=coerce_decimal(raw["amount"]),
            account_id=raw.get("accountId", ""),
            category_id=raw.get("categoryId"),
            splits=tuple(
                TransactionSplit(
                    amount=coerce_decimal(split["amount"]),
                    category_id=split.get("categoryId"),
                )
                for split in raw.get("splits") or ()
            ),
        )

    @staticmethod
    def _coerce_date(raw_value) -> str:
        # Older exports store epoch milliseconds.
        if isinstance(raw_value, (int, Decimal)):
            moment = datetime.fromtimestamp(
                float(raw_value) / 1000,
                tz=timezone.utc,
            )
            return moment.date().isoformat()
        return str(raw_value)


def _coerce_order(raw_value) -> int | Decimal:
    """Return integral positions as int and fractional ones unchanged."""
    value = coerce_decimal(raw_value)
    if value == value.to_integral_value():
        return int(value)
    return value


__all__ = ["JsonBudgetRepository"]
