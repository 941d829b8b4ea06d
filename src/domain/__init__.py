"""Domain package for budget rules and core models."""

from .constants import ROLLOVER_TYPES
from .errors import (
    BudgetError,
    ConfigError,
    MissingDataError,
    StateError,
    ValidationError,
)
from .models import (
    Category,
    ConditionalRollover,
    IncomeCategory,
    MonthlyBudgetEntry,
    RolloverConfig,
    RolloverForNextMonth,
    RolloverToSelf,
    Transaction,
    TransactionSplit,
    TransferRollover,
)
from .policies import is_category_active_for_month
from .services import (
    CategoryMonthlyBudget,
    MonthlyBudget,
    calculate_monthly_budget,
    expand_splits,
    get_budgeted_amount_for_month,
    resolve_budget,
)

__all__ = [
    "ROLLOVER_TYPES",
    "BudgetError",
    "ConfigError",
    "MissingDataError",
    "StateError",
    "ValidationError",
    "Category",
    "ConditionalRollover",
    "IncomeCategory",
    "MonthlyBudgetEntry",
    "RolloverConfig",
    "RolloverForNextMonth",
    "RolloverToSelf",
    "Transaction",
    "TransactionSplit",
    "TransferRollover",
    "is_category_active_for_month",
    "CategoryMonthlyBudget",
    "MonthlyBudget",
    "calculate_monthly_budget",
    "expand_splits",
    "get_budgeted_amount_for_month",
    "resolve_budget",
]
