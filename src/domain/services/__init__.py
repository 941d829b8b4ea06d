"""Domain services package."""

from .months import (
    format_month,
    is_date_in_month,
    iter_months,
    month_from_date,
    month_of,
    next_month,
    parse_month,
    previous_month,
)
from .budget_resolver import (
    get_budgeted_amount_for_month,
    get_earliest_budget_month,
    get_rollover_config_for_month,
    resolve_budget,
)
from .transactions import expand_splits, transactions_for_month
from .monthly_budget import CategoryMonthlyBudget, MonthlyBudget
from .budget_chain import (
    calculate_monthly_budget,
    get_chain_start_month,
    iter_monthly_budgets,
)
from .category_lifecycle import (
    get_income_for_month,
    rename_category,
    retire_category,
    set_income_for_month,
    set_monthly_budget,
)

__all__ = [
    "format_month",
    "is_date_in_month",
    "iter_months",
    "month_from_date",
    "month_of",
    "next_month",
    "parse_month",
    "previous_month",
    "get_budgeted_amount_for_month",
    "get_earliest_budget_month",
    "get_rollover_config_for_month",
    "resolve_budget",
    "expand_splits",
    "transactions_for_month",
    "CategoryMonthlyBudget",
    "MonthlyBudget",
    "calculate_monthly_budget",
    "get_chain_start_month",
    "iter_monthly_budgets",
    "get_income_for_month",
    "rename_category",
    "retire_category",
    "set_income_for_month",
    "set_monthly_budget",
]
