"""Application use cases package."""

from .get_budget_allocation import (
    BudgetAllocation,
    GetBudgetAllocationUseCase,
)
from .get_monthly_budget import GetMonthlyBudgetUseCase, MonthlyBudgetChain

__all__ = [
    "BudgetAllocation",
    "GetBudgetAllocationUseCase",
    "GetMonthlyBudgetUseCase",
    "MonthlyBudgetChain",
]
