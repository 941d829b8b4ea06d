"""Domain models package."""

from .budget import (
    Category,
    IncomeCategory,
    MonthlyBudgetEntry,
    Transaction,
    TransactionSplit,
)
from .rollover import (
    ConditionalRollover,
    RolloverConfig,
    RolloverForNextMonth,
    RolloverToSelf,
    TransferRollover,
    rollover_config_from_record,
)

__all__ = [
    "Category",
    "IncomeCategory",
    "MonthlyBudgetEntry",
    "Transaction",
    "TransactionSplit",
    "ConditionalRollover",
    "RolloverConfig",
    "RolloverForNextMonth",
    "RolloverToSelf",
    "TransferRollover",
    "rollover_config_from_record",
]
