"""Application ports package."""

from .budget_repository import BudgetSnapshotRepositoryPort
from .database import DatabaseEnginePort

__all__ = [
    "BudgetSnapshotRepositoryPort",
    "DatabaseEnginePort",
]
