"""Composition root for wiring infrastructure adapters."""

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_budget_allocation import (
    GetBudgetAllocationUseCase,
)
from src.application.use_cases.get_monthly_budget import (
    GetMonthlyBudgetUseCase,
)
from src.infrastructure.budget_repository_factory import (
    create_budget_repository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_budget_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
    logger=None,
) -> BudgetSnapshotRepositoryPort:
    """Return the configured budget snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    return create_budget_repository(
        resolved_db,
        logger=logger or get_app_logger(),
        settings=settings or BudgetSettings.from_env(),
    )


def build_monthly_budget_use_case(
    repository: BudgetSnapshotRepositoryPort | None = None,
    logger=None,
) -> GetMonthlyBudgetUseCase:
    """Return the monthly budget chain use case."""
    return GetMonthlyBudgetUseCase(
        budget_repository=repository or build_budget_repository(),
        logger=logger or get_app_logger(),
    )


def build_budget_allocation_use_case(
    repository: BudgetSnapshotRepositoryPort | None = None,
    logger=None,
) -> GetBudgetAllocationUseCase:
    """Return the income allocation use case."""
    return GetBudgetAllocationUseCase(
        budget_repository=repository or build_budget_repository(),
        logger=logger or get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_budget_repository",
    "build_monthly_budget_use_case",
    "build_budget_allocation_use_case",
]
