"""Factory helpers to select the budget snapshot backend."""

from pathlib import Path

from src.application.ports.budget_repository import (
    BudgetSnapshotRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.budget_repository import SqlAlchemyBudgetRepository
from src.infrastructure.json_budget_repository import JsonBudgetRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def create_budget_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: BudgetSettings | None = None,
) -> BudgetSnapshotRepositoryPort:
    """Return a budget repository implementation based on configuration.

    Args:
        db_port: Port providing access to the budget engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from env when omitted.

    Returns:
        BudgetSnapshotRepositoryPort: Concrete repository implementation.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or BudgetSettings.from_env()
    backend = resolved_settings.backend

    if backend == "sqlalchemy":
        return SqlAlchemyBudgetRepository(db_port)

    if backend == "json":
        path: Path | None = resolved_settings.snapshot_file
        if path is None:
            raise RuntimeError(
                "JSON backend requires a BUDGET_SNAPSHOT_FILE path."
            )
        return JsonBudgetRepository(path, logger=resolved_logger)

    raise ValueError(
        f"Unsupported budget backend: {backend}. Expected sqlalchemy or json."
    )


__all__ = ["create_budget_repository"]
