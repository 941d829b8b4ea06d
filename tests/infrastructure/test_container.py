"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.get_budget_allocation import (
    GetBudgetAllocationUseCase,
)
from src.application.use_cases.get_monthly_budget import (
    GetMonthlyBudgetUseCase,
)
from src.infrastructure import container
from src.infrastructure.budget_repository import SqlAlchemyBudgetRepository
from src.infrastructure.json_budget_repository import JsonBudgetRepository
from src.infrastructure.settings import BudgetSettings


def test_build_budget_repository_defaults_to_sql() -> None:
    """The default settings select the SQL repository."""
    repository = container.build_budget_repository(
        db_port=MagicMock(),
        settings=BudgetSettings(),
        logger=MagicMock(),
    )

    assert isinstance(repository, SqlAlchemyBudgetRepository)


def test_build_budget_repository_uses_json_backend(tmp_path) -> None:
    """The json backend wires the configured export and logger."""
    logger = MagicMock()
    settings = BudgetSettings(
        backend="json",
        snapshot_file=tmp_path / "budget.json",
    )

    repository = container.build_budget_repository(
        db_port=MagicMock(),
        settings=settings,
        logger=logger,
    )

    assert isinstance(repository, JsonBudgetRepository)
    assert repository._logger is logger


def test_use_case_builders_wire_repository_and_logger() -> None:
    """Given repositories and loggers are passed through unchanged."""
    repository = MagicMock()
    logger = MagicMock()

    chain_use_case = container.build_monthly_budget_use_case(
        repository,
        logger=logger,
    )
    allocation_use_case = container.build_budget_allocation_use_case(
        repository,
        logger=logger,
    )

    assert isinstance(chain_use_case, GetMonthlyBudgetUseCase)
    assert isinstance(allocation_use_case, GetBudgetAllocationUseCase)
    assert chain_use_case._budget_repository is repository
    assert chain_use_case._logger is logger
    assert allocation_use_case._budget_repository is repository
    assert allocation_use_case._logger is logger


def test_use_case_builders_fall_back_to_app_logger(monkeypatch) -> None:
    """Without a logger the application logger is used."""
    app_logger = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: app_logger)

    use_case = container.build_monthly_budget_use_case(MagicMock())

    assert use_case._logger is app_logger
