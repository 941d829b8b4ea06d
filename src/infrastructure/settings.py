"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for selecting the budget snapshot backend.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        snapshot_file: Optional path to a JSON budget export.
        target_month: Optional month key requested by the CLI.
    """

    backend: str = "sqlalchemy"
    snapshot_file: Optional[Path] = None
    target_month: Optional[str] = None

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables and a .env file.

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("BUDGET_BACKEND", "sqlalchemy").strip().lower()
        raw_snapshot = os.getenv("BUDGET_SNAPSHOT_FILE")
        logger = get_app_logger()
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        target_month = os.getenv("BUDGET_MONTH", "").strip() or None
        return cls(
            backend=backend,
            snapshot_file=snapshot_file,
            target_month=target_month,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the snapshot file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Budget snapshot file does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set BUDGET_SNAPSHOT_FILE to choose one."
            )
        return None


__all__ = ["BudgetSettings"]
