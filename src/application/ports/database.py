"""Database ports for the budget application.

This module defines the application-layer protocol for accessing the
database engine holding budget records. Infrastructure implementations are
expected to provide concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the budget database engine."""

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: SQLAlchemy engine connected to the budget records.
        """


__all__ = ["DatabaseEnginePort"]
