"""Database infrastructure for the debt engine.

This module exposes concrete helpers to create and reuse a SQLAlchemy engine
connected to the debts database. It belongs to the infrastructure layer
because it deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading a local .env file first.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine with pre-ping for the given SQLAlchemy URL."""
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_debts_engine: Optional[Engine] = None


def get_debts_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the debts database.

    Returns:
        Engine: Lazily initialized engine built from ``DEBTS_DB_URL``.
    """
    global _debts_engine
    if _debts_engine is None:
        db_url = _get_env_var("DEBTS_DB_URL")
        _debts_engine = _create_engine(db_url)
    return _debts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    Repositories only see the port. Without an injected engine the adapter
    falls back to the process-wide engine configured by ``DEBTS_DB_URL``.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine overriding the environment-configured one.
        """
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the debts database.

        Returns:
            Engine: SQLAlchemy engine connected to the debts data store.
        """
        if self._engine is not None:
            return self._engine
        return get_debts_engine()


__all__ = [
    "get_debts_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
