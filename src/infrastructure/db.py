"""Database infrastructure for the household ledger.

This module creates and reuses the SQLAlchemy engine connected to the ledger
database. It belongs to the infrastructure layer because it deals with an
external system.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import LedgerSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with health checks enabled. Server databases get a
        bounded QueuePool; SQLite keeps its default pool and its parent
        directory is created on demand.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(db_url, pool_pre_ping=True, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine(db_url: str | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger database.

    Args:
        db_url: Optional URL overriding the configured one on first use.

    Returns:
        Engine: Lazily initialized engine.

    Raises:
        RuntimeError: If no database URL can be resolved.
    """
    global _ledger_engine
    if _ledger_engine is None:
        resolved = db_url or LedgerSettings.from_env().db_url
        if not resolved:
            raise RuntimeError("Missing ledger database URL")
        _ledger_engine = _create_engine(resolved)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    Passing ``db_url`` gives the adapter its own engine; otherwise it shares
    the process-wide singleton.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._engine = _create_engine(db_url) if db_url else None

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger database.
        """
        if self._engine is not None:
            return self._engine
        return get_ledger_engine()


__all__ = ["get_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
