"""Database infrastructure for the cost ledger.

This module exposes helpers to create and reuse the SQLAlchemy asyncio engines
backing the record store. It belongs to the infrastructure layer because it
deals with an external system (SQLite through aiosqlite by default).
"""

import os

import dotenv
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from cost_ledger.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> AsyncEngine:
    """Create a configured SQLAlchemy asyncio engine.

    Args:
        db_url: Fully qualified async database URL (driver included).

    Returns:
        AsyncEngine: Engine with connection health checks enabled.
    """
    return create_async_engine(
        db_url,
        pool_pre_ping=True,
        echo=False,
    )


_store_engines: dict[str, AsyncEngine] = {}


def get_store_engine(db_url: str | None = None) -> AsyncEngine:
    """Get the shared engine for a record store database.

    One engine is kept per URL, so adapters pointing at different
    databases never share connections.

    Args:
        db_url: Optional URL; read from COST_LEDGER_DB_URL when omitted.

    Returns:
        AsyncEngine: Lazily initialized engine connected to the store.
    """
    resolved_url = db_url or _get_env_var("COST_LEDGER_DB_URL")
    engine = _store_engines.get(resolved_url)
    if engine is None:
        engine = _create_engine(resolved_url)
        _store_engines[resolved_url] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by the module engine.

    The adapter hides configuration details behind the port so the store
    adapter depends only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Optional URL forwarded to get_store_engine.
        """
        self._db_url = db_url

    def get_store_engine(self) -> AsyncEngine:
        """Get the engine for the record store.

        Returns:
            AsyncEngine: SQLAlchemy engine connected to the store.
        """
        return get_store_engine(self._db_url)


__all__ = [
    "get_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
