"""Database ports for the cost ledger.

This module defines the application-layer protocol for accessing the store
engine. Infrastructure implementations provide the concrete adapter.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncEngine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the record store."""

    def get_store_engine(self) -> AsyncEngine:
        """Get the engine for the record store database.

        Returns:
            AsyncEngine: SQLAlchemy engine connected to the store.
        """


__all__ = ["DatabaseEnginePort"]
