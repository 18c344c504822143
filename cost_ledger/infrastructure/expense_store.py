"""SQLAlchemy-backed record store for expenses and settings."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cost_ledger.application.ports.clock import ClockPort
from cost_ledger.application.ports.database import DatabaseEnginePort
from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.domain.errors import StoreReadError, StoreWriteError
from cost_ledger.domain.models import ExpenseDraft, ExpenseRecord
from cost_ledger.infrastructure.clock import SystemClock
from cost_ledger.infrastructure.logging.logger import get_app_logger
from cost_ledger.infrastructure.tables import Base, CostRow, SettingRow


def _as_utc(moment: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are read back as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _to_record(row: CostRow) -> ExpenseRecord:
    return ExpenseRecord(
        id=row.id,
        amount=row.amount,
        currency=row.currency,
        category=row.category,
        description=row.description,
        recorded_at=_as_utc(row.recorded_at),
    )


class SqlAlchemyExpenseStore(ExpenseStorePort):
    """Record store persisting the ``costs`` and ``settings`` tables.

    The store starts unopened; ``open`` creates missing tables and is safe
    to call repeatedly. Every other operation opens the store on demand.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the store engine.
            clock: Clock stamping new records; system UTC time by default.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()
        self._sessions: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_ready(self) -> bool:
        return self._sessions is not None

    async def open(self) -> None:
        """Create the ``costs`` and ``settings`` tables when absent.

        Raises:
            StoreReadError: If the database cannot be reached.
        """
        if self._sessions is not None:
            return
        engine = self._db_port.get_store_engine()
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to open record store: {exc}")
            raise StoreReadError("Record store unavailable") from exc
        self._sessions = async_sessionmaker(engine, expire_on_commit=False)
        self._logger.info("Record store ready")

    async def close(self) -> None:
        """Dispose of the engine connections and return to unopened."""
        await self._db_port.get_store_engine().dispose()
        self._sessions = None

    async def _session_factory(self) -> async_sessionmaker[AsyncSession]:
        await self.open()
        return self._sessions

    async def create_expense(self, draft: ExpenseDraft) -> ExpenseRecord:
        """Persist a new expense stamped with the clock's current time.

        Args:
            draft: Caller-supplied fields, stored verbatim.

        Returns:
            ExpenseRecord: Stored record with id and creation time.

        Raises:
            StoreWriteError: If the database rejects the write.
        """
        try:
            sessions = await self._session_factory()
        except StoreReadError as exc:
            raise StoreWriteError("Record store unavailable for writes") from exc
        row = CostRow(
            amount=draft.amount,
            currency=draft.currency,
            category=draft.category,
            description=draft.description,
            recorded_at=_as_utc(self._clock.now()),
        )
        try:
            async with sessions() as session:
                session.add(row)
                await session.commit()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to store expense: {exc}")
            raise StoreWriteError("Failed to store expense") from exc
        return _to_record(row)

    async def list_all_expenses(self) -> list[ExpenseRecord]:
        """Return every stored expense.

        Raises:
            StoreReadError: If the database cannot be read.
        """
        sessions = await self._session_factory()
        try:
            async with sessions() as session:
                result = await session.execute(
                    select(CostRow).order_by(CostRow.id)
                )
                rows = list(result.scalars().all())
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read expenses: {exc}")
            raise StoreReadError("Failed to read expenses") from exc
        return [_to_record(row) for row in rows]

    async def get_expense(self, expense_id: int) -> ExpenseRecord | None:
        """Return one expense by identifier.

        Raises:
            StoreReadError: If the database cannot be read.
        """
        sessions = await self._session_factory()
        try:
            async with sessions() as session:
                row = await session.get(CostRow, expense_id)
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read expense {expense_id}: {exc}")
            raise StoreReadError(f"Failed to read expense {expense_id}") from exc
        return _to_record(row) if row is not None else None

    async def get_setting(self, key: str) -> str | None:
        """Return a setting value, or None when the key is absent.

        Raises:
            StoreReadError: If the database cannot be read.
        """
        sessions = await self._session_factory()
        try:
            async with sessions() as session:
                row = await session.get(SettingRow, key)
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read setting {key}: {exc}")
            raise StoreReadError(f"Failed to read setting {key}") from exc
        return row.value if row is not None else None

    async def put_setting(self, key: str, value: str) -> None:
        """Store a setting value, replacing any previous one.

        Raises:
            StoreWriteError: If the database rejects the write.
        """
        try:
            sessions = await self._session_factory()
        except StoreReadError as exc:
            raise StoreWriteError("Record store unavailable for writes") from exc
        try:
            async with sessions() as session:
                await session.merge(SettingRow(key=key, value=value))
                await session.commit()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to store setting {key}: {exc}")
            raise StoreWriteError(f"Failed to store setting {key}") from exc


__all__ = ["SqlAlchemyExpenseStore"]
