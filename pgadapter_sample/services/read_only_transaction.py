"""
Read-only transactions.

Cloud Spanner read-only transactions never take locks and can read at a
timestamp in the past or from specific replicas. Through PGAdapter they are
started with plain SQL at the beginning of a transaction::

    set transaction read only
    set local spanner.read_only_staleness='read_timestamp 2024-01-01T00:00:00.000000Z'
    set local spanner.directed_read='{"includeReplicas":{...}}'

The ``set local`` variables only apply to the current transaction, so a
pooled connection is never left with a stale read setting. Other databases
(SQLite during development) run the work in a regular transaction.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy import func, text
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.core.models import DirectedReadOptions, TimestampBound

logger = get_logger(__name__)

T = TypeVar("T")

ReadWork = Callable[[AsyncSession], Awaitable[T]]


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def read_only_statements(
    timestamp_bound: Optional[TimestampBound] = None,
    directed_read_options: Optional[DirectedReadOptions] = None,
) -> List[str]:
    """Build the statements that start a read-only transaction.

    Args:
        timestamp_bound: Optional timestamp bound; strong when omitted
        directed_read_options: Optional replica selection

    Returns:
        SQL statements in the order they must be executed
    """
    statements = ["set transaction read only"]
    if timestamp_bound is not None:
        statements.append(f"set local spanner.read_only_staleness={_quote(timestamp_bound.to_staleness_value())}")
    if directed_read_options is not None:
        statements.append(f"set local spanner.directed_read={_quote(directed_read_options.to_json())}")
    return statements


class ReadOnlyTransactionService:
    """Runs a unit of work in a read-only transaction."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def execute(
        self,
        work: ReadWork[T],
        *,
        timestamp_bound: Optional[TimestampBound] = None,
        directed_read_options: Optional[DirectedReadOptions] = None,
    ) -> T:
        """Execute ``work`` in a read-only transaction.

        Args:
            work: Coroutine function receiving the transaction's session
            timestamp_bound: Optional timestamp bound for the reads
            directed_read_options: Optional replica selection for the reads

        Returns:
            Whatever ``work`` returns
        """
        async with self.session_factory.begin() as session:
            dialect = session.bind.dialect.name
            if dialect == "postgresql":
                for statement in read_only_statements(timestamp_bound, directed_read_options):
                    logger.debug(f"Read-only transaction: {statement}")
                    await session.exec(text(statement))
            else:
                logger.debug(f"{dialect} has no read-only transactions, running a regular transaction")
            return await work(session)

    async def get_current_timestamp(self) -> datetime:
        """Get the current timestamp of the database as a timezone-aware datetime.

        SQLite returns ``current_timestamp`` as a naive UTC value, which is
        marked as UTC here.
        """
        async with self.session_factory() as session:
            result = await session.exec(select(func.current_timestamp()))
            timestamp = result.one()
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp
