"""
Stale reads.

A stale read sees the database as it was at a point in the past. It is
served by the closest replica without waiting for the leader, which makes
it cheaper than a strong read.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.core.models import TimestampBound

from .read_only_transaction import ReadOnlyTransactionService, ReadWork, T

logger = get_logger(__name__)


class StaleReadService:
    """Executes read-only transactions at a timestamp in the past."""

    def __init__(self, read_only_transactions: ReadOnlyTransactionService) -> None:
        self.read_only_transactions = read_only_transactions

    async def get_current_timestamp(self) -> datetime:
        return await self.read_only_transactions.get_current_timestamp()

    async def execute_read_only_transaction_at_timestamp(self, timestamp: datetime, work: ReadWork[T]) -> T:
        """Execute ``work`` in a read-only transaction that reads at ``timestamp``."""
        return await self.read_only_transactions.execute(
            work, timestamp_bound=TimestampBound.read_timestamp(timestamp)
        )

    async def execute_read_only_transaction_with_exact_staleness(
        self, staleness: timedelta, work: ReadWork[T]
    ) -> T:
        """Execute ``work`` in a read-only transaction that reads ``staleness`` in the past."""
        return await self.read_only_transactions.execute(
            work, timestamp_bound=TimestampBound.exact_staleness(staleness)
        )
