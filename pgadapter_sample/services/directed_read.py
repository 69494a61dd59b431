"""
Directed reads.

Directed reads route the reads of a read-only transaction to replicas of a
given type or location, e.g. to keep analytical queries off the read/write
replicas.
"""

from __future__ import annotations

from pgadapter_sample.core.models import DirectedReadOptions

from .read_only_transaction import ReadOnlyTransactionService, ReadWork, T


class DirectedReadService:
    """Executes read-only transactions with directed read options."""

    def __init__(self, read_only_transactions: ReadOnlyTransactionService) -> None:
        self.read_only_transactions = read_only_transactions

    async def execute_read_only_transaction_with_directed_read(
        self, options: DirectedReadOptions, work: ReadWork[T]
    ) -> T:
        return await self.read_only_transactions.execute(work, directed_read_options=options)
