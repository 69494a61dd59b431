"""
Ticket sale repository.

Provides data access operations for ticket sales.
"""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.ticket_sales import TicketSale
from .base import AsyncBaseRepository


class TicketSaleRepository(AsyncBaseRepository[TicketSale]):
    """Repository for ticket sale data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TicketSale)
