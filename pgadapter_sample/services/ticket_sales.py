"""
Ticket sale service.

Deletes and generates ticket sales for random existing concerts.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.database.entities import TicketSale
from pgadapter_sample.core.database.repositories import ConcertRepository, TicketSaleRepository
from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.errors import NoParentRowsError

from .random_data import RandomDataService

logger = get_logger(__name__)


class TicketSaleService:
    """Service for ticket sale operations."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], random_data: RandomDataService
    ) -> None:
        self.session_factory = session_factory
        self.random_data = random_data

    async def delete_all_ticket_sales(self) -> int:
        async with self.session_factory.begin() as session:
            deleted = await TicketSaleRepository(session).delete_all()
        logger.debug(f"Deleted {deleted} ticket sales")
        return deleted

    async def generate_random_ticket_sales(self, count: int) -> List[TicketSale]:
        """Insert ``count`` ticket sales for randomly chosen concerts.

        Raises:
            NoParentRowsError: If there are no concerts
        """
        async with self.session_factory.begin() as session:
            concerts = await ConcertRepository(session).find_all()
            if not concerts:
                raise NoParentRowsError("ticket sales", "concerts")
            ticket_sales = [
                TicketSale(
                    concert_id=self.random_data.rng.choice(concerts).id,
                    customer_name=f"{self.random_data.random_first_name()} {self.random_data.random_last_name()}",
                    price=self.random_data.random_amount(20, 500),
                    seats=self.random_data.random_seats(),
                )
                for _ in range(count)
            ]
            return await TicketSaleRepository(session).save_all(ticket_sales)
