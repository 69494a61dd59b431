"""
Venue service.

Deletes and generates venues.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.database.entities import Venue
from pgadapter_sample.core.database.repositories import VenueRepository
from pgadapter_sample.core.logging_config import get_logger

from .random_data import RandomDataService

logger = get_logger(__name__)


class VenueService:
    """Service for venue operations."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], random_data: RandomDataService
    ) -> None:
        self.session_factory = session_factory
        self.random_data = random_data

    async def delete_all_venues(self) -> int:
        async with self.session_factory.begin() as session:
            deleted = await VenueRepository(session).delete_all()
        logger.debug(f"Deleted {deleted} venues")
        return deleted

    async def generate_random_venues(self, count: int) -> List[Venue]:
        venues = [
            Venue(
                name=self.random_data.random_venue_name(),
                description=self.random_data.random_venue_description(),
            )
            for _ in range(count)
        ]
        async with self.session_factory.begin() as session:
            return await VenueRepository(session).save_all(venues)
