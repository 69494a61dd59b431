"""
Venue repository.

Provides data access operations for venues.
"""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.venues import Venue
from .base import AsyncBaseRepository


class VenueRepository(AsyncBaseRepository[Venue]):
    """Repository for venue data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Venue)
