"""
Track repository.

Track rows are addressed by ``(album id, track number)`` and are deleted
together with their album.
"""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.tracks import Track
from .base import AsyncBaseRepository


class TrackRepository(AsyncBaseRepository[Track]):
    """Repository for track data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Track)
