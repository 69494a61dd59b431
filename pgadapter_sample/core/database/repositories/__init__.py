"""
Database repository layer using SQLModel.

This package contains one repository class per entity. Repositories share
the ``AsyncBaseRepository`` interface (find_all, count, save_all,
delete_all) and add entity-specific queries where needed.

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- singers, albums, tracks, venues, concerts, ticket_sales: entity repositories
"""

from .albums import AlbumRepository
from .base import AsyncBaseRepository, QueryBuilder
from .concerts import ConcertRepository
from .singers import SingerRepository
from .ticket_sales import TicketSaleRepository
from .tracks import TrackRepository
from .venues import VenueRepository

__all__ = [
    "AlbumRepository",
    "AsyncBaseRepository",
    "ConcertRepository",
    "QueryBuilder",
    "SingerRepository",
    "TicketSaleRepository",
    "TrackRepository",
    "VenueRepository",
]
