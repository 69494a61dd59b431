"""
Sample services.

Entity services generate, delete and query sample data; each operation
runs in its own transaction. The read services run work in read-only
transactions with timestamp bounds or directed read options.
"""

from .albums import AlbumService
from .concerts import ConcertService
from .directed_read import DirectedReadService
from .random_data import RandomDataService
from .read_only_transaction import ReadOnlyTransactionService, read_only_statements
from .singers import SingerService
from .stale_read import StaleReadService
from .ticket_sales import TicketSaleService
from .tracks import TrackService
from .venues import VenueService

__all__ = [
    "AlbumService",
    "ConcertService",
    "DirectedReadService",
    "RandomDataService",
    "ReadOnlyTransactionService",
    "SingerService",
    "StaleReadService",
    "TicketSaleService",
    "TrackService",
    "VenueService",
    "read_only_statements",
]
