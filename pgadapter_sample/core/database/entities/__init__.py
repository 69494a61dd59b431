"""
Database entity models.

One module per table of the sample data model:

- singers: Singers (root of the model)
- albums: Albums of a singer
- tracks: Tracks, interleaved in albums
- venues: Concert venues
- concerts: Concerts of a singer at a venue
- ticket_sales: Tickets sold for a concert

All modules are imported here so the relationships between them can be
resolved before the first query.
"""

from .albums import Album
from .concerts import Concert
from .singers import Singer
from .ticket_sales import TICKET_SALE_SEQUENCE, TicketSale
from .tracks import Track
from .venues import Venue

__all__ = [
    "Album",
    "Concert",
    "Singer",
    "TICKET_SALE_SEQUENCE",
    "TicketSale",
    "Track",
    "Venue",
]
