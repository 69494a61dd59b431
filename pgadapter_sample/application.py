"""
Sample application.

Shows how to use SQLAlchemy with PGAdapter and a Cloud Spanner PostgreSQL
database:

1. Start PGAdapter together with the application
2. Create the schema with Alembic
3. Use UUID and bit-reversed sequence primary keys
4. Use interleaved tables
5. Map the supported data types
6. Execute read/write and read-only transactions
7. Execute stale reads and reads with directed read options
"""

from __future__ import annotations

import asyncio
import random
import string
from contextlib import AsyncExitStack, asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.config import Settings, settings
from pgadapter_sample.core.database import create_all, create_engine, create_sessionmaker, run_migrations
from pgadapter_sample.core.database.entities import Concert
from pgadapter_sample.core.database.repositories import ConcertRepository
from pgadapter_sample.core.logging_config import get_logger, setup_logging
from pgadapter_sample.core.models import DirectedReadOptions, ReplicaType
from pgadapter_sample.pgadapter import PGAdapter
from pgadapter_sample.services import (
    AlbumService,
    ConcertService,
    DirectedReadService,
    RandomDataService,
    ReadOnlyTransactionService,
    SingerService,
    StaleReadService,
    TicketSaleService,
    TrackService,
    VenueService,
)

logger = get_logger(__name__)


async def find_all_concerts(session: AsyncSession) -> List[Concert]:
    return await ConcertRepository(session).find_all()


@dataclass(frozen=True)
class SampleContext:
    """Everything the sample needs, bound to one engine."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    singers: SingerService
    albums: AlbumService
    tracks: TrackService
    venues: VenueService
    concerts: ConcertService
    ticket_sales: TicketSaleService
    read_only_transactions: ReadOnlyTransactionService
    stale_reads: StaleReadService
    directed_reads: DirectedReadService


def build_context(engine: AsyncEngine, random_data: Optional[RandomDataService] = None) -> SampleContext:
    """Build all services on top of ``engine``."""
    session_factory = create_sessionmaker(engine)
    random_data = random_data or RandomDataService()
    read_only_transactions = ReadOnlyTransactionService(session_factory)
    return SampleContext(
        engine=engine,
        session_factory=session_factory,
        singers=SingerService(session_factory, random_data),
        albums=AlbumService(session_factory, random_data),
        tracks=TrackService(session_factory, random_data),
        venues=VenueService(session_factory, random_data),
        concerts=ConcertService(session_factory, random_data),
        ticket_sales=TicketSaleService(session_factory, random_data),
        read_only_transactions=read_only_transactions,
        stale_reads=StaleReadService(read_only_transactions),
        directed_reads=DirectedReadService(read_only_transactions),
    )


@asynccontextmanager
async def application_context(config: Settings = settings) -> AsyncIterator[SampleContext]:
    """Start PGAdapter, connect and migrate the database, and yield the services.

    On exit the connection pool is closed before PGAdapter is stopped.
    """
    async with AsyncExitStack() as stack:
        if config.pgadapter.embedded:
            stack.enter_context(PGAdapter(config))

        database = config.database
        engine = create_engine(database.url, echo=database.echo)
        stack.push_async_callback(engine.dispose)

        if database.auto_migrate:
            if engine.dialect.name == "postgresql":
                await run_migrations(database.url)
            else:
                await create_all(engine)

        yield build_context(engine)


class SampleApplication:
    """Runs the sample against a database."""

    def __init__(self, context: SampleContext, rng: Optional[random.Random] = None) -> None:
        self.context = context
        self.rng = rng or random.Random()

    async def run(self) -> None:
        ctx = self.context

        logger.info("Deleting all existing data")
        await ctx.ticket_sales.delete_all_ticket_sales()
        await ctx.concerts.delete_all_concerts()
        await ctx.venues.delete_all_venues()
        await ctx.tracks.delete_all_tracks()
        await ctx.albums.delete_all_albums()
        await ctx.singers.delete_all_singers()

        await ctx.singers.generate_random_singers(10)
        logger.info("Created 10 singers")
        await ctx.albums.generate_random_albums(30)
        logger.info("Created 30 albums")
        await ctx.tracks.generate_random_tracks(30, 15)
        logger.info("Created 15 tracks each for 30 albums")
        await ctx.venues.generate_random_venues(20)
        logger.info("Created 20 venues")
        await ctx.concerts.generate_random_concerts(50)
        logger.info("Created 50 concerts")
        await ctx.ticket_sales.generate_random_ticket_sales(200)
        logger.info("Created 200 ticket sales")

        await self.print_data()
        await self.stale_read()
        await self.directed_read()

    async def print_data(self) -> None:
        """Print the singers for three random last name initials."""
        for _ in range(3):
            prefix = self.rng.choice(string.ascii_uppercase)
            await self.context.singers.print_singers_with_last_name_starting_with(prefix)

    async def stale_read(self) -> List[Concert]:
        """Insert a concert and show that a read at an earlier timestamp does not see it."""
        ctx = self.context
        logger.info(f"Found {len(await ctx.concerts.find_all_concerts())} concerts using a strong read")

        current_time = await ctx.stale_reads.get_current_timestamp()
        logger.info("Inserting a new concert")
        await ctx.concerts.generate_random_concerts(1)

        # The read timestamp is before the insert, so the new concert is not included.
        concerts = await ctx.stale_reads.execute_read_only_transaction_at_timestamp(current_time, find_all_concerts)
        logger.info(f"Found {len(concerts)} concerts using a stale read")
        return concerts

    async def directed_read(self) -> List[Concert]:
        options = DirectedReadOptions.include_replica_types(ReplicaType.READ_ONLY)
        concerts = await self.context.directed_reads.execute_read_only_transaction_with_directed_read(
            options, find_all_concerts
        )
        logger.info(f"Found {len(concerts)} concerts using a query with directed read options")
        return concerts


async def run_sample(config: Settings = settings) -> None:
    async with application_context(config) as context:
        await SampleApplication(context).run()


def main() -> None:
    """Command line entry point."""
    setup_logging()
    asyncio.run(run_sample())


if __name__ == "__main__":
    main()
