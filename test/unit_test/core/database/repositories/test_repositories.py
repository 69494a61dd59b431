"""Unit tests for the repositories against an in-memory SQLite database."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from pgadapter_sample.core.database.entities import Album, Concert, Singer, TicketSale, Track, Venue
from pgadapter_sample.core.database.repositories import (
    AlbumRepository,
    ConcertRepository,
    SingerRepository,
    TicketSaleRepository,
    TrackRepository,
    VenueRepository,
)


@pytest.fixture
async def singers(session_factory):
    async with session_factory.begin() as session:
        return await SingerRepository(session).save_all(
            [
                Singer(first_name="Mia", last_name="Baker"),
                Singer(first_name="Alice", last_name="Brown"),
                Singer(first_name="Ben", last_name="Brown"),
                Singer(first_name=None, last_name="Adams"),
            ]
        )


class TestSingerRepository:
    async def test_save_all_and_count(self, session_factory, singers):
        async with session_factory() as session:
            assert await SingerRepository(session).count() == 4

    async def test_find_by_last_name_prefix_is_ordered(self, session_factory, singers):
        async with session_factory() as session:
            found = await SingerRepository(session).find_by_last_name_starting_with("B")

        assert [(s.last_name, s.first_name) for s in found] == [
            ("Baker", "Mia"),
            ("Brown", "Alice"),
            ("Brown", "Ben"),
        ]

    async def test_find_by_last_name_prefix_is_case_sensitive(self, session_factory, singers):
        async with session_factory() as session:
            assert await SingerRepository(session).find_by_last_name_starting_with("b") == []
            found = await SingerRepository(session).find_by_last_name_starting_with("Bak")
            assert await SingerRepository(session).find_by_last_name_starting_with("BAK") == []

        assert [s.last_name for s in found] == ["Baker"]

    async def test_full_name_is_generated(self, session_factory, singers):
        async with session_factory() as session:
            found = await SingerRepository(session).find_by_last_name_starting_with("")

        assert {s.full_name for s in found} == {"Mia Baker", "Alice Brown", "Ben Brown", "Adams"}

    async def test_albums_are_loaded(self, session_factory, singers):
        async with session_factory.begin() as session:
            await AlbumRepository(session).save_all([Album(title="Golden river", singer_id=singers[0].id)])

        async with session_factory() as session:
            found = await SingerRepository(session).find_by_last_name_starting_with("Baker")

        assert [album.title for album in found[0].albums] == ["Golden river"]

    async def test_delete_all(self, session_factory, singers):
        async with session_factory.begin() as session:
            assert await SingerRepository(session).delete_all() == 4

        async with session_factory() as session:
            assert await SingerRepository(session).count() == 0


class TestAlbumAndTrackRepository:
    async def test_album_columns_round_trip(self, session_factory, singers):
        album = Album(
            title="Silent moon",
            marketing_budget=Decimal("1234.50"),
            release_date=datetime(2001, 2, 3).date(),
            cover_picture=b"\x00\x01\x02",
            singer_id=singers[0].id,
        )
        async with session_factory.begin() as session:
            await AlbumRepository(session).save_all([album])

        async with session_factory() as session:
            loaded = await session.get(Album, album.id)

        assert loaded.title == "Silent moon"
        assert loaded.marketing_budget == Decimal("1234.50")
        assert loaded.cover_picture == b"\x00\x01\x02"

    async def test_tracks_use_album_id_and_track_number(self, session_factory, singers):
        album = Album(title="Endless road", singer_id=singers[0].id)
        async with session_factory.begin() as session:
            await AlbumRepository(session).save_all([album])
            await TrackRepository(session).save_all(
                [Track(id=album.id, track_number=n, title=f"Track {n}", sample_rate=44.1) for n in (3, 1, 2)]
            )

        async with session_factory() as session:
            tracks = await TrackRepository(session).find_all()
            track = await session.get(Track, (album.id, 2))

        assert sorted(t.track_number for t in tracks) == [1, 2, 3]
        assert track.title == "Track 2"


class TestConcertAndTicketSaleRepository:
    async def test_concerts_ordered_by_start_time(self, session_factory, singers):
        venue = Venue(name="The Hall", description={"capacity": 500})
        start = datetime(2030, 1, 1, 20, tzinfo=timezone.utc)
        async with session_factory.begin() as session:
            await VenueRepository(session).save_all([venue])
            await ConcertRepository(session).save_all(
                [
                    Concert(
                        venue_id=venue.id,
                        singer_id=singers[0].id,
                        name=name,
                        start_time=start + timedelta(days=offset),
                        end_time=start + timedelta(days=offset, hours=2),
                    )
                    for name, offset in (("late", 5), ("early", 1), ("middle", 3))
                ]
            )

        async with session_factory() as session:
            concerts = await ConcertRepository(session).find_all()
            limited = await ConcertRepository(session).find_all(limit=2, offset=1)

        assert [c.name for c in concerts] == ["early", "middle", "late"]
        assert [c.name for c in limited] == ["middle", "late"]

    async def test_ticket_sale_gets_generated_id(self, session_factory, singers):
        venue = Venue(name="The Club", description={})
        start = datetime(2030, 1, 1, 20, tzinfo=timezone.utc)
        concert = Concert(
            venue_id=venue.id,
            singer_id=singers[0].id,
            name="Opening night",
            start_time=start,
            end_time=start + timedelta(hours=1),
        )
        sale = TicketSale(concert_id=concert.id, customer_name="Ann Lee", price=Decimal("99.99"), seats=["A1", "A2"])
        async with session_factory.begin() as session:
            await VenueRepository(session).save_all([venue])
            await ConcertRepository(session).save_all([concert])
            await TicketSaleRepository(session).save_all([sale])

        assert sale.id is not None

        async with session_factory() as session:
            loaded = await session.get(TicketSale, sale.id)

        assert loaded.seats == ["A1", "A2"]
        assert loaded.price == Decimal("99.99")

    async def test_venue_description_round_trip(self, session_factory):
        async with session_factory.begin() as session:
            venue = Venue(name="Arena", description={"capacity": 100})
            await VenueRepository(session).save_all([venue])

        async with session_factory() as session:
            found = await VenueRepository(session).find_all()

        assert found[0].id == venue.id
        assert found[0].description == {"capacity": 100}
