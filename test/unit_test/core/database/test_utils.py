"""Unit tests for database engine helpers."""

import pytest
from sqlalchemy import inspect

from pgadapter_sample.core.database import create_all, create_engine, normalize_database_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://localhost:5432/db", "postgresql+psycopg://localhost:5432/db"),
        ("postgresql://localhost:5432/db", "postgresql+psycopg://localhost:5432/db"),
        ("postgresql+asyncpg://localhost/db", "postgresql+psycopg://localhost/db"),
        ("postgresql+psycopg://localhost/db", "postgresql+psycopg://localhost/db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_create_engine_uses_psycopg_for_postgresql():
    engine = create_engine("postgresql://localhost:5432/db")

    assert engine.dialect.name == "postgresql"
    assert engine.dialect.driver == "psycopg"


async def test_create_all(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'sample.db'}")
    try:
        await create_all(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert {"singers", "albums", "tracks", "venues", "concerts", "ticket_sales"} <= set(tables)
    finally:
        await engine.dispose()
