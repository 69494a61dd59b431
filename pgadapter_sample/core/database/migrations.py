"""
Schema migrations.

Runs the Alembic migrations in ``alembic/`` against a database. Alembic's
environment script is synchronous, so ``upgrade`` is executed in a worker
thread when called from async code.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from alembic import command
from alembic.config import Config

from pgadapter_sample.core.logging_config import get_logger

from .utils import normalize_database_url

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]
ALEMBIC_INI = PROJECT_ROOT / "alembic.ini"
ALEMBIC_SCRIPT_LOCATION = PROJECT_ROOT / "alembic"


def build_alembic_config(database_url: str) -> Config:
    """Build an Alembic config pointing at the project's migration scripts.

    Args:
        database_url: Target database URL

    Returns:
        Alembic Config with ``script_location`` and ``sqlalchemy.url`` set
    """
    config = Config(str(ALEMBIC_INI)) if ALEMBIC_INI.exists() else Config()
    config.set_main_option("script_location", str(ALEMBIC_SCRIPT_LOCATION))
    # ConfigParser interpolation: a literal '%' must be doubled.
    config.set_main_option("sqlalchemy.url", normalize_database_url(database_url).replace("%", "%%"))
    # The application has already configured logging.
    config.attributes["configure_logger"] = False
    return config


def upgrade(database_url: str, revision: str = "head") -> None:
    """Upgrade the database schema to ``revision``."""
    logger.info(f"Migrating database schema to {revision}")
    command.upgrade(build_alembic_config(database_url), revision)


async def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database schema without blocking the event loop."""
    await asyncio.to_thread(upgrade, database_url, revision)
