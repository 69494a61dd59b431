"""
Database layer for the PGAdapter sample.

This package provides a single location for all database entities and
repositories of the sample data model.

Structure:
- entities/: SQLModel entity models, one module per table
- repositories/: Data access layer, one repository per entity
- utils.py: Engine and session factory helpers
- migrations.py: Alembic schema migrations
"""

from .base import AbstractBaseEntity, Base
from .migrations import run_migrations
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "AbstractBaseEntity",
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "normalize_database_url",
    "run_migrations",
]
