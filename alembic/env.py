"""Alembic environment for the PGAdapter sample.

Cloud Spanner does not support DDL inside read/write transactions, so
migrations run on an autocommit connection with transactional DDL disabled.
Each DDL statement is sent to PGAdapter as its own batch.
"""

from __future__ import annotations

from logging.config import fileConfig

from sqlalchemy import create_engine, pool

from alembic import context

from pgadapter_sample.core.config import settings
from pgadapter_sample.core.database.base import Base
from pgadapter_sample.core.database.utils import normalize_database_url

config = context.config

# Skipped when the application runs the migrations with its own logging.
if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url() -> str:
    return normalize_database_url(config.get_main_option("sqlalchemy.url") or settings.database.url)


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (SQL script output only)."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        transactional_ddl=False,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (live database connection)."""
    connectable = create_engine(get_url(), poolclass=pool.NullPool, isolation_level="AUTOCOMMIT")

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            transactional_ddl=False,
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
