"""PGAdapter sample.

A sample application that talks to a Cloud Spanner PostgreSQL-dialect
database through PGAdapter, started in-process (as a Docker container)
together with the application.

High-level architecture
-----------------------

- ``pgadapter_sample.pgadapter``: starts PGAdapter on an ephemeral port,
  publishes the port and stops it again on exit.
- ``pgadapter_sample.core.database``: SQLModel entities, async repositories,
  engine helpers and Alembic migrations.
- ``pgadapter_sample.services``: one service per entity plus the read-only
  transaction helpers for stale reads and directed reads.
- ``pgadapter_sample.application``: the command line entry point that seeds
  random data and demonstrates the read options.
- ``pgadapter_sample.server``: a small FastAPI app over the same services.

Typical workflow
----------------

1. ``application_context()`` starts PGAdapter, migrates the schema and
   builds the services.
2. ``SampleApplication.run()`` deletes and regenerates the sample data.
3. It then lists data with a stale read and with a directed read.
4. Leaving the context disposes the engine and stops PGAdapter.
"""

__version__ = "0.1.0"
