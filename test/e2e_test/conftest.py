"""Fixtures for end-to-end tests against PGAdapter and the Spanner emulator.

The tests start the image that bundles PGAdapter with the emulator through
testcontainers. They need Docker and only run with ``E2E_TESTS=1``.
"""

from __future__ import annotations

import os
from typing import AsyncIterator

import pytest

from pgadapter_sample.application import SampleContext, application_context
from pgadapter_sample.core.config import Settings


def pytest_collection_modifyitems(config, items):
    if os.getenv("E2E_TESTS") == "1":
        return
    skip = pytest.mark.skip(reason="set E2E_TESTS=1 to run end-to-end tests")
    for item in items:
        if "e2e_test" in str(item.fspath):
            item.add_marker(skip)


@pytest.fixture
def e2e_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("PGADAPTER_HOST", "localhost")
    monkeypatch.setenv("PGADAPTER_PORT", "5432")
    return Settings(
        _env_file=None,
        pgadapter_embedded=True,
        pgadapter_use_bundled_emulator=True,
        spanner_project="emulator-project",
        spanner_instance="test-instance",
        spanner_database="test-database",
        database_url=None,
        database_auto_migrate=True,
    )


@pytest.fixture
async def e2e_context(e2e_settings: Settings) -> AsyncIterator[SampleContext]:
    async with application_context(e2e_settings) as context:
        yield context
