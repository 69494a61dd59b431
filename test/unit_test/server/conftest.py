from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from pgadapter_sample.server.main import app
from pgadapter_sample.server.services.deps import get_context


@pytest.fixture
async def client(context) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, bound to the SQLite sample context.

    The lifespan is not run, so no PGAdapter is started.
    """
    app.dependency_overrides[get_context] = lambda: context
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()
