"""Unit tests for the server lifespan."""

from contextlib import asynccontextmanager
from unittest.mock import MagicMock, patch

import pytest

from pgadapter_sample.server import main


async def test_lifespan_keeps_context_while_running():
    context = MagicMock()
    events = []

    @asynccontextmanager
    async def fake_application_context(config):
        events.append("start")
        yield context
        events.append("stop")

    with patch.object(main, "application_context", fake_application_context):
        async with main.lifespan(main.app):
            assert main.app.state.context is context
            assert events == ["start"]

    assert events == ["start", "stop"]


async def test_lifespan_propagates_startup_failure():
    @asynccontextmanager
    async def failing_application_context(config):
        raise RuntimeError("PGAdapter unavailable")
        yield

    with patch.object(main, "application_context", failing_application_context):
        with pytest.raises(RuntimeError, match="PGAdapter unavailable"):
            async with main.lifespan(main.app):
                pass
