"""Serve the HTTP API with ``python -m pgadapter_sample.server``."""

import uvicorn

from pgadapter_sample.core.config import settings

uvicorn.run("pgadapter_sample.server.main:app", host=settings.server_host, port=settings.server_port)
