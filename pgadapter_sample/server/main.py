"""
Main Application Entry Point.

This module initializes the FastAPI application and includes all API routers.
The lifespan starts PGAdapter, migrates the database and keeps the sample
context on ``app.state`` until shutdown.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from pgadapter_sample import __version__
from pgadapter_sample.application import application_context
from pgadapter_sample.core.config import settings
from pgadapter_sample.core.logging_config import get_logger, setup_logging

from . import constant
from .api.v1 import concerts, health, singers
from .exception_handlers import setup_exception_handlers

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    PGAdapter and the connection pool live exactly as long as the server.
    """
    logger.info("Starting up PGAdapter sample server...")
    async with application_context(settings) as context:
        app.state.context = context
        logger.info("Database initialized successfully")
        yield
        logger.info("Shutting down PGAdapter sample server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="Sample data of a Cloud Spanner PostgreSQL database, served through PGAdapter.",
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    lifespan=lifespan,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(singers.router, prefix=f"{constant.API_V1_STR}/singers", tags=["singers"])
app.include_router(concerts.router, prefix=f"{constant.API_V1_STR}/concerts", tags=["concerts"])
