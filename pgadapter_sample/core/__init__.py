"""
Core utilities and configuration for the PGAdapter sample.

This package provides configuration, logging, read options and the
database layer shared by the services and the HTTP server.
"""

from pgadapter_sample.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
