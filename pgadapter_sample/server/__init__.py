"""
HTTP server for the PGAdapter sample.

Exposes the sample data over a small FastAPI application.

Subpackages:
    api: FastAPI route definitions.
    exception_handlers: Error responses for unhandled and invalid-input errors.
    services: Request dependencies.
"""
