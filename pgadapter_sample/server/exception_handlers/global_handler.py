"""
Exception handlers of the sample server.

Errors that escape a route are logged together with the request that caused
them and answered with 500 and an ``error_id`` that also appears in the log
record. Invalid read options are the caller's mistake and get 422.
"""

import traceback
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.errors import InvalidReadOptionsError

logger = get_logger(__name__)


async def invalid_read_options_handler(request: Request, exc: InvalidReadOptionsError) -> JSONResponse:
    logger.warning(f"Invalid read options in {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled error and answer 500 with the id of the log record."""
    error_id = uuid.uuid4().hex

    logger.error(
        f"Request failed [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register both handlers; the read options handler takes precedence over the catch-all."""
    app.add_exception_handler(InvalidReadOptionsError, invalid_read_options_handler)
    app.add_exception_handler(Exception, global_exception_handler)
