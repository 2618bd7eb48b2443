"""
Centralized Error Handlers

Turns `AppError` into JSON responses. Operational errors expose their
message and status; anything else is logged and answered with a generic 500.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dookon.errors import AppError

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": INTERNAL_ERROR_MESSAGE},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if not exc.is_operational:
        logger.error(
            "Unexpected application error",
            path=request.url.path,
            error=exc.message,
            stack="".join(exc.stack.format()),
        )
        return _internal_error()

    status = "fail" if 400 <= exc.status_code < 500 else "error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": status, "message": exc.message},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _internal_error()


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on `app`."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
