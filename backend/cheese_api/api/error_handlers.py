"""Error Handlers — global exception handlers for the Cheese Shop API.

Invariants:
    - CheeseShopError → exc.http_status with exc.to_response() body
    - Any other exception → 500 INTERNAL_ERROR, no exception text in the body

Design Decisions:
    - 4xx domain errors logged as warnings; only 5xx are errors
    - No RequestValidationError handler: routes take no body or query, and the
      one path parameter is a plain string parsed in core/presenter.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cheese_api.core.errors import CheeseShopError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(CheeseShopError, handle_cheese_shop_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_cheese_shop_error(request: Request, exc: CheeseShopError):
    """Render a domain/infrastructure error with its own status and body."""
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "cheese_id": exc.context.resource_id,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )
