# File: app/api/error_handlers.py

"""
Global exception handlers.

Routers map the expected service errors themselves (each endpoint has its
own response shape); these handlers cover what escapes a router:
  - AppError (e.g. InvalidTokenError from the order guard)
  - RequestValidationError: missing / mistyped body fields answer 400,
    except on order creation, which answers 500 {error}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import AppError

logger = logging.getLogger(__name__)

ORDERS_PATH = f"{settings.api_prefix}/orders"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        if request.method == "POST" and request.url.path == ORDERS_PATH:
            # Order creation reports any bad input as a failed create
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Failed to create order"},
            )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _summarize(exc)},
        )


def _summarize(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"] if loc != "body")
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts) or "Invalid request"
