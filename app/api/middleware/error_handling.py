# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error messages
# that users can understand, like translating technical problems into helpful responses.
# 🧪 Purpose (Technical Summary):
# Global error handling: a middleware that stamps request correlation headers and converts escaped
# exceptions into 500 envelopes, plus FastAPI exception handlers for application exceptions,
# request validation errors and unmatched routes.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, app.shared.utils.logging, traceback, uuid
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware and handler registration), all API endpoints

import time
import traceback
import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import MarketplaceAPIException, ValidationError
from app.shared.utils.formatters import format_error_response
from app.shared.utils.logging import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the marketplace API

    Assigns every request a correlation id, times it, and converts any
    exception that escapes the route handlers into a 500 envelope. Raw
    exception text is only added in development with DEBUG on.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = self._handle_exception(request, exc, request_id)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{time.time() - start_time:.3f}s"
        return response

    def _handle_exception(self, request: Request, exc: Exception, request_id: str) -> JSONResponse:
        """
        Render an unhandled exception.

        Args:
            request: HTTP request
            exc: Exception that escaped the application
            request_id: Request correlation ID

        Returns:
            JSON error response
        """
        logger.error(
            f"Unhandled error in {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": str(request.url.path),
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            },
            exc_info=True
        )

        details = None
        if self.settings.expose_error_details:
            details = {
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
                "traceback": traceback.format_exc().split("\n"),
            }

        return JSONResponse(
            status_code=500,
            content=format_error_response("Internal server error", details),
        )


# =========================================================================
# EXCEPTION HANDLERS
# =========================================================================

def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten pydantic/FastAPI errors into [{"field", "message"}].

    The request location prefix ("body", "query", ...) is dropped so the
    field reads as the client sent it, e.g. "seller.email" or "images".
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        formatted.append({"field": ".".join(loc) or "body", "message": message})
    return formatted


async def marketplace_exception_handler(request: Request, exc: MarketplaceAPIException) -> JSONResponse:
    """Handle application exceptions raised by handlers and repositories."""
    settings = get_settings()

    if exc.status_code >= 500:
        logger.error(
            f"Server error in {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.error_code, "status_code": exc.status_code},
            exc_info=exc
        )
    else:
        logger.info(
            f"Client error in {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.error_code, "status_code": exc.status_code}
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=settings.expose_error_details),
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed requests: 400 "Validation error" with per-field details."""
    error = ValidationError("Validation error", errors=format_validation_errors(exc.errors()))
    logger.info(
        f"Validation failed for {request.method} {request.url.path}",
        extra={"fields": [item["field"] for item in error.details]}
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors and explicit HTTPExceptions."""
    if exc.status_code == 404:
        content = format_error_response("Route not found", path=str(request.url.path))
    elif isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = format_error_response(str(exc.detail))

    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketplaceAPIException, marketplace_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
