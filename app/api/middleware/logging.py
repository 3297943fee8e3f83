# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to the medicine marketplace, recording what was asked for,
# how long it took to respond, and whether it was unusually slow.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that records method, path, filtered query parameters, client address,
# status and duration through the structured PerformanceLogger, flagging slow requests.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.utils.logging, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import time
from typing import Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

EXCLUDED_PATHS = {"/api/health", "/favicon.ico"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request/response timing
    - Sensitive query parameter filtering
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.sensitive_params = {"key", "api_key", "token", "secret", "password"}

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time

        extra = {
            "request_id": getattr(request.state, "request_id", None),
            "query_params": self._filter_sensitive_params(dict(request.query_params)),
            "client_ip": self._get_client_ip(request),
        }
        logger.performance.log_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration * 1000,
            extra=extra,
        )

        if duration > self.slow_request_threshold:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} took {duration:.2f}s",
                extra={"duration_seconds": duration, **extra}
            )

        return response

    def _filter_sensitive_params(self, params: Dict[str, str]) -> Dict[str, str]:
        return {
            name: "***" if name.lower() in self.sensitive_params else value
            for name, value in params.items()
        }

    def _get_client_ip(self, request: Request) -> str:
        """
        Get client IP address from request headers

        Args:
            request: HTTP request

        Returns:
            Client IP address
        """
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"
