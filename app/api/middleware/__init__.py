# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file gathers the helpers that look at every request before it reaches the marketplace,
# like counting AI questions, writing the request diary and turning errors into friendly replies.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware: error handling (request ids, exception handlers),
# request logging and the slowapi rate limiter.
# 🔗 Dependencies:
# FastAPI, starlette, slowapi
# 🔄 Connected Modules / Calls From:
# app.main.py, app.modules.plant_advisor.presentation.api.v1.advisor

"""
Marketplace API Middleware Package

Middleware Stack Order (applied in reverse order):
    1. CORSMiddleware (outermost - headers on every response, error envelopes included)
    2. ErrorHandlingMiddleware (request id, catches all errors)
    3. RequestLoggingMiddleware (logs all requests/responses)
    4. Application Routes (innermost, AI routes rate limited by slowapi)
"""

from app.api.middleware.error_handling import ErrorHandlingMiddleware, register_exception_handlers
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.middleware.rate_limiting import limiter, rate_limit_exceeded_handler

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "limiter",
    "rate_limit_exceeded_handler",
    "register_exception_handlers",
]
