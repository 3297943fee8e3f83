# 📄 File: app/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the shared list of things that can go wrong in the marketplace and the advisor.
# 🧪 Purpose (Technical Summary):
# Core package initialization exporting the application exception hierarchy.
# 🔗 Dependencies:
# app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Middleware, handlers, repositories, external API clients

from .exceptions import (
    AIAuthenticationError,
    AITimeoutError,
    DatabaseError,
    ExternalAPIError,
    InvalidIdError,
    MarketplaceAPIException,
    MedicineNotFoundError,
    NotFoundError,
    PromptNotFoundError,
    RateLimitError,
    RepositoryError,
    ValidationError,
)

__all__ = [
    "AIAuthenticationError",
    "AITimeoutError",
    "DatabaseError",
    "ExternalAPIError",
    "InvalidIdError",
    "MarketplaceAPIException",
    "MedicineNotFoundError",
    "NotFoundError",
    "PromptNotFoundError",
    "RateLimitError",
    "RepositoryError",
    "ValidationError",
]
