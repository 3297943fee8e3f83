# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of the app use for
# logging, checking ids and shaping responses.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging, ObjectId validation and
# response envelope formatting.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - validators: Data validation functions
# - formatters: Data formatting utilities

# 🔄 Connected Modules / Calls From:
# Used by: All application modules

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Identifier validation
- Response envelope formatting
"""

from .formatters import format_api_response, format_error_response, preview_text
from .logging import get_logger, setup_logging
from .validators import require_object_id

__all__ = [
    "format_api_response",
    "format_error_response",
    "get_logger",
    "preview_text",
    "require_object_id",
    "setup_logging",
]
