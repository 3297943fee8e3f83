# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# The shared phone line the app uses to talk to outside services such as the Gemini AI.

# 🧪 Purpose (Technical Summary):
# Exports the generic retrying aiohttp client and the timeout helper used by service clients.

# 🔗 Dependencies:
# - api_client: Generic HTTP client with retry logic

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.plant_advisor.infrastructure.external.gemini_client

from .api_client import APIClient, TransientAPIError, call_with_timeout

__all__ = [
    "APIClient",
    "TransientAPIError",
    "call_with_timeout",
]
