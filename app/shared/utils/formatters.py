# 📄 File: app/shared/utils/formatters.py
# 🧭 Purpose (Layman Explanation):
# Makes the app's answers look the same everywhere: every response says whether it worked,
# carries a short message, and puts the actual content in the same place.
# 🧪 Purpose (Technical Summary):
# Response envelope construction ({success, message, data?}) and the delete-receipt text preview
# shared across modules.
# 🔗 Dependencies:
# datetime, typing
# 🔄 Connected Modules / Calls From:
# All presentation routers, health endpoints, exception handlers

from datetime import datetime, timezone
from typing import Any, Dict, Optional


def format_api_response(
    message: str,
    data: Any = None,
    success: bool = True,
    include_timestamp: bool = False,
    **extra: Any
) -> Dict[str, Any]:
    """
    Format data for API response.

    Args:
        message: Human readable outcome
        data: Payload; omitted from the envelope when None
        success: False for error envelopes
        include_timestamp: Add an ISO-8601 UTC timestamp
        **extra: Additional top-level keys (e.g. path on 404s)

    Returns:
        Dict: {"success", "message", "data"?, ...}
    """
    response: Dict[str, Any] = {"success": success, "message": message}
    if data is not None:
        response["data"] = data
    if include_timestamp:
        response["timestamp"] = utc_timestamp()
    response.update(extra)
    return response


def format_error_response(
    message: str,
    details: Optional[Any] = None,
    **extra: Any
) -> Dict[str, Any]:
    """Error envelope; details only appear when provided."""
    response = format_api_response(message, success=False, **extra)
    if details:
        response["details"] = details
    return response


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def preview_text(text: str, length: int = 50, suffix: str = "...") -> str:
    """First `length` characters followed by the suffix, as shown in delete receipts."""
    return f"{(text or '')[:length]}{suffix}"
