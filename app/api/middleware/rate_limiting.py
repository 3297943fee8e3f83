# 📄 File: app/api/middleware/rate_limiting.py
# 🧭 Purpose (Layman Explanation):
# Stops anyone from asking the AI advisor too many questions too quickly, like a bouncer who
# limits how often someone can come in so everyone gets a fair turn.
# 🧪 Purpose (Technical Summary):
# Process-wide slowapi Limiter keyed by client IP, and the handler that renders
# RateLimitExceeded as the standard 429 error envelope.
# 🔗 Dependencies:
# slowapi, FastAPI, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.main (limiter registration), app.modules.plant_advisor.presentation.api.v1.advisor

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import RateLimitError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)
settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)


def ai_rate_limit() -> str:
    """Limit string for AI endpoints, read at request time."""
    return get_settings().AI_RATE_LIMIT


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render slowapi rejections with the standard error envelope."""
    client_ip = get_remote_address(request)
    logger.warning(
        f"Rate limit exceeded for {client_ip} on {request.url.path}",
        extra={"limit": str(exc.detail)}
    )
    error = RateLimitError(limit=str(exc.detail))
    response = JSONResponse(status_code=error.status_code, content=error.to_dict())
    current_limit = getattr(request.state, "view_rate_limit", None)
    if current_limit is None:
        return response
    return request.app.state.limiter._inject_headers(response, current_limit)
