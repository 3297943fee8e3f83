# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides health check endpoints that tell us if the medicine marketplace is working properly,
# like a doctor's checkup that also makes sure the database is answering.
# 🧪 Purpose (Technical Summary):
# Implements the basic liveness check and a detailed check that pings MongoDB and reports
# component status (database, AI client statistics), uptime and response time.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection, app.shared.utils.formatters
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.modules.plant_advisor.infrastructure.external.gemini_client import get_gemini_client
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check
from app.shared.utils.formatters import format_api_response
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring",
                   tags=["Health Check"])
async def health_check() -> dict:
    """
    Basic health check endpoint

    Returns a success envelope with a timestamp without touching the database.
    """
    return format_api_response("API is running successfully", include_timestamp=True)


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Health check including database connectivity",
                   tags=["Health Check"])
async def detailed_health_check() -> JSONResponse:
    """
    Comprehensive health check

    Pings MongoDB and reports its status alongside the AI client
    statistics. Responds 503 when the database cannot be reached; an
    unconfigured AI key is reported but does not fail the check.
    """
    start_time = datetime.now()
    settings = get_settings()

    db_health = await db_health_check()
    healthy = db_health["status"] == "healthy"
    if not healthy:
        logger.warning(f"Detailed health check: database unhealthy ({db_health.get('error')})")

    data = {
        "status": "healthy" if healthy else "unhealthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "uptime_seconds": (datetime.now() - _app_start_time).total_seconds(),
        "response_time_seconds": (datetime.now() - start_time).total_seconds(),
        "components": {
            "database": db_health,
            "ai": get_gemini_client().get_status(),
        },
    }

    return JSONResponse(
        status_code=200 if healthy else 503,
        content=format_api_response(
            "All systems operational" if healthy else "Service unavailable",
            data,
            success=healthy,
            include_timestamp=True
        )
    )
