# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API requests, sending medicine questions to the
# marketplace and plant health questions to the AI advisor.
# 🧪 Purpose (Technical Summary):
# Main API router aggregation that combines the health, marketplace and plant advisor routers
# under their prefixes and serves the API information endpoint.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.marketplace, app.modules.plant_advisor
# 🔄 Connected Modules / Calls From:
# app.main.py (mounted at /api)

from fastapi import APIRouter

from app.modules.marketplace.presentation.api.v1.marketplace import marketplace_router
from app.modules.plant_advisor.presentation.api.v1.advisor import advisor_router
from app.shared.utils.formatters import format_api_response

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

# Create main API router
api_v1_router = APIRouter()

# Include health check router (no prefix - direct access)
api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)

api_v1_router.include_router(
    marketplace_router,
    prefix=ROUTE_PREFIXES["marketplace"],
    tags=["Marketplace"]
)

api_v1_router.include_router(
    advisor_router,
    prefix=ROUTE_PREFIXES["ai"],
    tags=["AI Advisor"]
)


# =========================================================================
# API INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/",
                   summary="API Information",
                   description="Get API version information and available endpoints",
                   tags=["API Info"])
async def api_info() -> dict:
    """
    API information endpoint

    Lists every endpoint and the medicine types, diseases and plants
    the marketplace accepts.
    """
    return format_api_response("Plant Medicine Marketplace API", get_api_info())
