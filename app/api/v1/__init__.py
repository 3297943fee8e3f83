# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file describes the public face of the marketplace API: which sections exist, where they live,
# and which word lists (medicine types, diseases, plants) the API understands.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API: route prefixes, OpenAPI tags and the info payload served
# by GET /api/, including the endpoint index and supported vocabularies.
# 🔗 Dependencies:
# app.shared.config.settings, app.modules.marketplace.domain.models.vocabulary
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
Plant Medicine Marketplace API

Sections:
- Health checks
- Marketplace: medicine listings (CRUD, filtering, search, featured, metadata)
- AI advisor: Gemini backed plant disease advice and saved prompt history
"""

from typing import Any, Dict

from app.modules.marketplace.domain.models.vocabulary import marketplace_vocabularies
from app.shared.config.settings import get_settings

# API route prefixes
ROUTE_PREFIXES = {
    "marketplace": "/marketplace",
    "ai": "/ai",
}

# API tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Health Check",
        "description": "Service and database health",
    },
    {
        "name": "Marketplace",
        "description": "Plant disease medicine listings",
    },
    {
        "name": "AI Advisor",
        "description": "AI generated plant disease advice and prompt history",
    },
]

ENDPOINT_INDEX = {
    "health": "GET /api/health",
    "detailedHealth": "GET /api/health/detailed",
    "marketplace": {
        "list": "GET /api/marketplace",
        "create": "POST /api/marketplace",
        "featured": "GET /api/marketplace/featured",
        "meta": "GET /api/marketplace/meta",
        "search": "GET /api/marketplace/search?q=",
        "byType": "GET /api/marketplace/type/{medicineType}",
        "byDisease": "GET /api/marketplace/disease/{disease}",
        "byPlant": "GET /api/marketplace/plant/{plant}",
        "get": "GET /api/marketplace/{id}",
        "update": "PUT /api/marketplace/{id}",
        "delete": "DELETE /api/marketplace/{id}",
    },
    "ai": {
        "prompt": "POST /api/ai/prompt",
        "diagnose": "POST /api/ai/diagnose",
        "treatment": "POST /api/ai/treatment",
        "prevention": "POST /api/ai/prevention",
        "diseaseInfo": "POST /api/ai/disease-info",
        "aiTreatment": "POST /api/ai/ai-treatment",
        "prompts": "GET /api/ai/prompts",
        "getPrompt": "GET /api/ai/prompts/{id}",
        "deletePrompt": "DELETE /api/ai/prompts/{id}",
    },
}


def get_api_info() -> Dict[str, Any]:
    """
    Get API information

    Returns:
        Dictionary with name, version, endpoint index and vocabularies
    """
    settings = get_settings()
    vocabularies = marketplace_vocabularies()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": ENDPOINT_INDEX,
        "supportedMedicineTypes": vocabularies["medicineTypes"],
        "supportedDiseases": vocabularies["targetDiseases"],
        "supportedPlants": vocabularies["targetPlants"],
    }


__all__ = [
    "API_TAGS",
    "ENDPOINT_INDEX",
    "ROUTE_PREFIXES",
    "get_api_info",
]
