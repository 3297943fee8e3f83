# 📄 File: app/modules/plant_advisor/__init__.py
# 🧭 Purpose (Layman Explanation):
# The AI plant doctor: answers questions about plant diseases, treatments and prevention,
# and keeps a history of the advice given.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant advisor module (Gemini-backed advice generation with
# best-effort PromptRecord persistence in the `prompts` collection).
# 🔗 Dependencies:
# FastAPI, pydantic, aiohttp, tenacity, pymongo, slowapi
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main (Gemini client lifecycle, index creation)

"""
Plant Advisor Module

Architecture follows Domain-Driven Design:
- Domain: PromptRecord model, prompt templates, repository interface
- Application: Advice commands, history queries and their handlers
- Infrastructure: Gemini REST client, MongoDB prompt repository
- Presentation: API endpoints and request schemas
"""

__version__ = "1.0.0"
