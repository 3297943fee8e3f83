# 📄 File: app/modules/marketplace/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups everything about the plant medicine shop: the listings, how shoppers find them,
# and how sellers manage them.
# 🧪 Purpose (Technical Summary):
# Package initialization for the marketplace module (DDD layers with CQRS handlers) backed by
# the MongoDB `plantdiseasemedicines` collection.
# 🔗 Dependencies:
# FastAPI, pydantic, pymongo
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main (index creation at startup)

"""
Marketplace Module

Architecture follows Domain-Driven Design:
- Domain: MedicineListing model, vocabularies, query builder, pagination
- Application: Commands, queries and their handlers
- Infrastructure: MongoDB repository
- Presentation: API endpoints and request schemas
"""

__version__ = "1.0.0"
