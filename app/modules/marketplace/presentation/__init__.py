# 📄 File: app/modules/marketplace/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the shop.
# 🧪 Purpose (Technical Summary):
# Presentation layer: routers, schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
