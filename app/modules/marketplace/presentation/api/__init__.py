# 📄 File: app/modules/marketplace/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the shop.
# 🧪 Purpose (Technical Summary):
# API package for marketplace routers and schemas.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
