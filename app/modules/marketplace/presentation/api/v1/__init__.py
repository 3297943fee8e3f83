# 📄 File: app/modules/marketplace/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the shop endpoints.
# 🧪 Purpose (Technical Summary):
# Versioned marketplace routers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
