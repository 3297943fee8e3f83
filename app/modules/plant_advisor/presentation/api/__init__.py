# 📄 File: app/modules/plant_advisor/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the plant doctor.
# 🧪 Purpose (Technical Summary):
# API package for advisor routers and schemas.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
