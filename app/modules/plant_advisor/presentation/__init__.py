# 📄 File: app/modules/plant_advisor/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the plant doctor.
# 🧪 Purpose (Technical Summary):
# Presentation layer: router, schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI, slowapi
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
