# 📄 File: app/modules/plant_advisor/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant doctor endpoints.
# 🧪 Purpose (Technical Summary):
# Versioned advisor router.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
