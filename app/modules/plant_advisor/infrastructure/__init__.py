# 📄 File: app/modules/plant_advisor/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connections to the AI service and the database.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for the advisor module.
# 🔗 Dependencies:
# aiohttp, pymongo
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, app.main
