# 📄 File: app/modules/plant_advisor/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# The line to Google's Gemini AI.
# 🧪 Purpose (Technical Summary):
# Gemini REST client.
# 🔗 Dependencies:
# aiohttp, tenacity (via shared APIClient)
# 🔄 Connected Modules / Calls From:
# advice handlers, app.main
