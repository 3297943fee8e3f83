# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file marks the api folder as a Python package; it is the front desk that
# receives every request sent to the marketplace.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (middleware and the router mounted at /api).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
Plant Medicine API Package

Structure:
    api/
    ├── middleware/          # Error handling, request logging, rate limiting
    └── v1/
        ├── router.py        # Aggregates module routers
        └── health.py        # Health check endpoints
"""

__version__ = "1.0.0"
