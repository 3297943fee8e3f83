# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the app how to reach MongoDB and Gemini and how to behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the pydantic-settings model and its cached accessor.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
