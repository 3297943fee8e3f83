# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains the plant medicine
# marketplace code and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
HangaTech Plant Medicine API

Marketplace of plant disease medicines with a Gemini powered plant health advisor.
"""

__version__ = "1.0.0"
__title__ = "HangaTech Plant Medicine API"
__description__ = "Plant disease medicine marketplace and AI plant-health advisor"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
