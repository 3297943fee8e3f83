# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that both the
# marketplace and the AI advisor use, like the database connection and error types.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure and
# cross-cutting concerns used by every module.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- MongoDB connection and external API client
- Exception hierarchy
- Logging, validators and formatters
"""

__all__ = []
