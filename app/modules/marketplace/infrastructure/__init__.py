# 📄 File: app/modules/marketplace/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where listings are actually kept.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for the marketplace module.
# 🔗 Dependencies:
# pymongo
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, app.main
