# 📄 File: app/modules/marketplace/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The MongoDB storage for listings.
# 🧪 Purpose (Technical Summary):
# MongoDB repository implementation and index definitions.
# 🔗 Dependencies:
# pymongo (async API), bson
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, app.main
