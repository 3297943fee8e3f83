# 📄 File: app/modules/marketplace/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promise of how listings are stored and fetched, without saying where.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for medicine listings.
# 🔗 Dependencies:
# abc
# 🔄 Connected Modules / Calls From:
# handlers, infrastructure.database.medicine_repository_impl
