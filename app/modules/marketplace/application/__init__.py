# 📄 File: app/modules/marketplace/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The catalog's use cases: browsing, searching and editing listings.
# 🧪 Purpose (Technical Summary):
# Application layer: CQRS commands, queries and handlers.
# 🔗 Dependencies:
# domain layer
# 🔄 Connected Modules / Calls From:
# presentation layer
