# 📄 File: app/modules/marketplace/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that turn shopper requests into database questions and pages.
# 🧪 Purpose (Technical Summary):
# Pure query/sort builders and pagination math.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# application.handlers.query_handlers
