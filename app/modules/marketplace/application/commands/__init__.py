# 📄 File: app/modules/marketplace/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Descriptions of catalog changes.
# 🧪 Purpose (Technical Summary):
# Command objects for marketplace writes.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# command handlers, marketplace router
