# 📄 File: app/modules/marketplace/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that carry out catalog questions and changes.
# 🧪 Purpose (Technical Summary):
# CQRS query and command handlers.
# 🔗 Dependencies:
# domain services and repository interface
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, marketplace router
