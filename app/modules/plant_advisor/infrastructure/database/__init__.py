# 📄 File: app/modules/plant_advisor/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The MongoDB storage for saved answers.
# 🧪 Purpose (Technical Summary):
# MongoDB PromptRepository implementation.
# 🔗 Dependencies:
# pymongo (async API), bson
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, app.main
