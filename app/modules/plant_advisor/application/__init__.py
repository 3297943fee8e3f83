# 📄 File: app/modules/plant_advisor/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant doctor's use cases.
# 🧪 Purpose (Technical Summary):
# Application layer: advice commands, history queries and handlers.
# 🔗 Dependencies:
# domain layer, Gemini client
# 🔄 Connected Modules / Calls From:
# presentation layer
