# 📄 File: app/modules/plant_advisor/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shapes of the questions sent to the plant doctor.
# 🧪 Purpose (Technical Summary):
# Advisor request schemas.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# advisor router
