# 📄 File: app/modules/marketplace/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shapes of the data sent to and from the shop endpoints.
# 🧪 Purpose (Technical Summary):
# Request schemas and response serializers.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# marketplace router
