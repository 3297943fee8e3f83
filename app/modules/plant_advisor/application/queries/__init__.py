# 📄 File: app/modules/plant_advisor/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Descriptions of history lookups.
# 🧪 Purpose (Technical Summary):
# Prompt history query objects.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# prompt handlers, advisor router
