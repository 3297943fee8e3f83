# 📄 File: app/modules/plant_advisor/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Descriptions of questions for the AI and history clean-up.
# 🧪 Purpose (Technical Summary):
# Advice and delete command objects.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# handlers, advisor schemas
