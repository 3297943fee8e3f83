# 📄 File: app/modules/plant_advisor/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of the plant doctor: what a saved answer is and how questions are phrased.
# 🧪 Purpose (Technical Summary):
# Domain layer: PromptRecord, prompt templates and repository interface.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# application and infrastructure layers
