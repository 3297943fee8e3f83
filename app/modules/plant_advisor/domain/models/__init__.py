# 📄 File: app/modules/plant_advisor/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# What a saved AI conversation looks like.
# 🧪 Purpose (Technical Summary):
# PromptRecord model and PromptType vocabulary.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# repositories, handlers, router
