# 📄 File: app/modules/marketplace/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of the shop: what a listing is and how catalog questions are phrased.
# 🧪 Purpose (Technical Summary):
# Domain layer: models, vocabularies, repository interface and pure query services.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# application and infrastructure layers
