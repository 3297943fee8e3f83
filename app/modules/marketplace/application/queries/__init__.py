# 📄 File: app/modules/marketplace/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Descriptions of catalog questions.
# 🧪 Purpose (Technical Summary):
# Query objects for marketplace reads.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# query handlers, marketplace router
