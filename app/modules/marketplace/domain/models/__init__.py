# 📄 File: app/modules/marketplace/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# What a medicine listing and its allowed values look like.
# 🧪 Purpose (Technical Summary):
# Domain models and str-enum vocabularies for marketplace listings.
# 🔗 Dependencies:
# pydantic, email-validator
# 🔄 Connected Modules / Calls From:
# repositories, handlers, schemas, query builder
