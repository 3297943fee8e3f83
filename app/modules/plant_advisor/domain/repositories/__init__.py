# 📄 File: app/modules/plant_advisor/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promise of how saved answers are kept.
# 🧪 Purpose (Technical Summary):
# Abstract PromptRepository.
# 🔗 Dependencies:
# abc
# 🔄 Connected Modules / Calls From:
# handlers, infrastructure.database
