# 📄 File: app/modules/plant_advisor/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The fixed instructions sent to the AI.
# 🧪 Purpose (Technical Summary):
# Prompt template builders.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# application.commands.advice_commands
