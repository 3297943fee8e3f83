# 📄 File: app/modules/plant_advisor/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that ask the AI and manage the history.
# 🧪 Purpose (Technical Summary):
# Advice and prompt history handlers.
# 🔗 Dependencies:
# Gemini client, prompt repository
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, advisor router
