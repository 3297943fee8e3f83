# 📄 File: app/modules/plant_advisor/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the plant advisor endpoints the AI connection and the saved-answers store.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the advisor module: Gemini client, prompt repository and
# handler construction.
# 🔗 Dependencies:
# FastAPI Depends, gemini_client, prompt repository implementation, shared database
# 🔄 Connected Modules / Calls From:
# app.modules.plant_advisor.presentation.api.v1.advisor, tests (dependency_overrides)

from fastapi import Depends

from app.modules.plant_advisor.application.handlers.advice_handlers import (
    GenerateAdviceCommandHandler,
)
from app.modules.plant_advisor.application.handlers.prompt_handlers import (
    DeletePromptCommandHandler,
    GetPromptQueryHandler,
    ListPromptsQueryHandler,
)
from app.modules.plant_advisor.domain.repositories.prompt_repository import PromptRepository
from app.modules.plant_advisor.infrastructure.database.prompt_repository_impl import (
    MongoPromptRepository,
)
from app.modules.plant_advisor.infrastructure.external.gemini_client import (
    GeminiClient,
    get_gemini_client,
)
from app.shared.infrastructure.database.connection import get_database


def get_prompt_repository() -> PromptRepository:
    return MongoPromptRepository(get_database())


def get_advice_handler(
    client: GeminiClient = Depends(get_gemini_client),
    repository: PromptRepository = Depends(get_prompt_repository),
) -> GenerateAdviceCommandHandler:
    return GenerateAdviceCommandHandler(client, repository)


def get_list_prompts_handler(
    repository: PromptRepository = Depends(get_prompt_repository)
) -> ListPromptsQueryHandler:
    return ListPromptsQueryHandler(repository)


def get_prompt_handler(
    repository: PromptRepository = Depends(get_prompt_repository)
) -> GetPromptQueryHandler:
    return GetPromptQueryHandler(repository)


def get_delete_prompt_handler(
    repository: PromptRepository = Depends(get_prompt_repository)
) -> DeletePromptCommandHandler:
    return DeletePromptCommandHandler(repository)
