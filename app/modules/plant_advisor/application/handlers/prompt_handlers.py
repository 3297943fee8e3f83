# 📄 File: app/modules/plant_advisor/application/handlers/prompt_handlers.py
# 🧭 Purpose (Layman Explanation):
# Lets farmers browse, open and remove the AI advice they received earlier.
# 🧪 Purpose (Technical Summary):
# Query and command handlers for prompt history: newest-first paging, single record lookup
# and hard delete, with ObjectId validation.
# 🔗 Dependencies:
# prompt repository interface, marketplace pagination, app.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# app.modules.plant_advisor.presentation.api.v1.advisor

from dataclasses import dataclass
from typing import List

from app.modules.marketplace.domain.services.pagination import PaginationMeta
from app.modules.plant_advisor.application.commands.advice_commands import DeletePromptCommand
from app.modules.plant_advisor.application.queries.prompt_queries import (
    GetPromptQuery,
    ListPromptsQuery,
)
from app.modules.plant_advisor.domain.models.prompt_record import PromptRecord
from app.modules.plant_advisor.domain.repositories.prompt_repository import PromptRepository
from app.shared.core.exceptions import PromptNotFoundError
from app.shared.utils.validators import require_object_id

INVALID_PROMPT_ID = "Invalid prompt ID format"


@dataclass
class PromptPage:
    prompts: List[PromptRecord]
    pagination: PaginationMeta


class ListPromptsQueryHandler:
    def __init__(self, repository: PromptRepository):
        self._repository = repository

    async def handle(self, query: ListPromptsQuery) -> PromptPage:
        page_request = query.page_request
        prompts = await self._repository.list_recent(skip=page_request.skip, limit=page_request.limit)
        total = await self._repository.count()
        return PromptPage(prompts=prompts, pagination=PaginationMeta.build(page_request, total))


class GetPromptQueryHandler:
    def __init__(self, repository: PromptRepository):
        self._repository = repository

    async def handle(self, query: GetPromptQuery) -> PromptRecord:
        """
        Raises:
            InvalidIdError: If the id is malformed
            PromptNotFoundError: If no record has this id
        """
        prompt_id = require_object_id(query.prompt_id, INVALID_PROMPT_ID)
        record = await self._repository.get_by_id(prompt_id)
        if record is None:
            raise PromptNotFoundError(prompt_id)
        return record


class DeletePromptCommandHandler:
    def __init__(self, repository: PromptRepository):
        self._repository = repository

    async def handle(self, command: DeletePromptCommand) -> PromptRecord:
        """
        Remove a saved exchange and return it.

        Raises:
            InvalidIdError: If the id is malformed
            PromptNotFoundError: If no record has this id
        """
        prompt_id = require_object_id(command.prompt_id, INVALID_PROMPT_ID)
        removed = await self._repository.delete(prompt_id)
        if removed is None:
            raise PromptNotFoundError(prompt_id)
        return removed
