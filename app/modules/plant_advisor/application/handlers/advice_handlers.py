# 📄 File: app/modules/plant_advisor/application/handlers/advice_handlers.py
# 🧭 Purpose (Layman Explanation):
# Asks the plant doctor AI the farmer's question and keeps a copy of the answer when the
# database is available; the farmer always gets the answer even if saving fails.
#
# 🧪 Purpose (Technical Summary):
# Command handler shared by all advisor endpoints: required-input validation, prompt rendering,
# the Gemini call, upstream error translation and best-effort PromptRecord persistence.
#
# 🔗 Dependencies:
# - app.modules.plant_advisor.infrastructure.external.gemini_client (model calls)
# - app.modules.plant_advisor.domain.repositories (prompt persistence)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_advisor.presentation.api.v1.advisor

from dataclasses import dataclass
from typing import Optional

from app.modules.plant_advisor.application.commands.advice_commands import AdviceCommand
from app.modules.plant_advisor.domain.models.prompt_record import PromptRecord
from app.modules.plant_advisor.domain.repositories.prompt_repository import PromptRepository
from app.modules.plant_advisor.infrastructure.external.gemini_client import GeminiClient
from app.shared.core.exceptions import (
    AIAuthenticationError,
    AITimeoutError,
    ExternalAPIError,
    MarketplaceAPIException,
    ValidationError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AdviceResult:
    """Model answer plus the outcome of saving it"""

    text: str
    record_id: Optional[str] = None

    @property
    def saved(self) -> bool:
        return self.record_id is not None


class GenerateAdviceCommandHandler:
    """
    Handler for every advisor request.

    Persistence is best-effort: when saving the exchange fails the answer is
    still returned, with no record id.
    """

    def __init__(self, client: GeminiClient, repository: PromptRepository):
        self._client = client
        self._repository = repository

    async def handle(self, command: AdviceCommand) -> AdviceResult:
        """
        Generate advice for a command.

        Raises:
            ValidationError: If the command's required input is missing or blank
            AIAuthenticationError: If the API key is missing or rejected
            AITimeoutError: If the model does not answer in time
            ExternalAPIError: For any other model failure
        """
        required = command.required_value()
        if required is None or not required.strip():
            raise ValidationError(command.required_message, field=command.required_field)

        try:
            text = await self._client.generate_content(command.build_prompt())
        except (AIAuthenticationError, AITimeoutError):
            raise
        except ExternalAPIError as e:
            logger.error(f"{command.failure_message}: {e.message}")
            raise ExternalAPIError(
                command.failure_message,
                service="gemini",
                status_code=e.status_code,
                service_response=e.message,
            ) from e

        record_id = await self._save(command, text)
        return AdviceResult(text=text, record_id=record_id)

    async def _save(self, command: AdviceCommand, text: str) -> Optional[str]:
        try:
            record = PromptRecord(
                user_prompt=command.record_summary(),
                ai_response=text,
                prompt_type=command.prompt_type,
                **command.record_fields(),
            )
            saved = await self._repository.save(record)
        except MarketplaceAPIException as e:
            logger.warning(f"Database save failed, but AI response generated successfully: {e.message}")
            return None

        logger.log_business_event(
            "prompt_saved",
            f"Saved {command.prompt_type.value} exchange",
            entity_id=saved.id,
            entity_type="prompt",
        )
        return saved.id
