# 📄 File: app/modules/plant_advisor/infrastructure/external/gemini_client.py
# 🧭 Purpose (Layman Explanation):
# The phone line to Google's Gemini AI: it sends our plant disease questions and brings back
# the written answer, giving up if the AI takes too long.
# 🧪 Purpose (Technical Summary):
# Gemini generateContent REST client built on the shared APIClient (aiohttp + tenacity), with
# API key checks, a total-duration bound via asyncio.wait_for, and response text extraction.
# 🔗 Dependencies:
# app.shared.infrastructure.external_apis.api_client, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# application.handlers.advice_handlers, presentation.dependencies, app.main (lifespan),
# app.api.v1.health (detailed check)

"""
Gemini Client

Request:  POST {GEMINI_API_URL}/models/{model}:generateContent?key=...
          {"contents": [{"parts": [{"text": prompt}]}]}
Response: candidates[0].content.parts[*].text
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import AIAuthenticationError, ExternalAPIError
from app.shared.infrastructure.external_apis.api_client import APIClient, call_with_timeout
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

SERVICE_NAME = "gemini"


class GeminiClient:
    """Text generation against a single Gemini model."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str,
        timeout_seconds: float = 30.0,
        max_retries: int = 3,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._client = APIClient(
            base_url=base_url,
            api_name=SERVICE_NAME,
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=max_retries,
        )

    @classmethod
    def from_settings(cls) -> "GeminiClient":
        config = get_settings().get_ai_api_config()
        return cls(
            api_key=config["api_key"],
            model=config["model"],
            base_url=config["api_url"],
            timeout_seconds=config["timeout"],
            max_retries=config["max_retries"],
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_status(self) -> Dict[str, Any]:
        """Configuration and request statistics for the detailed health check."""
        return {
            "status": "configured" if self.is_configured else "not_configured",
            "model": self.model,
            **self._client.get_stats(),
        }

    async def initialize(self):
        await self._client.initialize()

    async def close(self):
        await self._client.close()

    async def generate_content(self, prompt: str) -> str:
        """
        Generate a text answer for a prompt.

        Args:
            prompt: Fully rendered prompt template

        Returns:
            str: Model answer

        Raises:
            AIAuthenticationError: If no API key is configured or it is rejected
            AITimeoutError: If the call exceeds the configured bound
            ExternalAPIError: For any other upstream failure
        """
        if not self.is_configured:
            raise AIAuthenticationError()

        logger.debug(f"Gemini request: model={self.model}, prompt_chars={len(prompt)}")
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        response = await call_with_timeout(
            self._client.post(
                f"models/{self.model}:generateContent",
                data=payload,
                params={"key": self.api_key},
            ),
            timeout=self.timeout_seconds,
            api_name=SERVICE_NAME,
        )
        return self.extract_text(response)

    @staticmethod
    def extract_text(response: Dict[str, Any]) -> str:
        """Join the text parts of the first candidate."""
        candidates = response.get("candidates") or []
        if not candidates:
            block_reason = (response.get("promptFeedback") or {}).get("blockReason")
            raise ExternalAPIError(
                f"Gemini returned no candidates{f' ({block_reason})' if block_reason else ''}",
                service=SERVICE_NAME,
            )

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if not text.strip():
            raise ExternalAPIError("Gemini returned an empty response", service=SERVICE_NAME)
        return text


@lru_cache()
def get_gemini_client() -> GeminiClient:
    """Process-wide client; its session is opened and closed by the app lifespan."""
    return GeminiClient.from_settings()
