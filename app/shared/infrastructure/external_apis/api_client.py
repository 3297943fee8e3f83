# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates a smart HTTP client that knows how to talk to external services reliably,
# handling retries and errors gracefully when we ask the AI model about plant diseases.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client with error translation, retry logic with exponential backoff,
# request statistics and structured logging for external API integrations.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies
# - app.shared.utils.logging: Structured performance logging

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.plant_advisor.infrastructure.external.gemini_client

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.core.exceptions import (
    AIAuthenticationError,
    AITimeoutError,
    ExternalAPIError,
    RateLimitError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class TransientAPIError(ExternalAPIError):
    """Upstream failure worth retrying (connection reset, 5xx)."""


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Automatic retry with exponential backoff on transient failures
    - Upstream status codes translated into application exceptions
    - Request/response logging
    - Performance statistics
    """

    def __init__(
        self,
        base_url: str,
        api_name: str,
        api_key: Optional[str] = None,
        timeout: float = 30,
        max_retries: int = 3,
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

        self.session: Optional[ClientSession] = None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0,
            'last_request_time': None,
        }

    async def initialize(self):
        """Initialize the client session."""
        if self.session is not None:
            return

        connector = aiohttp.TCPConnector(
            limit=10,
            limit_per_host=5,
            ttl_dns_cache=300,
        )
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            connector=connector,
            headers=self._get_default_headers()
        )
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {
            'User-Agent': f'PlantMedicineAPI/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
    ) -> Dict[str, Any]:
        """Make HTTP request, retrying transient failures with exponential backoff."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type(TransientAPIError),
            before_sleep=before_sleep_log(logger.logger, logging.WARNING),
            reraise=True,
        )
        return await retrying(self._send, method, endpoint, params, data)

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
    ) -> Dict[str, Any]:
        """Single HTTP attempt."""
        if not self.session:
            await self.initialize()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        request_kwargs: Dict[str, Any] = {'method': method, 'url': url}
        if params:
            request_kwargs['params'] = params
        if data is not None:
            request_kwargs['json'] = data

        start_time = time.time()
        status_code = 0

        try:
            async with self.session.request(**request_kwargs) as response:
                status_code = response.status
                self._record_timing(time.time() - start_time)

                await self._handle_response_status(response)

                try:
                    response_data = await response.json()
                except (aiohttp.ContentTypeError, ValueError):
                    response_data = {'raw_response': await response.text()}

        except asyncio.TimeoutError as e:
            self._record_error(e, method, endpoint)
            raise AITimeoutError(
                f"Timeout for {self.api_name}: {method} {endpoint}",
                service=self.api_name,
                timeout_seconds=self.timeout
            ) from e
        except aiohttp.ClientError as e:
            self._record_error(e, method, endpoint)
            raise TransientAPIError(
                f"Connection error for {self.api_name}: {e}",
                service=self.api_name
            ) from e
        except ExternalAPIError as e:
            self._record_error(e, method, endpoint)
            raise

        self.stats['successful_requests'] += 1
        logger.performance.log_external_api_call(
            api_name=self.api_name,
            endpoint=endpoint,
            method=method,
            status_code=status_code,
            duration_ms=(time.time() - start_time) * 1000,
            success=True,
        )
        return response_data

    def _record_timing(self, response_time: float):
        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()
        if self.stats['average_response_time'] == 0:
            self.stats['average_response_time'] = response_time
        else:
            self.stats['average_response_time'] = (
                self.stats['average_response_time'] * 0.7 + response_time * 0.3
            )

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if 200 <= response.status < 300:
            return

        response_text = await response.text()
        if response.status in (401, 403) or "API key" in response_text:
            raise AIAuthenticationError(service=self.api_name)
        if response.status == 429:
            retry_after = response.headers.get('Retry-After')
            raise RateLimitError(
                f"Rate limit exceeded for {self.api_name}",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None
            )
        if 400 <= response.status < 500:
            raise ExternalAPIError(
                f"Client error for {self.api_name} ({response.status}): {response_text}",
                service=self.api_name,
                service_response=response_text
            )
        raise TransientAPIError(
            f"Server error for {self.api_name} ({response.status}): {response_text}",
            service=self.api_name,
            service_response=response_text
        )

    def _record_error(self, error: Exception, method: str, endpoint: str):
        """Count and log a failed attempt."""
        self.stats['failed_requests'] += 1
        error_record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'error_type': type(error).__name__,
            'error_message': str(error),
            'method': method,
            'endpoint': endpoint,
            'api_name': self.api_name
        }
        logger.warning(f"API error recorded for {self.api_name}", extra=error_record)

    async def post(
        self,
        endpoint: str,
        data: Optional[Dict] = None,
        params: Optional[Dict] = None,
    ) -> Dict[str, Any]:
        """Make POST request."""
        return await self._make_request('POST', endpoint, params, data)

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            'api_name': self.api_name,
            'error_rate': (
                self.stats['failed_requests'] / max(self.stats['total_requests'], 1)
            ) * 100,
        }

    async def close(self):
        """Close the client session and cleanup resources."""
        if self.session:
            await self.session.close()
            self.session = None

        logger.info(f"API client closed for {self.api_name}")


async def call_with_timeout(coro, timeout: float, api_name: str):
    """
    Await an upstream call, bounding its total duration.

    Raises:
        AITimeoutError: If the call does not finish in time
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.warning(f"{api_name} call exceeded {timeout}s")
        raise AITimeoutError(
            f"{api_name} did not respond within {timeout:g} seconds",
            service=api_name,
            timeout_seconds=timeout
        ) from e
