import asyncio
from typing import Any, Dict, Optional

import httpx
from httpx import HTTPStatusError, TimeoutException

from assetlens.core.exceptions import (
    APITimeoutError,
    ConfigurationError,
    ProviderNotFoundError,
    ProviderUnavailableError,
)
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


class BaseProviderClient:
    """Base client for third-party data provider APIs.

    Handles common logic for HTTP requests, retries, timeout management,
    status translation and error logging. Subclasses supply the credential
    and build provider-specific queries.
    """

    provider_name = "provider"

    def __init__(
        self,
        credential: Optional[str],
        base_url: str,
        timeout: int = 30,
        max_retries: int = 2,
        retry_delay: int = 1,
    ):
        """Initialize the provider client.

        Args:
            credential: API key or token for the provider
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts
            retry_delay: Base delay for exponential backoff
        """
        self.credential = credential
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.logger = LOGGER

    @property
    def is_configured(self) -> bool:
        return bool(self.credential and self.credential.strip())

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when the provider credential is missing."""
        if not self.is_configured:
            self.logger.error(f"{self.provider_name} credential is not configured")
            raise ConfigurationError(f"{self.provider_name} credential is missing")

    async def get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET an endpoint with retry logic.

        Args:
            endpoint: API endpoint (appended to base_url)
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            ConfigurationError: On 401/403
            ProviderNotFoundError: On 404
            ProviderUnavailableError: On 429/5xx or unreadable responses after retries
            APITimeoutError: If the call times out after retries
        """
        url = f"{self.base_url}{endpoint}"

        self.logger.debug(f"Calling {self.provider_name} API: {url}", extra={"timeout": self.timeout})

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            for attempt in range(self.max_retries):
                try:
                    response = await client.get(url, params=params)
                    response.raise_for_status()
                    return response.json()

                except HTTPStatusError as e:
                    await self._handle_http_error(e, attempt, url)

                except TimeoutException as e:
                    await self._handle_timeout_error(e, attempt, url)

                except (httpx.HTTPError, ValueError) as e:
                    await self._handle_generic_error(e, attempt, url)

        raise ProviderUnavailableError(f"Failed to call {url} after {self.max_retries} attempts")

    async def _handle_http_error(self, error: HTTPStatusError, attempt: int, url: str):
        status_code = error.response.status_code
        error_body = error.response.text

        self.logger.warning(
            f"{self.provider_name} HTTP error {status_code} (Attempt {attempt + 1}/{self.max_retries})",
            extra={"url": url, "status_code": status_code, "error_body": error_body[:500]},
        )

        if status_code in (401, 403):
            raise ConfigurationError(
                f"{self.provider_name} rejected the credential ({status_code})", original_error=error
            ) from error
        if status_code == 404:
            raise ProviderNotFoundError(
                f"{self.provider_name} reported no match ({status_code})", original_error=error
            ) from error
        # Other client errors are not retried; rate limiting is
        if 400 <= status_code < 500 and status_code != 429:
            raise ProviderUnavailableError(
                f"{self.provider_name} client error {status_code}", original_error=error
            ) from error

        if attempt < self.max_retries - 1:
            await self._wait_before_retry(attempt)
        else:
            raise ProviderUnavailableError(
                f"{self.provider_name} HTTP error {status_code} after retries", original_error=error
            ) from error

    async def _handle_timeout_error(self, error: TimeoutException, attempt: int, url: str):
        self.logger.warning(
            f"{self.provider_name} timeout (Attempt {attempt + 1}/{self.max_retries})",
            extra={"url": url},
        )

        if attempt < self.max_retries - 1:
            await self._wait_before_retry(attempt)
        else:
            raise APITimeoutError(
                f"{self.provider_name} timeout after {self.max_retries} attempts", original_error=error
            ) from error

    async def _handle_generic_error(self, error: Exception, attempt: int, url: str):
        self.logger.warning(
            f"{self.provider_name} error (Attempt {attempt + 1}/{self.max_retries})",
            extra={"url": url, "error": str(error)},
        )

        if attempt < self.max_retries - 1:
            await self._wait_before_retry(attempt)
        else:
            raise ProviderUnavailableError(
                f"{self.provider_name} error: {str(error)}", original_error=error
            ) from error

    async def _wait_before_retry(self, attempt: int):
        """Exponential backoff wait."""
        wait_time = self.retry_delay * (2 ** attempt)
        await asyncio.sleep(wait_time)
