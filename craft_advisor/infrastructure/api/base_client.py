"""
Base API Client

Base implementation for API clients with common functionality.
"""

import logging
import asyncio
from typing import Optional, Dict, Any
from abc import ABC, abstractmethod

import httpx
from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)

from ...core.exceptions import APIError

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """Base API client with common functionality."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_attempts: int = 3,
        rate_limit: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize base API client.

        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds
            max_attempts: Total tries per request, counting the first
            rate_limit: Max concurrent in-flight requests
            transport: Optional httpx transport (tests inject a mock)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.rate_limit = rate_limit

        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._rate_limiter: Optional[asyncio.Semaphore] = None

        if rate_limit:
            self._rate_limiter = asyncio.Semaphore(rate_limit)

    async def __aenter__(self):
        """Enter async context."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        if not self._client:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                transport=self._transport
            )
            logger.info(f"API client initialized for {self.base_url}")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("API client closed")

    @abstractmethod
    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        pass

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request, retrying timeouts and network errors.

        Raises:
            APIError: On HTTP error status or when retries are exhausted
        """
        if not self._client:
            await self.initialize()

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type(
                (httpx.TimeoutException, httpx.NetworkError)
            ),
            reraise=True
        )

        try:
            async for attempt in retrying:
                with attempt:
                    if self._rate_limiter:
                        async with self._rate_limiter:
                            return await self._execute_request(method, endpoint, **kwargs)
                    return await self._execute_request(method, endpoint, **kwargs)
        except httpx.HTTPStatusError as e:
            raise APIError(
                f"{method} {endpoint} returned {e.response.status_code}",
                status_code=e.response.status_code,
                endpoint=endpoint
            ) from e
        except httpx.HTTPError as e:
            raise APIError(
                f"{method} {endpoint} failed: {type(e).__name__}: {e}",
                endpoint=endpoint
            ) from e

    async def _execute_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> httpx.Response:
        """Execute the actual HTTP request."""
        url = endpoint if endpoint.startswith('http') else f"{self.base_url}/{endpoint.lstrip('/')}"

        logger.debug(f"{method} {url}")

        response = await self._client.request(
            method=method,
            url=url,
            **kwargs
        )

        response.raise_for_status()
        return response

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """Make GET request and decode the JSON body."""
        response = await self._make_request(
            "GET",
            endpoint,
            params=params,
            headers=headers
        )
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"GET {endpoint} returned a non-JSON body",
                status_code=response.status_code,
                endpoint=endpoint
            ) from e
