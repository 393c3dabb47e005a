# 📄 File: garden_care/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates an HTTP client that knows how to talk to the AI service that writes care
# profiles, turning timeouts, refused keys and server hiccups into clear, named errors.

# 🧪 Purpose (Technical Summary):
# Async JSON-over-HTTP client (aiohttp) with provider-aware authentication headers, status-code to
# exception mapping, a bounded error history and request statistics. No automatic retry: a failed
# call is surfaced to the caller immediately.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - garden_care.shared.core.exceptions: API exception types
# - garden_care.shared.utils.logging: structured performance logging

# 🔄 Connected Modules / Calls From:
# Used by: garden_care.modules.plant_care.infrastructure.external.anthropic_generator

import asyncio
import time
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, Optional, Union

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from garden_care.shared.core.exceptions import (
    APIAuthenticationError,
    APITimeoutError,
    ExternalAPIError,
    GardenCareException,
    RateLimitError,
)
from garden_care.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ANTHROPIC_VERSION = '2023-06-01'
MAX_ERROR_HISTORY = 100

RequestBody = Union[Dict[str, Any], str, bytes]


class APIClient:
    """
    Async client for one external JSON API.

    Anthropic-style providers (api_name containing "anthropic" or "claude")
    authenticate with ``x-api-key`` plus ``anthropic-version``; anything
    else gets a bearer token. Non-2xx answers raise the matching
    ExternalAPIError subclass.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        api_name: str,
        timeout: int = 30,
        api_version: Optional[str] = None,
        session: Optional[ClientSession] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.api_version = api_version

        self.session: Optional[ClientSession] = session
        self._owns_session = session is None

        self.stats: Dict[str, Any] = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0.0,
            'last_request_time': None,
        }
        self.error_history: Deque[Dict[str, Any]] = deque(maxlen=MAX_ERROR_HISTORY)

    @property
    def _uses_anthropic_auth(self) -> bool:
        name = self.api_name.lower()
        return 'anthropic' in name or 'claude' in name

    async def initialize(self):
        """Open an aiohttp session unless one was injected."""
        if self.session is not None:
            return

        try:
            self.session = ClientSession(timeout=ClientTimeout(total=self.timeout))
            self._owns_session = True
            logger.info(f"API client initialized for {self.api_name}")
        except Exception as e:
            logger.error(f"Failed to initialize API client {self.api_name}: {e}")
            raise ExternalAPIError(f"Client initialization failed: {e}", api_name=self.api_name) from e

    def _get_default_headers(self) -> Dict[str, str]:
        headers = {
            'User-Agent': f'GardenCareCore/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if not self.api_key:
            return headers

        if self._uses_anthropic_auth:
            headers['x-api-key'] = self.api_key
            headers['anthropic-version'] = self.api_version or DEFAULT_ANTHROPIC_VERSION
        else:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def _build_url(self, endpoint: str) -> str:
        # urljoin would drop a versioned base path such as /v1
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[RequestBody] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Send one request and return the decoded JSON body."""
        if not self.session:
            await self.initialize()

        url = self._build_url(endpoint)
        request_kwargs: Dict[str, Any] = {
            'method': method,
            'url': url,
            'headers': {**self._get_default_headers(), **(headers or {})},
        }
        if params:
            request_kwargs['params'] = params
        if isinstance(data, dict):
            request_kwargs['json'] = data
        elif data:
            request_kwargs['data'] = data
        if timeout:
            request_kwargs['timeout'] = ClientTimeout(total=timeout)

        self.stats['total_requests'] += 1
        start_time = time.perf_counter()
        try:
            async with self.session.request(**request_kwargs) as response:
                self._record_timing(time.perf_counter() - start_time)
                await self._raise_for_status(response)

                try:
                    body = await response.json(content_type=None)
                except ValueError:
                    body = {'raw_response': await response.text()}

                self.stats['successful_requests'] += 1
                logger.performance.log_external_api_call(
                    api_name=self.api_name,
                    endpoint=endpoint,
                    method=method,
                    status_code=response.status,
                    duration_ms=(time.perf_counter() - start_time) * 1000,
                    success=True
                )
                return body

        except Exception as e:
            self.stats['failed_requests'] += 1
            self._record_error(e, method, url)
            raise self._transform_exception(e, method, url) from e

    def _record_timing(self, response_time: float) -> None:
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()

        previous = self.stats['average_response_time']
        # Exponential moving average, weighted towards history
        self.stats['average_response_time'] = (
            response_time if not previous else previous * 0.7 + response_time * 0.3
        )

    async def _raise_for_status(self, response: aiohttp.ClientResponse):
        status = response.status
        if 200 <= status < 300:
            return

        if status in (401, 403):
            reason = "Authentication failed" if status == 401 else "Access forbidden"
            raise APIAuthenticationError(f"{reason} for {self.api_name}", api_name=self.api_name)

        if status == 429:
            retry_after = response.headers.get('Retry-After')
            raise RateLimitError(
                f"Rate limit exceeded for {self.api_name}. Retry after {retry_after or 'unknown'} seconds.",
                api_name=self.api_name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None
            )

        if 400 <= status < 600:
            kind = "Client error" if status < 500 else "Server error"
            message = f"{kind} for {self.api_name} ({status}): {await response.text()}"
        else:
            message = f"Unexpected status code for {self.api_name}: {status}"
        raise ExternalAPIError(message, api_name=self.api_name, status_code_received=status)

    def _transform_exception(self, exception: Exception, method: str, url: str) -> Exception:
        """Map transport failures onto the ExternalAPIError family."""
        if isinstance(exception, GardenCareException):
            return exception
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(f"Timeout for {self.api_name}: {method} {url}", api_name=self.api_name)
        if isinstance(exception, aiohttp.ClientError):
            return ExternalAPIError(f"Client error for {self.api_name}: {exception}", api_name=self.api_name)
        return ExternalAPIError(f"Unexpected error for {self.api_name}: {exception}", api_name=self.api_name)

    def _record_error(self, error: Exception, method: str, url: str):
        record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'error_type': type(error).__name__,
            'error_message': str(error),
            'method': method,
            'url': url,
            'api_name': self.api_name,
        }
        self.error_history.append(record)
        logger.error(f"API error recorded for {self.api_name}", extra=record)

    async def post(
        self,
        endpoint: str,
        data: Optional[RequestBody] = None,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        return await self._make_request('POST', endpoint, params, data, headers, timeout)

    def get_stats(self) -> Dict[str, Any]:
        total = self.stats['total_requests']
        return {
            'api_name': self.api_name,
            'base_url': self.base_url,
            'stats': dict(self.stats),
            'success_rate': self.stats['successful_requests'] / total if total else 0,
            'recent_errors': list(self.error_history)[-10:],
        }

    async def close(self):
        """Close the session if this client opened it."""
        if self.session and self._owns_session:
            await self.session.close()
            logger.info(f"API client closed for {self.api_name}")
        self.session = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
