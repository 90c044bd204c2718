"""HTTP plumbing shared by the REST and GraphQL clients.

Every request goes through the shared rate limiter, is retried on
transient network failures, and has its error status mapped onto the
exception hierarchy before the caller sees the response.
"""

import logging
from typing import Any, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from github_wrapped.config import Config, get_config
from github_wrapped.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from github_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)


def _json_body(response: httpx.Response) -> dict:
    """Decode an error body, tolerating empty or non-JSON payloads."""
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text}
    return body if isinstance(body, dict) else {}


def _is_quota_refusal(response: httpx.Response, message: str) -> bool:
    if response.status_code == 429:
        return True
    return response.status_code == 403 and (
        "rate limit" in message.lower()
        or response.headers.get("x-ratelimit-remaining") == "0"
    )


def _reset_time(response: httpx.Response) -> Optional[float]:
    try:
        return float(response.headers["x-ratelimit-reset"])
    except (KeyError, ValueError):
        return None


def raise_for_status(response: httpx.Response, endpoint: str) -> None:
    """Map an error response onto the exception hierarchy."""
    status = response.status_code
    if status < 400:
        return

    body = _json_body(response)
    message = body.get("message", "Unknown error")

    if status == 404:
        raise GitHubNotFoundError(f"Resource not found: {endpoint}", response_body=body)
    if status == 401:
        raise AuthenticationError(f"Bad credentials: {message}", response_body=body)
    if _is_quota_refusal(response, message):
        raise GitHubRateLimitError(
            "Rate limit exceeded",
            status_code=status,
            response_body=body,
            reset_time=_reset_time(response),
        )
    if status >= 500:
        raise GitHubAPIError(f"Server error: {status}", status_code=status, response_body=body)
    raise GitHubAPIError(f"API error: {message}", status_code=status, response_body=body)


class GitHubHTTPClient:
    """Lazily opened ``httpx.AsyncClient`` for one GitHub endpoint.

    Subclasses name their quota bucket in ``api`` and provide
    ``base_url`` and ``_get_headers``.
    """

    api = "rest"

    def __init__(
        self,
        config: Optional[Config] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.config = config or get_config()
        self.rate_limiter = rate_limiter or get_rate_limiter()
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        raise NotImplementedError

    def _get_headers(self) -> dict[str, str]:
        raise NotImplementedError

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send one request against the quota, retrying network hiccups."""
        await self.rate_limiter.acquire(self.api)

        client = await self._get_client()
        logger.debug("%s %s", method, url or self.base_url)
        response = await client.request(method, url, **kwargs)

        self.rate_limiter.record(self.api, response.headers)
        raise_for_status(response, url or self.base_url)

        return response
