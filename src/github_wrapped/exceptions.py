"""Exceptions for GitHub Wrapped.

Exception Hierarchy:
    GitHubWrappedError (base)
    ├── GitHubAPIError (upstream HTTP errors with status codes)
    │   ├── GitHubRateLimitError (403/429 quota exhausted upstream)
    │   ├── GitHubNotFoundError (404 not found)
    │   └── AuthenticationError (401, token invalid or required)
    ├── GitHubGraphQLError (GraphQL API errors)
    ├── RateLimitExceededError (local rate limit tracking, before making request)
    └── UserNotFoundError (requested account does not exist)

Only the fetching layer raises these. Aggregation works on data that is
already in memory and does not fail on well-formed input.
"""

__all__ = [
    "GitHubWrappedError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "GitHubGraphQLError",
    "RateLimitExceededError",
    "UserNotFoundError",
    "AuthenticationError",
]

class GitHubWrappedError(Exception):
    """Base exception for all GitHub Wrapped errors."""


class GitHubAPIError(GitHubWrappedError):
    """Upstream failure that is neither "not found" nor "rate limited".

    The upstream status code and decoded body are attached so callers can
    pass them through. Subclasses fill in ``default_status`` when the
    caller does not give one.
    """

    default_status: int | None = None

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = self.default_status if status_code is None else status_code
        self.response_body = response_body or {}


class GitHubRateLimitError(GitHubAPIError):
    """GitHub refused a request because the quota is spent (403 or 429).

    ``reset_time`` is the Unix time the quota refills, when GitHub said so.
    """

    default_status = 403

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code, response_body)
        self.reset_time = reset_time


class GitHubNotFoundError(GitHubAPIError):
    """HTTP 404 from the REST API."""

    default_status = 404


class GitHubGraphQLError(GitHubWrappedError):
    """A GraphQL response carried an ``errors`` array."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []

    @property
    def error_types(self) -> set[str]:
        """GraphQL error ``type`` values reported by GitHub."""
        return {e.get("type", "") for e in self.errors if isinstance(e, dict)}


class RateLimitExceededError(GitHubWrappedError):
    """The local limiter refused a request before it was sent."""

    def __init__(self, message: str, reset_time: float | None = None):
        super().__init__(message)
        self.reset_time = reset_time


class UserNotFoundError(GitHubWrappedError):
    """The requested account does not exist."""

    def __init__(self, username: str):
        super().__init__(f"User not found: {username}")
        self.username = username


class AuthenticationError(GitHubAPIError):
    """The token is missing where required, or GitHub rejected it."""

    default_status = 401
