"""Utility modules for GitHub Wrapped."""

from github_wrapped.utils.concurrency import gather_best_effort
from github_wrapped.utils.pagination import get_next_page_url, parse_link_header
from github_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter, reset_rate_limiter

__all__ = [
    "RateLimiter",
    "get_rate_limiter",
    "reset_rate_limiter",
    "parse_link_header",
    "get_next_page_url",
    "gather_best_effort",
]
