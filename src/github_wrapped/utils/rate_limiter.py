"""Client-side view of GitHub's REST and GraphQL quotas.

GitHub reports the remaining budget on every response. The limiter keeps
the latest figures per API and refuses a request locally once its budget
is spent and the window has not reset yet.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional

from github_wrapped.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

# Warn when fewer requests than this remain
LOW_REMAINING_THRESHOLD = 10

DEFAULT_BUDGET = 5000
WINDOW_SECONDS = 3600

API_LABELS = {"rest": "REST", "graphql": "GraphQL"}


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_time_remaining(seconds: float) -> str:
    """Human-friendly duration, e.g. ``"1 hr 30 min"`` or ``"45 seconds"``."""
    if seconds <= 0:
        return "now"

    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours} hr {minutes} min" if minutes else _plural(hours, "hour")
    if minutes:
        return f"{minutes} min {secs} sec" if secs else _plural(minutes, "minute")
    return _plural(secs, "second")


def format_reset_time(reset_timestamp: float) -> str:
    """Local wall-clock time of a quota reset (``HH:MM:SS``)."""
    return datetime.fromtimestamp(reset_timestamp).strftime("%H:%M:%S")


@dataclass
class QuotaBudget:
    """Latest quota figures GitHub reported for one API."""

    limit: int = DEFAULT_BUDGET
    remaining: int = DEFAULT_BUDGET
    reset_time: float = field(default_factory=lambda: time.time() + WINDOW_SECONDS)

    @property
    def is_exhausted(self) -> bool:
        return self.remaining <= 0

    @property
    def seconds_until_reset(self) -> float:
        return max(0.0, self.reset_time - time.time())

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        """Refresh from ``x-ratelimit-*`` response headers (any case).

        A header that does not parse leaves the previous figure in place.
        """
        lowered = {key.lower(): value for key, value in headers.items()}
        for attr, header, parse in (
            ("limit", "x-ratelimit-limit", int),
            ("remaining", "x-ratelimit-remaining", int),
            ("reset_time", "x-ratelimit-reset", float),
        ):
            if header not in lowered:
                continue
            try:
                setattr(self, attr, parse(lowered[header]))
            except ValueError:
                logger.debug("Ignoring malformed %s header: %r", header, lowered[header])


class RateLimiter:
    """Gates requests against one ``QuotaBudget`` per API.

    Budgets start optimistic and are corrected from the headers of every
    response via ``record``.
    """

    def __init__(self):
        self.budgets: dict[str, QuotaBudget] = {api: QuotaBudget() for api in API_LABELS}
        self._lock = asyncio.Lock()

    @property
    def rest(self) -> QuotaBudget:
        return self.budgets["rest"]

    @property
    def graphql(self) -> QuotaBudget:
        return self.budgets["graphql"]

    async def acquire(self, api: str, cost: int = 1) -> None:
        """Deduct ``cost`` from ``api``'s budget.

        Raises:
            RateLimitExceededError: If the budget cannot cover the request
                before the window resets
        """
        budget = self.budgets[api]
        label = API_LABELS[api]

        async with self._lock:
            if budget.remaining < cost and budget.seconds_until_reset > 0:
                human_time = format_time_remaining(budget.seconds_until_reset)
                reset_at = format_reset_time(budget.reset_time)
                logger.warning(
                    "%s API rate limit exhausted, resets in %s (at %s)",
                    label,
                    human_time,
                    reset_at,
                )
                raise RateLimitExceededError(
                    f"Rate limit exceeded. Resets in {human_time} (at {reset_at})",
                    reset_time=budget.reset_time,
                )

            budget.remaining -= cost
            if 0 < budget.remaining < LOW_REMAINING_THRESHOLD:
                logger.warning(
                    "Only %d/%d %s API requests remaining",
                    budget.remaining,
                    budget.limit,
                    label,
                )

    def record(self, api: str, headers: Mapping[str, str]) -> None:
        """Store the quota GitHub reported on a response."""
        self.budgets[api].update_from_headers(headers)

    def get_status(self) -> dict[str, dict]:
        """Remaining, limit and seconds to reset for each API."""
        return {
            api: {
                "remaining": budget.remaining,
                "limit": budget.limit,
                "reset_in": budget.seconds_until_reset,
            }
            for api, budget in self.budgets.items()
        }


_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Shared limiter for every client in the process."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Drop the shared limiter (used between tests)."""
    global _rate_limiter
    _rate_limiter = None
