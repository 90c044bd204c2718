"""Canonical fetcher output consumed by the aggregator."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from github_wrapped.models.contribution import ContributionDay
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.user import UserProfile, parse_datetime


class EventType(str, Enum):
    """Public event types counted from the events feed."""

    PULL_REQUEST = "PullRequestEvent"
    ISSUES = "IssuesEvent"
    PUSH = "PushEvent"
    OTHER = "Other"


class GitHubEvent(BaseModel):
    """GitHub event from Events API."""

    id: str
    type: str
    repo: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GitHubEvent":
        """Create from GitHub Events API response."""
        return cls(
            id=str(data.get("id", "")),
            type=data.get("type", ""),
            repo=(data.get("repo") or {}).get("name", ""),
            created_at=parse_datetime(data.get("created_at")),
        )

    @property
    def event_type(self) -> EventType:
        """Get typed event type."""
        try:
            return EventType(self.type)
        except ValueError:
            return EventType.OTHER


class ActivityBundle(BaseModel):
    """Everything fetched for one user, independent of the upstream API used.

    Both the REST and the GraphQL fetchers produce this shape, so the
    aggregator never sees upstream JSON.
    """

    profile: UserProfile
    repositories: list[RepositorySummary] = Field(default_factory=list)
    contribution_days: list[ContributionDay] = Field(default_factory=list)
    pull_request_count: int = 0
    issue_count: int = 0
    commit_count: int | None = None  # None: derive from contribution_days
    window_start: date | None = None
    window_end: date | None = None
    source: Literal["rest", "graphql"] = "rest"
    failed_repositories: list[str] = Field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        """True when some per-repository fetches failed."""
        return bool(self.failed_repositories)
