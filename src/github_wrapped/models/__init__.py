"""Data models for GitHub Wrapped."""

from github_wrapped.models.activity import ActivityBundle, EventType, GitHubEvent
from github_wrapped.models.contribution import (
    ContributionCalendar,
    ContributionDay,
    ContributionWeek,
)
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.statistics import (
    DailyCommits,
    LanguageCount,
    MonthlyCommits,
    Statistics,
    WeekdayCommits,
    WeeklyCommits,
)
from github_wrapped.models.user import UserProfile

__all__ = [
    "UserProfile",
    "RepositorySummary",
    "ContributionDay",
    "ContributionWeek",
    "ContributionCalendar",
    "GitHubEvent",
    "EventType",
    "ActivityBundle",
    "LanguageCount",
    "WeeklyCommits",
    "MonthlyCommits",
    "WeekdayCommits",
    "DailyCommits",
    "Statistics",
]
