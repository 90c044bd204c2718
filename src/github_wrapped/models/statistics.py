"""Aggregated "year in review" statistics."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from github_wrapped.models.user import UserProfile


class LanguageCount(BaseModel):
    """Number of non-fork repositories using a primary language."""

    name: str
    count: int


class WeeklyCommits(BaseModel):
    """Commits in one calendar week block (W1, W2, ...)."""

    week: str
    commits: int = 0


class MonthlyCommits(BaseModel):
    """Commits in one calendar month (Jan..Dec)."""

    month: str
    commits: int = 0


class WeekdayCommits(BaseModel):
    """Commits on one day of the week (Sunday..Saturday)."""

    day: str
    commits: int = 0


class DailyCommits(BaseModel):
    """One calendar heatmap cell."""

    date: date
    count: int = 0


class Statistics(BaseModel):
    """Output contract consumed by the presentation layer.

    Attributes are snake_case; JSON output uses the camelCase field names
    the card renderer expects (``totalPRs``, ``mostActiveDayOfWeek``, ...).
    """

    model_config = ConfigDict(populate_by_name=True)

    user: UserProfile
    repos: int = 0
    languages: list[LanguageCount] = Field(default_factory=list)
    commits: list[MonthlyCommits] = Field(default_factory=list)
    weekly_commits: list[WeeklyCommits] = Field(default_factory=list, alias="weeklyCommits")
    day_of_week_commits: list[WeekdayCommits] = Field(
        default_factory=list, alias="dayOfWeekCommits"
    )
    daily_commits: list[DailyCommits] = Field(default_factory=list, alias="dailyCommits")

    total_commits: int = Field(default=0, alias="totalCommits")
    total_prs: int = Field(default=0, alias="totalPRs")
    total_issues: int = Field(default=0, alias="totalIssues")
    total_stars: int = Field(default=0, alias="totalStars")
    total_forks: int = Field(default=0, alias="totalForks")
    contributions: int = 0

    most_active_day: str = Field(default="-", alias="mostActiveDay")
    most_active_week: str = Field(default="-", alias="mostActiveWeek")
    most_active_month: str = Field(default="-", alias="mostActiveMonth")
    most_active_day_of_week: str = Field(default="Monday", alias="mostActiveDayOfWeek")
    peak_commits_in_day: int = Field(default=0, alias="peakCommitsInDay")

    badges: list[str] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        """Flat JSON-ready dict: camelCase keys, ISO dates, integer counts."""
        return self.model_dump(mode="json", by_alias=True)
