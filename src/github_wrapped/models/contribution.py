"""Contribution calendar models."""

from datetime import date, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Heatmap intensity thresholds: a count below the bound gets the level.
LEVEL_THRESHOLDS: list[tuple[int, str]] = [
    (1, "NONE"),
    (3, "FIRST_QUARTILE"),
    (6, "SECOND_QUARTILE"),
    (10, "THIRD_QUARTILE"),
]
TOP_LEVEL = "FOURTH_QUARTILE"


def level_for_count(count: int) -> str:
    """Classify a daily count into a heatmap intensity level."""
    for bound, level in LEVEL_THRESHOLDS:
        if count < bound:
            return level
    return TOP_LEVEL


class ContributionDay(BaseModel):
    """Single day in contribution calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(default=0, ge=0)
    level: str = "NONE"  # NONE, FIRST_QUARTILE, SECOND_QUARTILE, THIRD_QUARTILE, FOURTH_QUARTILE

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionDay":
        """Create from GraphQL response."""
        count = data.get("contributionCount") or 0
        return cls(
            date=date.fromisoformat(data["date"]),
            count=count,
            level=data.get("contributionLevel") or level_for_count(count),
        )

    @classmethod
    def from_count(cls, day: date, count: int) -> "ContributionDay":
        """Create from a locally tallied count."""
        return cls(date=day, count=count, level=level_for_count(count))


class ContributionWeek(BaseModel):
    """Week of contributions."""

    days: list[ContributionDay] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionWeek":
        """Create from GraphQL response."""
        days = [
            ContributionDay.from_graphql(day)
            for day in data.get("contributionDays", [])
            if day.get("date")
        ]
        return cls(days=days)


class ContributionCalendar(BaseModel):
    """Full contribution calendar (the green squares mosaic)."""

    total_contributions: int = 0
    weeks: list[ContributionWeek] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionCalendar":
        """Create from GraphQL response."""
        weeks = [
            ContributionWeek.from_graphql(week)
            for week in data.get("weeks", [])
        ]
        return cls(
            total_contributions=data.get("totalContributions", 0),
            weeks=weeks,
        )

    @classmethod
    def from_daily_counts(
        cls,
        counts: dict[date, int],
        start: date,
        end: date,
    ) -> "ContributionCalendar":
        """Build a gap-free calendar from per-day tallies.

        Every day from ``start`` to ``end`` inclusive gets an entry; days
        absent from ``counts`` are zero. Weeks start on Sunday, like the
        calendar GitHub renders.
        """
        weeks: list[ContributionWeek] = []
        current: list[ContributionDay] = []
        total = 0

        day = start
        while day <= end:
            # date.weekday(): Monday == 0, Sunday == 6
            if day.weekday() == 6 and current:
                weeks.append(ContributionWeek(days=current))
                current = []
            count = counts.get(day, 0)
            total += count
            current.append(ContributionDay.from_count(day, count))
            day += timedelta(days=1)

        if current:
            weeks.append(ContributionWeek(days=current))

        return cls(total_contributions=total, weeks=weeks)

    @property
    def days(self) -> list[ContributionDay]:
        """All days in delivery order."""
        return [day for week in self.weeks for day in week.days]
