"""Reduce fetched activity into wrap statistics.

Everything here is pure: no I/O, no clock reads, no shared state. The
same input always produces the same ``Statistics``.

Peak finders scan with a strict ``>`` so the first bucket to reach the
maximum wins ties. When every bucket is zero they return a sentinel
instead of a real label.
"""

from collections.abc import Sequence
from datetime import date, timedelta

from github_wrapped.analysis.badges import MAX_BADGES, classify_badges
from github_wrapped.models.activity import ActivityBundle
from github_wrapped.models.contribution import ContributionDay
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

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]
WEEKDAY_NAMES = [
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
]

NO_DATA = "-"
# Reported when no weekday has any contributions. Kept as-is for parity
# with the published cards.
DEFAULT_WEEKDAY = "Monday"
DEFAULT_BADGE_YEAR = 2025

LANGUAGE_LIMIT = 8
MIN_WEEKS = 52


def rank_languages(
    repositories: Sequence[RepositorySummary],
    limit: int = LANGUAGE_LIMIT,
) -> list[LanguageCount]:
    """Count primary languages over non-fork repositories.

    Sorted by count descending; equal counts keep first-seen order.
    """
    counts: dict[str, int] = {}
    for repo in repositories:
        if repo.is_fork or not repo.primary_language:
            continue
        counts[repo.primary_language] = counts.get(repo.primary_language, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [LanguageCount(name=name, count=count) for name, count in ranked[:limit]]


def weekday_index(day: date) -> int:
    """Index into WEEKDAY_NAMES (Sunday == 0)."""
    return (day.weekday() + 1) % 7


def weekday_buckets(days: Sequence[ContributionDay]) -> list[WeekdayCommits]:
    """Fold daily counts into Sunday..Saturday buckets."""
    totals = [0] * 7
    for day in days:
        totals[weekday_index(day.date)] += day.count
    return [
        WeekdayCommits(day=name, commits=total)
        for name, total in zip(WEEKDAY_NAMES, totals)
    ]


def most_active_weekday(buckets: Sequence[WeekdayCommits]) -> str:
    best, best_count = DEFAULT_WEEKDAY, 0
    for bucket in buckets:
        if bucket.commits > best_count:
            best, best_count = bucket.day, bucket.commits
    return best


def split_weeks(days: Sequence[ContributionDay]) -> list[list[ContributionDay]]:
    """Group days into sequential Sunday-to-Saturday blocks, in input order."""
    weeks: list[list[ContributionDay]] = []
    current_start: date | None = None
    for day in days:
        start = day.date - timedelta(days=weekday_index(day.date))
        if start != current_start:
            weeks.append([])
            current_start = start
        weeks[-1].append(day)
    return weeks


def weekly_buckets(
    days: Sequence[ContributionDay],
    min_weeks: int = MIN_WEEKS,
) -> list[WeeklyCommits]:
    """Sum each week block, labelled W1..Wn and zero-padded to ``min_weeks``.

    Blocks past ``min_weeks`` (a 365-day window usually touches 53 calendar
    weeks) are kept rather than dropped, so the weekly total always equals
    the daily total.
    """
    totals = [sum(day.count for day in week) for week in split_weeks(days)]
    totals.extend([0] * (min_weeks - len(totals)))
    return [
        WeeklyCommits(week=f"W{index}", commits=total)
        for index, total in enumerate(totals, start=1)
    ]


def most_active_week(buckets: Sequence[WeeklyCommits]) -> str:
    best, best_count = NO_DATA, 0
    for index, bucket in enumerate(buckets, start=1):
        if bucket.commits > best_count:
            best, best_count = f"Week {index}", bucket.commits
    return best


def monthly_buckets(days: Sequence[ContributionDay]) -> list[MonthlyCommits]:
    """Fold daily counts into Jan..Dec by calendar month."""
    totals = [0] * 12
    for day in days:
        totals[day.date.month - 1] += day.count
    return [
        MonthlyCommits(month=name, commits=total)
        for name, total in zip(MONTH_NAMES, totals)
    ]


def most_active_month(buckets: Sequence[MonthlyCommits]) -> str:
    best, best_count = NO_DATA, 0
    for bucket in buckets:
        if bucket.commits > best_count:
            best, best_count = bucket.month, bucket.commits
    return best


def format_day(day: date) -> str:
    """Format as ``"<day> <Mon>"``, e.g. ``"3 Jan"``."""
    return f"{day.day} {MONTH_NAMES[day.month - 1]}"


def peak_day(days: Sequence[ContributionDay]) -> tuple[str, int]:
    """Return (label, count) of the first day with the highest count."""
    best: ContributionDay | None = None
    for day in days:
        if day.count > (best.count if best else 0):
            best = day
    if best is None:
        return NO_DATA, 0
    return format_day(best.date), best.count


def badge_year(days: Sequence[ContributionDay], now: date | None) -> int:
    """Year quoted in badge wording: ``now`` if given, else the latest day."""
    if now is not None:
        return now.year
    if days:
        return max(day.date for day in days).year
    return DEFAULT_BADGE_YEAR


def aggregate(
    profile: UserProfile,
    repositories: Sequence[RepositorySummary],
    contribution_days: Sequence[ContributionDay],
    pull_request_count: int,
    issue_count: int,
    *,
    commit_count: int | None = None,
    now: date | None = None,
    language_limit: int = LANGUAGE_LIMIT,
    badge_limit: int = MAX_BADGES,
) -> Statistics:
    """Build the wrap statistics for one user.

    Args:
        profile: User profile shown on the card
        repositories: Owned repositories, forks included (they are skipped
            for language, star and fork totals)
        contribution_days: Daily counts in delivery order
        pull_request_count: Pull requests opened in the window
        issue_count: Issues opened in the window
        commit_count: Commit total reported upstream; defaults to the sum
            of daily counts
        now: Reference date for badge wording; never read from the clock
        language_limit: Maximum languages kept in the ranking
        badge_limit: Maximum badges kept

    Returns:
        Statistics with sentinel peaks when there is no activity
    """
    days = list(contribution_days)
    originals = [repo for repo in repositories if not repo.is_fork]

    languages = rank_languages(repositories, limit=language_limit)
    weekdays = weekday_buckets(days)
    weeks = weekly_buckets(days)
    months = monthly_buckets(days)
    peak_label, peak_count = peak_day(days)

    contributions = sum(day.count for day in days)
    total_commits = contributions if commit_count is None else commit_count
    total_stars = sum(repo.stars for repo in originals)

    return Statistics(
        user=profile,
        repos=len(repositories),
        languages=languages,
        commits=months,
        weekly_commits=weeks,
        day_of_week_commits=weekdays,
        daily_commits=[DailyCommits(date=day.date, count=day.count) for day in days],
        total_commits=total_commits,
        total_prs=pull_request_count,
        total_issues=issue_count,
        total_stars=total_stars,
        total_forks=sum(repo.forks for repo in originals),
        contributions=contributions,
        most_active_day=peak_label,
        most_active_week=most_active_week(weeks),
        most_active_month=most_active_month(months),
        most_active_day_of_week=most_active_weekday(weekdays),
        peak_commits_in_day=peak_count,
        badges=classify_badges(
            languages,
            total_commits=total_commits,
            total_prs=pull_request_count,
            total_stars=total_stars,
            year=badge_year(days, now),
            limit=badge_limit,
        ),
    )


def aggregate_bundle(
    bundle: ActivityBundle,
    now: date | None = None,
    **kwargs,
) -> Statistics:
    """Aggregate a fetched ``ActivityBundle``.

    ``now`` defaults to the bundle's window start, so a trailing window
    that crosses New Year is named after the year it opens in.
    """
    return aggregate(
        bundle.profile,
        bundle.repositories,
        bundle.contribution_days,
        bundle.pull_request_count,
        bundle.issue_count,
        commit_count=bundle.commit_count,
        now=now or bundle.window_start or bundle.window_end,
        **kwargs,
    )
