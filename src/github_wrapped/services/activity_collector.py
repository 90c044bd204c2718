"""REST activity collector: commit calendar and event counts."""

import logging
from collections import Counter
from datetime import date, datetime, time, timezone
from typing import Any

from github_wrapped.exceptions import GitHubAPIError, RateLimitExceededError
from github_wrapped.models.activity import EventType, GitHubEvent
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.user import parse_datetime
from github_wrapped.services.github_rest_client import GitHubRestClient
from github_wrapped.utils.concurrency import gather_best_effort

logger = logging.getLogger(__name__)


def select_recent_repos(
    repos: list[RepositorySummary],
    limit: int,
) -> list[RepositorySummary]:
    """The ``limit`` most recently updated repositories."""
    epoch = datetime.min.replace(tzinfo=timezone.utc)
    ranked = sorted(repos, key=lambda r: r.updated_at or epoch, reverse=True)
    return ranked[:limit]


def commit_date(commit: dict[str, Any]) -> date | None:
    """Authored date of a commit listing entry."""
    author = (commit.get("commit") or {}).get("author") or {}
    authored = parse_datetime(author.get("date"))
    return authored.date() if authored else None


class ActivityCollector:
    """Builds per-day commit counts and PR/issue totals from the REST API.

    Per-repository commit fetches are best effort: a repository whose
    listing fails contributes nothing and is reported back by name.
    """

    def __init__(self, rest_client: GitHubRestClient, batch_size: int = 10):
        self.rest_client = rest_client
        self.batch_size = batch_size

    async def collect_daily_commits(
        self,
        username: str,
        repos: list[RepositorySummary],
        since: date,
        until: date,
    ) -> tuple[dict[date, int], list[str]]:
        """Count the user's commits per day across ``repos``.

        Args:
            username: Commit author to filter on
            repos: Repositories to scan
            since: First day of the window
            until: Last day of the window (inclusive)

        Returns:
            (commit count per day, full names of repositories that failed)
        """
        since_iso = datetime.combine(since, time.min).isoformat() + "Z"
        until_iso = datetime.combine(until, time.max).isoformat() + "Z"

        by_name = {repo.full_name: repo for repo in repos}

        async def fetch(full_name: str) -> list[dict[str, Any]]:
            repo = by_name[full_name]
            owner = repo.owner or username
            return await self.rest_client.get_repo_commits(
                owner,
                repo.name,
                author=username,
                since=since_iso,
                until=until_iso,
            )

        logger.debug("Fetching commits from %d repositories", len(repos))
        results, failed = await gather_best_effort(
            list(by_name), fetch, default=list, batch_size=self.batch_size
        )

        counts: Counter[date] = Counter()
        for commits in results.values():
            for commit in commits:
                day = commit_date(commit)
                if day is not None and since <= day <= until:
                    counts[day] += 1

        if failed:
            logger.warning(
                "Commit history unavailable for %d of %d repositories",
                len(failed),
                len(repos),
            )
        return dict(counts), failed

    async def collect_event_counts(
        self,
        username: str,
        per_page: int = 100,
    ) -> tuple[int, int]:
        """Count pull request and issue events in the recent public feed.

        Returns:
            (pull request events, issue events); zeros if the feed is unavailable
        """
        try:
            raw_events = await self.rest_client.get_user_events(username, per_page=per_page)
        except (GitHubAPIError, RateLimitExceededError) as e:
            logger.warning("Failed to fetch events for %s: %s", username, e)
            return 0, 0

        events = [GitHubEvent.from_api(e) for e in raw_events]
        kinds = Counter(event.event_type for event in events)
        return kinds[EventType.PULL_REQUEST], kinds[EventType.ISSUES]
