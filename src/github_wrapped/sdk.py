"""GitHub Wrapped SDK - fetch a user's year and turn it into wrap statistics."""

import logging
from datetime import date, timedelta

from github_wrapped.analysis.aggregator import aggregate_bundle
from github_wrapped.config import Config
from github_wrapped.exceptions import GitHubWrappedError
from github_wrapped.models.activity import ActivityBundle
from github_wrapped.models.contribution import ContributionCalendar
from github_wrapped.models.statistics import Statistics
from github_wrapped.services.activity_collector import ActivityCollector, select_recent_repos
from github_wrapped.services.contribution_collector import ContributionCollector
from github_wrapped.services.github_graphql_client import GitHubGraphQLClient
from github_wrapped.services.github_rest_client import GitHubRestClient
from github_wrapped.services.profile_collector import ProfileCollector
from github_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)


class GitHubWrapped:
    """High-level client producing a user's "year in review".

    With a token the GraphQL API supplies profile, repositories and the
    contribution calendar in one query. Without one (or with
    ``prefer_graphql=False``) the REST API is used: commits are listed per
    repository for the most recently updated repositories and PR/issue
    counts come from the public events feed. Both paths produce the same
    ``ActivityBundle``.

    Example usage:
        ```python
        from github_wrapped import GitHubWrapped

        async with GitHubWrapped(token="ghp_xxx") as client:
            stats = await client.wrap("octocat")
            print(stats.most_active_day, stats.badges)
        ```

    Args:
        token: GitHub personal access token (optional but recommended).
        api_url: GitHub API base URL (default: https://api.github.com)
        graphql_url: GitHub GraphQL API URL (default: https://api.github.com/graphql)
        config: Full configuration; overrides the three arguments above
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        graphql_url: str = "https://api.github.com/graphql",
        config: Config | None = None,
    ):
        self._config = config or Config(
            github_token=token,
            github_api_url=api_url,
            github_graphql_url=graphql_url,
        )
        self._rate_limiter: RateLimiter | None = None
        self._rest_client: GitHubRestClient | None = None
        self._graphql_client: GitHubGraphQLClient | None = None
        self._initialized = False

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._config.is_authenticated

    async def __aenter__(self) -> "GitHubWrapped":
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _initialize(self) -> None:
        """Initialize clients."""
        if self._initialized:
            return

        self._rate_limiter = get_rate_limiter()
        self._rest_client = GitHubRestClient(
            config=self._config,
            rate_limiter=self._rate_limiter,
        )

        if self._config.is_authenticated:
            self._graphql_client = GitHubGraphQLClient(
                config=self._config,
                rate_limiter=self._rate_limiter,
            )

        self._initialized = True
        logger.debug(
            "GitHubWrapped initialized (authenticated=%s)",
            self.is_authenticated,
        )

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._rest_client:
            await self._rest_client.close()
        if self._graphql_client:
            await self._graphql_client.close()
        self._initialized = False
        logger.debug("GitHubWrapped closed")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise GitHubWrappedError(
                "Client not initialized. Use 'async with GitHubWrapped(...) as client:'"
            )

    def observation_window(self, today: date | None = None) -> tuple[date, date]:
        """Trailing window of ``window_days`` days ending ``today`` (inclusive)."""
        end = today or date.today()
        return end - timedelta(days=self._config.window_days - 1), end

    async def fetch_activity(
        self,
        username: str,
        today: date | None = None,
        prefer_graphql: bool = True,
    ) -> ActivityBundle:
        """Fetch everything the aggregator needs for ``username``.

        Args:
            username: GitHub username
            today: Last day of the observation window (defaults to today)
            prefer_graphql: Use GraphQL when a token is available

        Returns:
            ActivityBundle for the trailing window

        Raises:
            UserNotFoundError: If the account does not exist
            GitHubRateLimitError: If GitHub reports the quota as exhausted
            GitHubAPIError: On any other upstream failure
        """
        self._ensure_initialized()
        start, end = self.observation_window(today)

        if prefer_graphql and self._graphql_client:
            logger.info("Fetching activity for %s via GraphQL", username)
            collector = ContributionCollector(self._graphql_client)
            return await collector.collect_bundle(username, start, end)

        logger.info("Fetching activity for %s via REST", username)
        return await self._fetch_rest(username, start, end)

    async def _fetch_rest(self, username: str, start: date, end: date) -> ActivityBundle:
        profile_collector = ProfileCollector(self._rest_client)
        profile = await profile_collector.collect_profile(username)
        repos = await profile_collector.collect_repos(
            username, max_pages=self._config.max_repo_pages
        )

        activity = ActivityCollector(self._rest_client)
        scanned = select_recent_repos(repos, self._config.max_commit_repos)
        daily, failed = await activity.collect_daily_commits(username, scanned, start, end)
        prs, issues = await activity.collect_event_counts(
            username, per_page=self._config.events_per_page
        )

        calendar = ContributionCalendar.from_daily_counts(daily, start, end)
        return ActivityBundle(
            profile=profile,
            repositories=repos,
            contribution_days=calendar.days,
            pull_request_count=prs,
            issue_count=issues,
            window_start=start,
            window_end=end,
            source="rest",
            failed_repositories=failed,
        )

    async def wrap(
        self,
        username: str,
        today: date | None = None,
        prefer_graphql: bool = True,
    ) -> Statistics:
        """Fetch and aggregate a user's year in review."""
        bundle = await self.fetch_activity(username, today=today, prefer_graphql=prefer_graphql)
        if bundle.is_partial:
            logger.warning(
                "Statistics for %s exclude %d repositories that failed to load",
                username,
                len(bundle.failed_repositories),
            )
        stats = aggregate_bundle(
            bundle,
            language_limit=self._config.language_limit,
            badge_limit=self._config.badge_limit,
        )
        logger.info("Wrap complete for %s", username)
        return stats
