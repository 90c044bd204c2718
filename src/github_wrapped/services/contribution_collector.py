"""Contribution calendar collector service (GraphQL)."""

import logging
from datetime import date

from github_wrapped.exceptions import GitHubGraphQLError, UserNotFoundError
from github_wrapped.models.activity import ActivityBundle
from github_wrapped.models.contribution import ContributionCalendar
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.user import UserProfile
from github_wrapped.services.github_graphql_client import GitHubGraphQLClient

logger = logging.getLogger(__name__)


class ContributionCollector:
    """Collects everything for a wrap in a single GraphQL query."""

    def __init__(self, graphql_client: GitHubGraphQLClient):
        self.graphql_client = graphql_client

    async def collect_bundle(
        self,
        username: str,
        from_date: date,
        to_date: date,
        repo_count: int = 100,
    ) -> ActivityBundle:
        """Collect profile, repositories and calendar for a window.

        Raises:
            UserNotFoundError: If the account does not exist
        """
        logger.debug("Fetching contribution calendar for %s", username)

        try:
            user = await self.graphql_client.get_wrap_data(
                username, from_date, to_date, repo_count=repo_count
            )
        except GitHubGraphQLError as e:
            if "NOT_FOUND" in e.error_types:
                raise UserNotFoundError(username) from e
            logger.error("Failed to fetch contributions: %s", e)
            raise

        if not user:
            raise UserNotFoundError(username)

        collection = user.get("contributionsCollection") or {}
        calendar = ContributionCalendar.from_graphql(
            collection.get("contributionCalendar") or {}
        )
        repos = [
            RepositorySummary.from_graphql(node)
            for node in (user.get("repositories") or {}).get("nodes") or []
            if node
        ]

        logger.debug("Found %d contributions", calendar.total_contributions)

        return ActivityBundle(
            profile=UserProfile.from_graphql(user),
            repositories=repos,
            contribution_days=calendar.days,
            pull_request_count=collection.get("totalPullRequestContributions", 0),
            issue_count=collection.get("totalIssueContributions", 0),
            commit_count=collection.get("totalCommitContributions"),
            window_start=from_date,
            window_end=to_date,
            source="graphql",
        )
