"""Profile and repository collector service."""

import logging

from github_wrapped.exceptions import GitHubNotFoundError, UserNotFoundError
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.user import UserProfile
from github_wrapped.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class ProfileCollector:
    """Collects the user profile and owned repositories over REST."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def collect_profile(self, username: str) -> UserProfile:
        """Collect user profile data.

        Raises:
            UserNotFoundError: If the account does not exist
        """
        logger.debug("Fetching profile for %s", username)

        try:
            data = await self.rest_client.get_user(username)
        except GitHubNotFoundError as e:
            raise UserNotFoundError(username) from e
        return UserProfile.from_api(data)

    async def collect_repos(
        self,
        username: str,
        max_pages: int | None = 1,
    ) -> list[RepositorySummary]:
        """Collect public repositories, most recently updated first."""
        logger.debug("Fetching repositories for %s", username)

        try:
            repos_data = await self.rest_client.get_user_repos(username, max_pages=max_pages)
        except GitHubNotFoundError as e:
            raise UserNotFoundError(username) from e

        repos = [RepositorySummary.from_api(r) for r in repos_data]
        logger.debug("Found %d public repositories", len(repos))
        return repos
