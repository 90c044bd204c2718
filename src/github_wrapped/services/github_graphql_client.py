"""GitHub GraphQL API client for contribution data."""

import logging
from datetime import date, datetime
from typing import Any, Optional

from github_wrapped.config import USER_AGENT
from github_wrapped.exceptions import (
    AuthenticationError,
    GitHubGraphQLError,
    GitHubRateLimitError,
)
from github_wrapped.services.http_client import GitHubHTTPClient

logger = logging.getLogger(__name__)

# Profile, owned repositories and the contribution calendar in one round trip
WRAP_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!, $repoCount: Int!) {
  user(login: $username) {
    login
    name
    bio
    company
    location
    avatarUrl
    createdAt
    followers {
      totalCount
    }
    following {
      totalCount
    }
    repositories(
      first: $repoCount
      ownerAffiliations: OWNER
      privacy: PUBLIC
      orderBy: {field: UPDATED_AT, direction: DESC}
    ) {
      totalCount
      nodes {
        name
        isFork
        stargazerCount
        forkCount
        pushedAt
        owner {
          login
        }
        primaryLanguage {
          name
        }
      }
    }
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            contributionLevel
          }
        }
      }
      totalCommitContributions
      totalIssueContributions
      totalPullRequestContributions
    }
  }
}
"""


class GitHubGraphQLClient(GitHubHTTPClient):
    """Async client for GitHub GraphQL API (token required)."""

    api = "graphql"

    @property
    def base_url(self) -> str:
        return self.config.github_graphql_url

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        if not self.config.github_token:
            raise AuthenticationError(
                "GitHub token is required for GraphQL API. "
                "Set GITHUB_TOKEN environment variable."
            )

        return {
            "Authorization": f"Bearer {self.config.github_token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL query.

        GitHub answers GraphQL failures with HTTP 200 and an ``errors``
        array, so those are inspected here rather than by status.

        Raises:
            GitHubRateLimitError: If GitHub reports the quota as exhausted
            GitHubGraphQLError: If the response carries GraphQL errors
            GitHubAPIError: On any other HTTP failure
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await self._request("POST", "", json=payload)
        result = response.json()

        errors = result.get("errors")
        if errors:
            if any(e.get("type") == "RATE_LIMITED" for e in errors):
                raise GitHubRateLimitError(
                    "Rate limit exceeded",
                    status_code=response.status_code,
                    response_body=result,
                )
            messages = "; ".join(e.get("message", "Unknown error") for e in errors)
            raise GitHubGraphQLError(f"GraphQL errors: {messages}", errors=errors)

        return result.get("data") or {}

    async def get_wrap_data(
        self,
        username: str,
        from_date: date,
        to_date: date,
        repo_count: int = 100,
    ) -> Optional[dict[str, Any]]:
        """Get profile, repositories and contributions for a window.

        Args:
            username: GitHub username
            from_date: First day of the window
            to_date: Last day of the window (inclusive)
            repo_count: Owned repositories to fetch (max 100)

        Returns:
            The ``user`` node, or None when the account does not exist
        """
        # Convert to ISO format with time
        from_datetime = datetime.combine(from_date, datetime.min.time()).isoformat() + "Z"
        to_datetime = datetime.combine(to_date, datetime.max.time()).isoformat() + "Z"

        variables = {
            "username": username,
            "from": from_datetime,
            "to": to_datetime,
            "repoCount": min(repo_count, 100),
        }

        logger.debug("Querying wrap data for %s (%s to %s)", username, from_date, to_date)
        result = await self.execute(WRAP_QUERY, variables)
        return result.get("user")
