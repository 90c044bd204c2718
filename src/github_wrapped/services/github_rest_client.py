"""GitHub REST API client."""

import asyncio
import logging
from typing import Any, Optional

from github_wrapped.config import USER_AGENT
from github_wrapped.services.http_client import GitHubHTTPClient
from github_wrapped.utils.pagination import get_next_page_url

logger = logging.getLogger(__name__)


class GitHubRestClient(GitHubHTTPClient):
    """Async client for GitHub REST API.

    Works without a token at the unauthenticated quota of 60 requests an
    hour.
    """

    api = "rest"

    @property
    def base_url(self) -> str:
        return self.config.github_api_url

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": USER_AGENT,
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make a GET request and return JSON response."""
        response = await self._request("GET", endpoint, **kwargs)
        return response.json()

    async def get_paginated(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        max_pages: Optional[int] = None,
        per_page: int = 100,
    ) -> list[dict[str, Any]]:
        """Fetch pages of a list endpoint by following Link headers.

        Args:
            endpoint: API endpoint
            params: Extra query parameters for the first page
            max_pages: Maximum number of pages to fetch (None for all)
            per_page: Items per page (max 100)

        Returns:
            List of all items across fetched pages
        """
        all_items: list[dict[str, Any]] = []
        url: Optional[str] = endpoint
        query: Optional[dict[str, Any]] = {**(params or {}), "per_page": per_page}
        page = 1

        while url and (max_pages is None or page <= max_pages):
            # The next link already carries the query string
            response = await self._request("GET", url, params=query)
            data = response.json()

            if not isinstance(data, list):
                all_items.append(data)
                break
            all_items.extend(data)

            url = get_next_page_url(response.headers.get("Link"))
            query = None
            page += 1

            # Small delay to be nice to the API
            if url:
                await asyncio.sleep(0.1)

        logger.debug("Fetched %d items from %s in %d page(s)", len(all_items), endpoint, page - 1)
        return all_items

    # Convenience methods for common endpoints

    async def get_user(self, username: str) -> dict[str, Any]:
        """Get user profile data."""
        return await self.get(f"/users/{username}")

    async def get_user_repos(
        self,
        username: str,
        max_pages: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Get user's public repositories, most recently updated first."""
        return await self.get_paginated(
            f"/users/{username}/repos",
            params={"sort": "updated"},
            max_pages=max_pages,
        )

    async def get_user_events(
        self,
        username: str,
        per_page: int = 100,
    ) -> list[dict[str, Any]]:
        """Get the most recent page of a user's public events."""
        return await self.get_paginated(
            f"/users/{username}/events/public",
            max_pages=1,
            per_page=per_page,
        )

    async def get_repo_commits(
        self,
        owner: str,
        repo: str,
        author: Optional[str] = None,
        since: Optional[str] = None,
        until: Optional[str] = None,
        max_pages: Optional[int] = 1,
    ) -> list[dict[str, Any]]:
        """Get repository commits, optionally filtered by author and dates."""
        params = {
            key: value
            for key, value in (("author", author), ("since", since), ("until", until))
            if value
        }
        return await self.get_paginated(
            f"/repos/{owner}/{repo}/commits",
            params=params,
            max_pages=max_pages,
        )

    async def get_rate_limit(self) -> dict[str, Any]:
        """Get the current core and GraphQL quota (does not count against it)."""
        data = await self.get("/rate_limit")
        return data.get("resources", {})
