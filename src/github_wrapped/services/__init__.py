"""Services for GitHub data collection."""

from github_wrapped.services.github_graphql_client import GitHubGraphQLClient
from github_wrapped.services.github_rest_client import GitHubRestClient
from github_wrapped.services.http_client import GitHubHTTPClient, raise_for_status

__all__ = [
    "GitHubHTTPClient",
    "GitHubRestClient",
    "GitHubGraphQLClient",
    "raise_for_status",
]
