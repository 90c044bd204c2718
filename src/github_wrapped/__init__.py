"""GitHub Wrapped - a GitHub user's year in review.

Fetches public activity (profile, repositories, contribution calendar,
pull requests and issues) and reduces it to shareable statistics:
totals, per-week/month/weekday breakdowns, peak markers, a language
ranking and achievement badges.

Example usage:
    ```python
    from github_wrapped import GitHubWrapped

    async with GitHubWrapped(token="ghp_xxx") as client:
        stats = await client.wrap("octocat")
        print(stats.to_json_dict()["mostActiveDay"])
    ```

The aggregation itself is pure and can be used on its own:
    ```python
    from github_wrapped import aggregate

    stats = aggregate(profile, repositories, days, pull_request_count=3, issue_count=1)
    ```
"""

__version__ = "0.1.0"

from github_wrapped.analysis import aggregate, aggregate_bundle, build_remarks
from github_wrapped.config import Config
from github_wrapped.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    GitHubGraphQLError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubWrappedError,
    RateLimitExceededError,
    UserNotFoundError,
)
from github_wrapped.models import (
    ActivityBundle,
    ContributionDay,
    LanguageCount,
    RepositorySummary,
    Statistics,
    UserProfile,
)
from github_wrapped.sdk import GitHubWrapped

__all__ = [
    # Main SDK class
    "GitHubWrapped",
    # Aggregation
    "aggregate",
    "aggregate_bundle",
    "build_remarks",
    # Configuration
    "Config",
    # Exceptions
    "GitHubWrappedError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "GitHubGraphQLError",
    "RateLimitExceededError",
    "UserNotFoundError",
    "AuthenticationError",
    # Models
    "UserProfile",
    "RepositorySummary",
    "ContributionDay",
    "ActivityBundle",
    "LanguageCount",
    "Statistics",
]
