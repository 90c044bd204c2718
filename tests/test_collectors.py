"""Tests for collector services."""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import make_repo

from github_wrapped.exceptions import (
    GitHubAPIError,
    GitHubGraphQLError,
    GitHubNotFoundError,
    UserNotFoundError,
)
from github_wrapped.services.activity_collector import (
    ActivityCollector,
    commit_date,
    select_recent_repos,
)
from github_wrapped.services.contribution_collector import ContributionCollector
from github_wrapped.services.profile_collector import ProfileCollector


def commit_on(day: str) -> dict:
    return {"sha": day, "commit": {"author": {"date": f"{day}T12:00:00Z"}}}


def graphql_user(**overrides) -> dict:
    user = {
        "login": "octocat",
        "name": "The Octocat",
        "avatarUrl": "https://avatars.githubusercontent.com/u/583231",
        "followers": {"totalCount": 10},
        "following": {"totalCount": 1},
        "repositories": {
            "totalCount": 2,
            "nodes": [
                {
                    "name": "hello",
                    "owner": {"login": "octocat"},
                    "primaryLanguage": {"name": "Go"},
                    "stargazerCount": 5,
                    "forkCount": 1,
                    "isFork": False,
                },
                None,
            ],
        },
        "contributionsCollection": {
            "totalCommitContributions": 42,
            "totalIssueContributions": 3,
            "totalPullRequestContributions": 8,
            "contributionCalendar": {
                "totalContributions": 5,
                "weeks": [
                    {
                        "contributionDays": [
                            {"date": "2025-01-01", "contributionCount": 2},
                            {"date": "2025-01-02", "contributionCount": 3},
                        ]
                    }
                ],
            },
        },
    }
    user.update(overrides)
    return user


class TestSelectRecentRepos:
    """Tests for select_recent_repos."""

    def test_most_recent_first(self):
        old = make_repo("old")
        old.updated_at = datetime(2023, 1, 1, tzinfo=timezone.utc)
        new = make_repo("new")
        new.updated_at = datetime(2025, 1, 1, tzinfo=timezone.utc)
        never = make_repo("never")

        assert [r.name for r in select_recent_repos([old, never, new], 2)] == ["new", "old"]

    def test_commit_date(self):
        assert commit_date(commit_on("2025-03-04")) == date(2025, 3, 4)
        assert commit_date({"commit": {}}) is None


class TestProfileCollector:
    """Tests for ProfileCollector."""

    @pytest.mark.asyncio
    async def test_collect_profile(self):
        rest = MagicMock()
        rest.get_user = AsyncMock(return_value={"login": "octocat", "followers": 3})

        profile = await ProfileCollector(rest).collect_profile("octocat")

        assert profile.login == "octocat"
        assert profile.followers == 3

    @pytest.mark.asyncio
    async def test_missing_user(self):
        rest = MagicMock()
        rest.get_user = AsyncMock(side_effect=GitHubNotFoundError("Resource not found"))

        with pytest.raises(UserNotFoundError) as exc_info:
            await ProfileCollector(rest).collect_profile("ghost")

        assert exc_info.value.username == "ghost"

    @pytest.mark.asyncio
    async def test_collect_repos(self):
        rest = MagicMock()
        rest.get_user_repos = AsyncMock(
            return_value=[
                {"name": "a", "owner": {"login": "octocat"}, "language": "Go", "fork": False},
                {"name": "b", "owner": {"login": "octocat"}, "language": None, "fork": True},
            ]
        )

        repos = await ProfileCollector(rest).collect_repos("octocat", max_pages=2)

        assert [r.full_name for r in repos] == ["octocat/a", "octocat/b"]
        assert repos[1].is_fork is True
        rest.get_user_repos.assert_awaited_once_with("octocat", max_pages=2)


class TestActivityCollector:
    """Tests for ActivityCollector."""

    @pytest.mark.asyncio
    async def test_daily_commits_tallied(self):
        rest = MagicMock()
        rest.get_repo_commits = AsyncMock(
            side_effect=[
                [commit_on("2025-01-02"), commit_on("2025-01-02")],
                [commit_on("2025-01-02"), commit_on("2024-12-31")],
            ]
        )
        repos = [make_repo("a"), make_repo("b")]

        counts, failed = await ActivityCollector(rest).collect_daily_commits(
            "octocat", repos, date(2025, 1, 1), date(2025, 1, 31)
        )

        # Commits outside the window are ignored
        assert counts == {date(2025, 1, 2): 3}
        assert failed == []
        kwargs = rest.get_repo_commits.await_args_list[0].kwargs
        assert kwargs["author"] == "octocat"
        assert kwargs["since"] == "2025-01-01T00:00:00Z"

    @pytest.mark.asyncio
    async def test_failed_repository_is_skipped(self):
        """A repository whose listing fails is reported, others still count."""

        async def commits(owner, repo, **kwargs):
            if repo == "empty":
                raise GitHubAPIError("API error: Git Repository is empty.", status_code=409)
            return [commit_on("2025-01-05")]

        rest = MagicMock()
        rest.get_repo_commits = AsyncMock(side_effect=commits)
        repos = [make_repo("a"), make_repo("empty"), make_repo("c")]

        counts, failed = await ActivityCollector(rest).collect_daily_commits(
            "octocat", repos, date(2025, 1, 1), date(2025, 1, 31)
        )

        assert counts == {date(2025, 1, 5): 2}
        assert failed == ["octocat/empty"]

    @pytest.mark.asyncio
    async def test_event_counts(self):
        rest = MagicMock()
        rest.get_user_events = AsyncMock(
            return_value=[
                {"id": "1", "type": "PullRequestEvent"},
                {"id": "2", "type": "PullRequestEvent"},
                {"id": "3", "type": "IssuesEvent"},
                {"id": "4", "type": "PushEvent"},
                {"id": "5", "type": "WatchEvent"},
            ]
        )

        assert await ActivityCollector(rest).collect_event_counts("octocat") == (2, 1)

    @pytest.mark.asyncio
    async def test_event_feed_unavailable(self):
        rest = MagicMock()
        rest.get_user_events = AsyncMock(side_effect=GitHubAPIError("Server error: 503", 503))

        assert await ActivityCollector(rest).collect_event_counts("octocat") == (0, 0)


class TestContributionCollector:
    """Tests for ContributionCollector."""

    @pytest.mark.asyncio
    async def test_collect_bundle(self):
        graphql = MagicMock()
        graphql.get_wrap_data = AsyncMock(return_value=graphql_user())

        bundle = await ContributionCollector(graphql).collect_bundle(
            "octocat", date(2025, 1, 1), date(2025, 12, 31)
        )

        assert bundle.source == "graphql"
        assert bundle.profile.login == "octocat"
        assert bundle.profile.followers == 10
        assert [r.name for r in bundle.repositories] == ["hello"]
        assert [d.count for d in bundle.contribution_days] == [2, 3]
        assert bundle.commit_count == 42
        assert bundle.pull_request_count == 8
        assert bundle.issue_count == 3
        assert bundle.window_end == date(2025, 12, 31)

    @pytest.mark.asyncio
    async def test_null_user(self):
        graphql = MagicMock()
        graphql.get_wrap_data = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundError):
            await ContributionCollector(graphql).collect_bundle(
                "ghost", date(2025, 1, 1), date(2025, 12, 31)
            )

    @pytest.mark.asyncio
    async def test_not_found_error(self):
        graphql = MagicMock()
        graphql.get_wrap_data = AsyncMock(
            side_effect=GitHubGraphQLError(
                "GraphQL errors: Could not resolve to a User",
                errors=[{"type": "NOT_FOUND"}],
            )
        )

        with pytest.raises(UserNotFoundError):
            await ContributionCollector(graphql).collect_bundle(
                "ghost", date(2025, 1, 1), date(2025, 12, 31)
            )

    @pytest.mark.asyncio
    async def test_other_graphql_errors_propagate(self):
        graphql = MagicMock()
        graphql.get_wrap_data = AsyncMock(
            side_effect=GitHubGraphQLError("GraphQL errors: boom", errors=[{"type": "INTERNAL"}])
        )

        with pytest.raises(GitHubGraphQLError):
            await ContributionCollector(graphql).collect_bundle(
                "octocat", date(2025, 1, 1), date(2025, 12, 31)
            )
