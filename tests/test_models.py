"""Tests for data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from github_wrapped.models.activity import ActivityBundle, EventType, GitHubEvent
from github_wrapped.models.contribution import (
    ContributionCalendar,
    ContributionDay,
    level_for_count,
)
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.statistics import Statistics
from github_wrapped.models.user import UserProfile, parse_datetime


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_from_api(self):
        """Test creating profile from REST API response."""
        api_data = {
            "login": "testuser",
            "name": "Test User",
            "avatar_url": "https://avatars.githubusercontent.com/u/1",
            "bio": "A test user",
            "public_repos": 10,
            "followers": 100,
            "following": 50,
            "created_at": "2020-01-01T00:00:00Z",
        }

        profile = UserProfile.from_api(api_data)

        assert profile.login == "testuser"
        assert profile.name == "Test User"
        assert profile.public_repos == 10
        assert profile.followers == 100
        assert profile.created_at.year == 2020

    def test_from_graphql(self):
        """Test creating profile from GraphQL response."""
        data = {
            "login": "testuser",
            "name": None,
            "avatarUrl": "https://avatars.githubusercontent.com/u/1",
            "followers": {"totalCount": 7},
            "following": {"totalCount": 3},
            "repositories": {"totalCount": 12},
        }

        profile = UserProfile.from_graphql(data)

        assert profile.followers == 7
        assert profile.public_repos == 12
        assert profile.display_name == "testuser"

    def test_parse_datetime(self):
        assert parse_datetime("2024-01-15T10:00:00Z").tzinfo is not None
        assert parse_datetime(None) is None
        assert parse_datetime("not a date") is None


class TestRepositorySummary:
    """Tests for RepositorySummary model."""

    def test_from_api(self):
        api_data = {
            "name": "test-repo",
            "owner": {"login": "testuser"},
            "language": "Python",
            "stargazers_count": 100,
            "forks_count": 20,
            "fork": False,
            "pushed_at": "2024-06-01T00:00:00Z",
        }

        repo = RepositorySummary.from_api(api_data)

        assert repo.full_name == "testuser/test-repo"
        assert repo.primary_language == "Python"
        assert repo.stars == 100
        assert repo.forks == 20
        assert repo.is_fork is False

    def test_from_graphql(self):
        data = {
            "name": "fork-repo",
            "owner": {"login": "testuser"},
            "primaryLanguage": None,
            "stargazerCount": 3,
            "forkCount": 0,
            "isFork": True,
        }

        repo = RepositorySummary.from_graphql(data)

        assert repo.primary_language is None
        assert repo.stars == 3
        assert repo.is_fork is True


class TestContributionDay:
    """Tests for ContributionDay model."""

    @pytest.mark.parametrize(
        "count,level",
        [
            (0, "NONE"),
            (1, "FIRST_QUARTILE"),
            (3, "SECOND_QUARTILE"),
            (6, "THIRD_QUARTILE"),
            (10, "FOURTH_QUARTILE"),
        ],
    )
    def test_level_for_count(self, count, level):
        assert level_for_count(count) == level

    def test_from_graphql(self):
        day = ContributionDay.from_graphql(
            {"date": "2024-03-01", "contributionCount": 4, "contributionLevel": "SECOND_QUARTILE"}
        )

        assert day.date == date(2024, 3, 1)
        assert day.count == 4
        assert day.level == "SECOND_QUARTILE"

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            ContributionDay(date=date(2024, 1, 1), count=-1)


class TestContributionCalendar:
    """Tests for ContributionCalendar model."""

    def test_from_graphql(self):
        data = {
            "totalContributions": 5,
            "weeks": [
                {
                    "contributionDays": [
                        {"date": "2024-01-06", "contributionCount": 2},
                    ]
                },
                {
                    "contributionDays": [
                        {"date": "2024-01-07", "contributionCount": 3},
                        {"date": "2024-01-08", "contributionCount": 0},
                    ]
                },
            ],
        }

        calendar = ContributionCalendar.from_graphql(data)

        assert calendar.total_contributions == 5
        assert [day.count for day in calendar.days] == [2, 3, 0]

    def test_from_daily_counts_fills_gaps(self):
        """Every day in the window is present; weeks break on Sunday."""
        counts = {date(2025, 1, 2): 3, date(2025, 1, 6): 1}

        calendar = ContributionCalendar.from_daily_counts(
            counts, date(2025, 1, 1), date(2025, 1, 7)
        )

        assert len(calendar.days) == 7
        assert [len(week.days) for week in calendar.weeks] == [4, 3]
        assert calendar.weeks[1].days[0].date == date(2025, 1, 5)
        assert calendar.total_contributions == 4
        assert [day.count for day in calendar.days] == [0, 3, 0, 0, 0, 1, 0]


class TestGitHubEvent:
    """Tests for GitHubEvent model."""

    def test_from_api(self):
        api_data = {
            "id": "12345",
            "type": "PullRequestEvent",
            "repo": {"name": "user/repo"},
            "created_at": "2024-01-15T10:00:00Z",
        }

        event = GitHubEvent.from_api(api_data)

        assert event.id == "12345"
        assert event.repo == "user/repo"
        assert event.event_type == EventType.PULL_REQUEST

    def test_unknown_type(self):
        event = GitHubEvent.from_api({"id": 1, "type": "WatchEvent"})
        assert event.event_type == EventType.OTHER


class TestActivityBundle:
    """Tests for ActivityBundle model."""

    def test_partial_when_repositories_failed(self):
        profile = UserProfile(login="octocat")

        assert ActivityBundle(profile=profile).is_partial is False
        assert ActivityBundle(profile=profile, failed_repositories=["o/r"]).is_partial is True


class TestStatistics:
    """Tests for Statistics serialization."""

    def test_json_keys_are_camel_case(self):
        stats = Statistics(
            user=UserProfile(login="octocat"),
            total_prs=3,
            most_active_day_of_week="Friday",
        )

        data = stats.to_json_dict()

        assert data["totalPRs"] == 3
        assert data["mostActiveDayOfWeek"] == "Friday"
        assert data["mostActiveDay"] == "-"
        assert data["peakCommitsInDay"] == 0
        for key in ("weeklyCommits", "dayOfWeekCommits", "dailyCommits", "commits", "badges"):
            assert key in data
        assert "total_prs" not in data

    def test_dates_serialize_as_iso(self):
        stats = Statistics(
            user=UserProfile(login="octocat"),
            daily_commits=[{"date": date(2025, 1, 2), "count": 1}],
        )

        assert stats.to_json_dict()["dailyCommits"] == [{"date": "2025-01-02", "count": 1}]
