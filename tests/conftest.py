"""Pytest configuration and fixtures."""

from datetime import date, timedelta

import pytest

from github_wrapped.config import Config, set_config
from github_wrapped.models.contribution import ContributionDay
from github_wrapped.models.repository import RepositorySummary
from github_wrapped.models.user import UserProfile
from github_wrapped.utils.rate_limiter import reset_rate_limiter


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    reset_rate_limiter()
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration with a dummy token."""
    config = Config(
        github_token="test_token",
        github_api_url="https://api.github.com",
        github_graphql_url="https://api.github.com/graphql",
    )
    set_config(config)
    return config


@pytest.fixture
def profile():
    return UserProfile(login="octocat", name="The Octocat", followers=42)


def make_repo(name, language=None, stars=0, forks=0, is_fork=False, owner="octocat"):
    """Build a repository summary with only the fields aggregation reads."""
    return RepositorySummary(
        name=name,
        owner=owner,
        primary_language=language,
        stars=stars,
        forks=forks,
        is_fork=is_fork,
    )


def make_days(start, counts):
    """Consecutive contribution days from ``start`` with the given counts."""
    return [
        ContributionDay.from_count(start + timedelta(days=offset), count)
        for offset, count in enumerate(counts)
    ]


@pytest.fixture
def year_of_zeros():
    """365 empty days starting on Sunday 2024-12-29."""
    return make_days(date(2024, 12, 29), [0] * 365)
