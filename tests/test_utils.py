"""Tests for utility modules."""

import asyncio

import pytest

from github_wrapped.utils.concurrency import gather_best_effort
from github_wrapped.utils.pagination import get_next_page_url, parse_link_header


class TestParseLinkHeader:
    """Tests for Link header parsing."""

    def test_parse_single_link(self):
        """Test parsing a single link."""
        header = '<https://api.github.com/users?page=2>; rel="next"'
        links = parse_link_header(header)

        assert links["next"] == "https://api.github.com/users?page=2"

    def test_parse_multiple_links(self):
        """Test parsing multiple links."""
        header = (
            '<https://api.github.com/users?page=2>; rel="next", '
            '<https://api.github.com/users?page=5>; rel="last", '
            '<https://api.github.com/users?page=1>; rel="first"'
        )
        links = parse_link_header(header)

        assert links["next"] == "https://api.github.com/users?page=2"
        assert links["last"] == "https://api.github.com/users?page=5"
        assert links["first"] == "https://api.github.com/users?page=1"

    def test_parse_empty_header(self):
        """Test parsing empty header."""
        assert parse_link_header(None) == {}
        assert parse_link_header("") == {}

    def test_get_next_page_url(self):
        header = '<https://api.github.com/users?page=2>; rel="next"'
        assert get_next_page_url(header) == "https://api.github.com/users?page=2"

    def test_get_next_page_url_missing(self):
        """Test when no next page exists."""
        header = '<https://api.github.com/users?page=1>; rel="first"'
        assert get_next_page_url(header) is None


class TestGatherBestEffort:
    """Tests for gather_best_effort."""

    @pytest.mark.asyncio
    async def test_all_succeed(self):
        async def fetch(key):
            return key * 2

        results, failed = await gather_best_effort([1, 2, 3], fetch, default=int)

        assert results == {1: 2, 2: 4, 3: 6}
        assert failed == []

    @pytest.mark.asyncio
    async def test_failures_use_default(self):
        """One failing fetch does not abort the others."""

        async def fetch(key):
            if key == "b":
                raise RuntimeError("boom")
            return [key]

        results, failed = await gather_best_effort(["a", "b", "c"], fetch, default=list)

        assert results == {"a": ["a"], "b": [], "c": ["c"]}
        assert list(results) == ["a", "b", "c"]
        assert failed == ["b"]

    @pytest.mark.asyncio
    async def test_batches_limit_concurrency(self):
        in_flight = 0
        peak = 0

        async def fetch(key):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0)
            in_flight -= 1
            return key

        results, _ = await gather_best_effort(list(range(25)), fetch, default=int, batch_size=10)

        assert len(results) == 25
        assert peak <= 10

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        async def fetch(key):
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await gather_best_effort([1], fetch, default=int)

    @pytest.mark.asyncio
    async def test_empty(self):
        async def fetch(key):
            return key

        assert await gather_best_effort([], fetch, default=int) == ({}, [])
