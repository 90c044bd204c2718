"""Tests for JSON output."""

import json
from datetime import date

from github_wrapped.models.statistics import Statistics
from github_wrapped.models.user import UserProfile
from github_wrapped.output.console import format_stat_value
from github_wrapped.output.json_writer import default_filename, write_json_report


def make_stats():
    return Statistics(
        user=UserProfile(login="octocat"),
        total_stars=12,
        badges=["🌱 Rising Coder - 50+ commits in 2025"],
    )


class TestDefaultFilename:
    def test_unpadded_date(self):
        assert default_filename("octocat", date(2025, 3, 7)) == "octocat-wrap-2025-3-7.json"

    def test_missing_login(self):
        assert default_filename("", date(2025, 12, 25)) == "github-wrap-2025-12-25.json"


class TestWriteJsonReport:
    """Tests for write_json_report."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "nested" / "stats.json"

        written = write_json_report(make_stats(), path)

        assert written == path
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["totalStars"] == 12
        assert data["badges"] == ["🌱 Rising Coder - 50+ commits in 2025"]

    def test_default_path(self, tmp_path, monkeypatch):
        """Without a path the file lands under output/ named after the user."""
        monkeypatch.chdir(tmp_path)

        written = write_json_report(make_stats(), today=date(2025, 1, 9))

        assert written.as_posix() == "output/octocat-wrap-2025-1-9.json"
        assert (tmp_path / written).exists()


def test_format_stat_value():
    assert format_stat_value(12345) == "12,345"
    assert format_stat_value("Mar") == "Mar"
    assert format_stat_value(None) == "-"
