"""JSON output writer for wrap statistics."""

import json
from datetime import date
from pathlib import Path
from typing import Any, Optional

from github_wrapped.models.statistics import Statistics


def default_filename(username: str, today: date) -> str:
    """``<login>-wrap-<year>-<month>-<day>.json``, without zero padding."""
    return f"{username or 'github'}-wrap-{today.year}-{today.month}-{today.day}.json"


def build_report(stats: Statistics) -> dict[str, Any]:
    """Flat JSON-ready statistics dict."""
    return stats.to_json_dict()


def write_json_report(
    stats: Statistics,
    output_path: Optional[Path] = None,
    username: Optional[str] = None,
    today: Optional[date] = None,
) -> Path:
    """Write wrap statistics to a JSON file.

    Args:
        stats: Statistics to export
        output_path: Output file path (optional)
        username: Username for default filename (defaults to the profile login)
        today: Date used in the default filename (defaults to today)

    Returns:
        Path to written file
    """
    if output_path is None:
        username = username or stats.user.login
        output_path = Path("output") / default_filename(username, today or date.today())

    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(build_report(stats), f, indent=2, ensure_ascii=False)

    return output_path
