"""Achievement badges awarded on the wrap card.

Rules are evaluated in a fixed order and each contributes at most one
badge:

1. top language (lookup table with a generic fallback)
2. commit volume tier
3. collaboration (pull request) tier
4. recognition (star) tier
5. polyglot

The concatenated list is cut to ``MAX_BADGES``; later rules lose first.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from github_wrapped.models.statistics import LanguageCount

MAX_BADGES = 3
POLYGLOT_THRESHOLD = 5


@dataclass(frozen=True)
class Tier:
    """A badge unlocked once a value reaches ``threshold``."""

    threshold: int
    template: str


LANGUAGE_BADGES: dict[str, str] = {
    "JavaScript": "⚡ JavaScript Ninja - Async await master",
    "TypeScript": "🔷 TypeScript Wizard - Type-safe champion",
    "Python": "🐍 Python Charmer - Indentation enthusiast",
    "Java": "☕ Java Juggernaut - Enterprise architect",
    "Go": "🚀 Gopher Guardian - Concurrent code crusader",
    "Rust": "🦀 Rustacean - Fearless memory guardian",
    "C++": "⚙️ C++ Commander - Performance perfectionist",
    "C": "🔧 C Veteran - Close to the metal",
    "Ruby": "💎 Ruby Jeweler - Developer happiness advocate",
    "PHP": "🐘 PHP Artisan - Backbone of the web",
    "Swift": "🍎 Swift Crafter - Apple ecosystem ace",
    "Kotlin": "🎯 Kotlin Crafter - Null-safety ninja",
}
FALLBACK_LANGUAGE_BADGE = "{language} Developer - Code creator"

# Highest threshold first; the first tier reached wins.
COMMIT_TIERS: list[Tier] = [
    Tier(500, "🔥 Commit Machine - 500+ commits in {year}"),
    Tier(250, "💪 Code Warrior - 250+ commits in {year}"),
    Tier(100, "⭐ Century Club - 100+ commits in {year}"),
    Tier(50, "🌱 Rising Coder - 50+ commits in {year}"),
]
PULL_REQUEST_TIERS: list[Tier] = [
    Tier(50, "🤝 Collaboration King - 50+ pull requests"),
    Tier(20, "👥 Team Player - 20+ pull requests"),
]
STAR_TIERS: list[Tier] = [
    Tier(100, "🌟 Star Collector - 100+ stars earned"),
    Tier(50, "✨ Rising Star - 50+ stars earned"),
]
POLYGLOT_BADGE = "🌍 Polyglot Programmer - 5+ languages"


def language_badge(language: str) -> str:
    """Badge text for a top language."""
    template = LANGUAGE_BADGES.get(language, FALLBACK_LANGUAGE_BADGE)
    return template.format(language=language)


def tier_badge(value: int, tiers: Sequence[Tier], **fields) -> str | None:
    """Badge for the highest tier ``value`` reaches, or None."""
    for tier in tiers:
        if value >= tier.threshold:
            return tier.template.format(**fields)
    return None


def classify_badges(
    languages: Sequence[LanguageCount],
    total_commits: int,
    total_prs: int,
    total_stars: int,
    year: int,
    limit: int = MAX_BADGES,
) -> list[str]:
    """Evaluate every badge rule in order and keep the first ``limit``.

    Args:
        languages: Ranked language list (most common first)
        total_commits: Commits in the observation window
        total_prs: Pull requests opened
        total_stars: Stars on non-fork repositories
        year: Year quoted in the commit badge wording
        limit: Maximum badges returned

    Returns:
        Badge strings in rule order
    """
    candidates = [
        language_badge(languages[0].name) if languages else None,
        tier_badge(total_commits, COMMIT_TIERS, year=year),
        tier_badge(total_prs, PULL_REQUEST_TIERS),
        tier_badge(total_stars, STAR_TIERS),
        POLYGLOT_BADGE if len(languages) >= POLYGLOT_THRESHOLD else None,
    ]
    return [badge for badge in candidates if badge is not None][:limit]
