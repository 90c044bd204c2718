"""Repository data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from github_wrapped.models.user import parse_datetime


class RepositorySummary(BaseModel):
    """The handful of repository fields aggregation needs.

    Forks are carried through so callers can count them, but they never
    contribute to language, star or fork totals.
    """

    name: str
    owner: str = ""
    primary_language: str | None = None
    stars: int = 0
    forks: int = 0
    is_fork: bool = False
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}" if self.owner else self.name

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RepositorySummary":
        """Create from GitHub REST API response."""
        return cls(
            name=data.get("name", ""),
            owner=(data.get("owner") or {}).get("login", ""),
            primary_language=data.get("language"),
            stars=data.get("stargazers_count") or 0,
            forks=data.get("forks_count") or 0,
            is_fork=bool(data.get("fork", False)),
            updated_at=parse_datetime(data.get("pushed_at") or data.get("updated_at")),
        )

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "RepositorySummary":
        """Create from GraphQL repository node."""
        primary_lang = data.get("primaryLanguage") or {}
        return cls(
            name=data.get("name", ""),
            owner=(data.get("owner") or {}).get("login", ""),
            primary_language=primary_lang.get("name"),
            stars=data.get("stargazerCount") or 0,
            forks=data.get("forkCount") or 0,
            is_fork=bool(data.get("isFork", False)),
            updated_at=parse_datetime(data.get("pushedAt") or data.get("updatedAt")),
        )
