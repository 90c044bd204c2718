"""User profile model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class UserProfile(BaseModel):
    """Public GitHub profile fields shown on the wrap card."""

    login: str
    name: str | None = None
    avatar_url: str = ""
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        """Name to show, falling back to the login."""
        return self.name or self.login

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from GitHub REST API response."""
        return cls(
            login=data.get("login", ""),
            name=data.get("name"),
            avatar_url=data.get("avatar_url") or "",
            bio=data.get("bio"),
            company=data.get("company"),
            location=data.get("location"),
            public_repos=data.get("public_repos") or 0,
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            created_at=parse_datetime(data.get("created_at")),
        )

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from GitHub GraphQL API response."""
        return cls(
            login=data.get("login", ""),
            name=data.get("name"),
            avatar_url=data.get("avatarUrl") or "",
            bio=data.get("bio"),
            company=data.get("company"),
            location=data.get("location"),
            public_repos=(data.get("repositories") or {}).get("totalCount", 0),
            followers=(data.get("followers") or {}).get("totalCount", 0),
            following=(data.get("following") or {}).get("totalCount", 0),
            created_at=parse_datetime(data.get("createdAt")),
        )


def parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        # Handle ISO format with or without Z suffix
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
