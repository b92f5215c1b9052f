"""Helpers for the ISO-8601 timestamps GitHub sends as strings."""

from datetime import datetime


def parse_github_timestamp(value: str) -> datetime | None:
    """Parse a GitHub timestamp such as '2024-01-31T12:00:00Z'; empty or malformed values yield None."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
