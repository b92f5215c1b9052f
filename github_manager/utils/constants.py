"""Shared constants used across the application."""

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Base URL of the public GitHub REST API."""

GITHUB_ACCEPT_HEADER = "application/vnd.github+json"
"""Media type sent with every request."""

GITHUB_API_VERSION = "2022-11-28"
"""REST API version pinned through the X-GitHub-Api-Version header."""

DEFAULT_ERROR_MESSAGE = "GitHub API request failed"
"""Message used when a failed response carries no message of its own."""
