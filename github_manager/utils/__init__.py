"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_GITHUB_API_URL,
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_VERSION,
)
from .timestamps import parse_github_timestamp

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_GITHUB_API_URL",
    "GITHUB_ACCEPT_HEADER",
    "GITHUB_API_VERSION",
    "parse_github_timestamp",
]
