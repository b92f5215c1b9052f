# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from github_manager.utils.constants import DEFAULT_GITHUB_API_URL


def get_github_pat_client(
    github_pat_token: str | None,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    timeout: float | None = None,
) -> GitHub[TokenAuthStrategy]:
    """Returns an authenticated GitHub client using GitHub PAT credentials."""
    if not github_pat_token:
        raise RuntimeError("GitHub PAT authentication requires github_pat_token in config.")
    # Disable HTTP caching to always get fresh data, and leave retrying to the caller
    return GitHub(
        auth=TokenAuthStrategy(github_pat_token),
        base_url=github_api_url,
        timeout=timeout,
        http_cache=False,
        auto_retry=False,
    )
