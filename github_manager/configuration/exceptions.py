"""Contains exceptions raised when resolving application configuration."""


class GitHubAuthenticationConfigurationUndefinedError(Exception):
    """Raised when the GitHub authentication configuration is undefined."""

    def __init__(self, env_name: str = "GITHUB_PAT_TOKEN") -> None:
        """Initializes the exception with the environment variable that was expected to hold the token."""
        super().__init__(f"No GitHub access token was provided and {env_name} is not set.")
        self.env_name = env_name
