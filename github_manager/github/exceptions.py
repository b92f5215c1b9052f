"""Contains exceptions raised when a request to the GitHub API fails."""


class GitHubRequestError(Exception):
    """Raised when a request to the GitHub API does not complete successfully."""

    def __init__(self, method: str, path: str, status_code: int | None, error_body: str, message: str) -> None:
        """Initializes the exception with the request that failed and what GitHub answered."""
        status = status_code if status_code is not None else "no response"
        super().__init__(f"{method} {path} failed ({status}): {message}")
        self.method = method
        self.path = path
        self.status_code = status_code
        self.error_body = error_body
        self.message = message
