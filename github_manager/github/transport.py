"""Sends requests to the GitHub REST API through an authenticated githubkit client."""

import json
from typing import Any

import structlog
from githubkit import GitHub, Response
from githubkit.exception import GitHubException, RequestFailed

from github_manager.utils.constants import DEFAULT_ERROR_MESSAGE, GITHUB_ACCEPT_HEADER, GITHUB_API_VERSION

from .exceptions import GitHubRequestError

logger = structlog.get_logger(__name__)


class GitHubTransport:
    """Performs one synchronous request per call and remembers the outcome of the last one.

    The last status code and error body stay available until the next request,
    so callers of operations that report failure without raising can still
    inspect what GitHub answered.
    """

    def __init__(self, client: GitHub[Any], default_error_message: str | None = None) -> None:
        """Initialize the transport with an already-authenticated client."""
        self.client = client
        self.default_error_message = default_error_message or DEFAULT_ERROR_MESSAGE
        self._last_status_code: int | None = None
        self._last_error_body = ""

    @property
    def last_status_code(self) -> int | None:
        """HTTP status of the last request, or None when no response was received."""
        return self._last_status_code

    @property
    def last_error_body(self) -> str:
        """Body of the last failed response; empty after a successful request."""
        return self._last_error_body

    def json_error_body(self) -> dict[str, Any]:
        """Return the last error body parsed as a JSON object, or an empty dict."""
        if not self._last_error_body:
            return {}
        try:
            decoded = json.loads(self._last_error_body)
        except json.JSONDecodeError:
            return {}
        return decoded if isinstance(decoded, dict) else {}

    def _error_message(self) -> str:
        message = self.json_error_body().get("message")
        return message if isinstance(message, str) and message else self.default_error_message

    def send_request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> str:
        """Send a request and return the response body as text ('' when GitHub sends none)."""
        return self._send(method, path, params, body).text

    def send_redirect_request(self, method: str, path: str) -> str:
        """Send a request GitHub answers with a redirect and return the redirect target.

        The client follows redirects, so the target is read from the first
        response in the redirect history.
        """
        response = self._send(method, path, None, None)
        history = response.raw_response.history
        headers = history[0].headers if history else response.headers
        return headers.get("Location", "")

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
        body: dict[str, Any] | None,
    ) -> Response[Any]:
        params = {k: v for k, v in (params or {}).items() if v is not None} or None
        logger.debug("Sending GitHub API request", method=method, path=path, params=params)
        try:
            response = self.client.request(
                method,
                path,
                params=params,
                json=body,
                headers={"Accept": GITHUB_ACCEPT_HEADER, "X-GitHub-Api-Version": GITHUB_API_VERSION},
            )
        except RequestFailed as exc:
            self._last_status_code = exc.response.status_code
            self._last_error_body = exc.response.text
            message = self._error_message()
            logger.error(
                "GitHub API request failed",
                method=method,
                path=path,
                status_code=self._last_status_code,
                message=message,
            )
            raise GitHubRequestError(method, path, self._last_status_code, self._last_error_body, message) from exc
        except GitHubException as exc:
            self._last_status_code = None
            self._last_error_body = str(exc)
            logger.error("GitHub API request could not be completed", method=method, path=path, error=str(exc))
            raise GitHubRequestError(method, path, None, self._last_error_body, self.default_error_message) from exc

        self._last_status_code = response.status_code
        self._last_error_body = ""
        logger.debug("Received GitHub API response", method=method, path=path, status_code=response.status_code)
        return response
