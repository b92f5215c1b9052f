"""Base class shared by every GitHub resource manager."""

from typing import Any, Callable, Self, TypeVar

import structlog

from github_manager.configuration.config import Settings
from github_manager.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_manager.mapping.fields import JsonObject
from github_manager.mapping.formats import ReturnFormat, materialize, materialize_list, materialize_message
from github_manager.mapping.results import ActionResult, FailureReason
from github_manager.schemas.users import Repository
from github_manager.utils.github import split_repository

from .client import get_github_pat_client
from .exceptions import GitHubRequestError
from .transport import GitHubTransport

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound="GitHubManager")
T = TypeVar("T")


class GitHubManager:
    """Owns the transport and turns endpoint calls into entities, raw JSON or text.

    Managers for different resource groups can share one transport through
    derive(), which keeps the credentials and the last-response side channel
    in one place.
    """

    def __init__(self, transport: GitHubTransport) -> None:
        """Initialize the manager with an already-configured transport."""
        self.transport = transport

    @classmethod
    def create(
        cls,
        access_token: str | None = None,
        github_api_url: str | None = None,
        request_timeout: float | None = None,
        default_error_message: str | None = None,
    ) -> Self:
        """Create a manager, reading any value not given from the environment.

        Args:
            access_token: Personal access token (defaults to GITHUB_PAT_TOKEN)
            github_api_url: GitHub API URL (defaults to GITHUB_API_URL)
            request_timeout: Per-request timeout in seconds (defaults to REQUEST_TIMEOUT)
            default_error_message: Message used when a failed response has none

        Returns:
            A manager whose transport is authenticated with the token
        """
        settings = Settings()
        token = access_token or settings.GITHUB_PAT_TOKEN
        if not token:
            raise GitHubAuthenticationConfigurationUndefinedError()
        client = get_github_pat_client(
            token,
            github_api_url or settings.GITHUB_API_URL,
            request_timeout if request_timeout is not None else settings.REQUEST_TIMEOUT,
        )
        return cls(GitHubTransport(client, default_error_message or settings.DEFAULT_ERROR_MESSAGE))

    def derive(self, manager_type: type[M]) -> M:
        """Build a manager of another resource group sharing this manager's transport."""
        return manager_type(self.transport)

    @property
    def last_status_code(self) -> int | None:
        """HTTP status of the last request made through the shared transport."""
        return self.transport.last_status_code

    @property
    def last_error_body(self) -> str:
        """Body of the last failed response."""
        return self.transport.last_error_body

    def json_error_body(self) -> dict[str, Any]:
        """Last error body parsed as JSON."""
        return self.transport.json_error_body()

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @staticmethod
    def _repository_path(repo: Repository | str) -> str:
        owner, repository = split_repository(repo)
        return f"/repos/{owner}/{repository}"

    def _fetch(
        self,
        method: str,
        path: str,
        mapper: Callable[[JsonObject], T],
        return_format: ReturnFormat,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request answered with a JSON object and materialize it."""
        text = self.transport.send_request(method, path, params=params, body=body)
        return materialize(text, return_format, mapper)

    def _fetch_list(
        self,
        method: str,
        path: str,
        mapper: Callable[[JsonObject], T],
        return_format: ReturnFormat,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request answered with a JSON array and materialize every element."""
        text = self.transport.send_request(method, path, params=params, body=body)
        return materialize_list(text, return_format, mapper)

    def _fetch_message(
        self,
        method: str,
        path: str,
        return_format: ReturnFormat,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request answered with a status message."""
        text = self.transport.send_request(method, path, params=params, body=body)
        return materialize_message(text, return_format)

    def _fetch_redirect(self, method: str, path: str) -> str:
        """Send a request answered with a redirect and return the URL it points to."""
        return self.transport.send_redirect_request(method, path)

    def _perform_action(
        self,
        operation: str,
        method: str,
        path: str,
        expected_status: int,
        body: dict[str, Any] | None = None,
    ) -> ActionResult:
        """Send a state-changing request whose outcome is told by its status code alone.

        Failures are logged and returned rather than raised.
        """
        try:
            self.transport.send_request(method, path, body=body)
        except GitHubRequestError as exc:
            reason = FailureReason.TRANSPORT_ERROR if exc.status_code is None else FailureReason.REQUEST_FAILED
            logger.error(
                "GitHub operation failed",
                operation=operation,
                reason=reason.value,
                status_code=exc.status_code,
                message=exc.message,
            )
            return ActionResult.failed(reason, exc.status_code, exc.error_body)

        status_code = self.transport.last_status_code
        if status_code != expected_status:
            logger.error(
                "GitHub operation returned an unexpected status",
                operation=operation,
                expected_status=expected_status,
                status_code=status_code,
            )
            return ActionResult.failed(FailureReason.UNEXPECTED_STATUS, status_code, "")
        logger.info("GitHub operation succeeded", operation=operation, status_code=status_code)
        return ActionResult.succeeded(expected_status)
