"""Unit tests for the GitHubManager base class."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from githubkit.exception import GitHubException, RequestFailed
from pytest import MonkeyPatch

from github_manager.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_manager.github.exceptions import GitHubRequestError
from github_manager.github.manager import GitHubManager
from github_manager.github.transport import GitHubTransport
from github_manager.managers.branches import GitHubBranchesManager
from github_manager.managers.notifications import GitHubNotificationsManager
from github_manager.mapping.results import FailureReason


def make_response(status_code: int = 200, text: str = "") -> MagicMock:
    """Build a stand-in for a githubkit response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


def make_manager(*responses: object) -> GitHubManager:
    """Build a manager whose client answers with the given responses or raises the given errors."""
    client = MagicMock()
    client.request.side_effect = list(responses)
    return GitHubManager(GitHubTransport(client))


def test_mutation_against_missing_resource_returns_failure() -> None:
    """Test that a 404 on a mutation yields a falsy result and keeps the error retrievable."""
    manager = make_manager(RequestFailed(make_response(404, '{"message": "Not Found"}'))).derive(GitHubNotificationsManager)

    result = manager.mark_thread_as_read("12345")

    assert not result
    assert result.success is False
    assert result.reason is FailureReason.REQUEST_FAILED
    assert result.status_code == 404
    assert result.error_body == '{"message": "Not Found"}'
    assert manager.last_status_code == 404
    assert manager.last_error_body == '{"message": "Not Found"}'
    assert manager.json_error_body()["message"] == "Not Found"


def test_mutation_with_unexpected_status_returns_failure() -> None:
    """Test that a success status other than the expected one is reported."""
    manager = make_manager(make_response(200, "{}")).derive(GitHubNotificationsManager)

    result = manager.delete_thread_subscription("12345")

    assert not result
    assert result.reason is FailureReason.UNEXPECTED_STATUS
    assert result.status_code == 200


def test_mutation_with_network_failure_returns_failure() -> None:
    """Test that a failure without a response is reported as a transport error."""
    manager = make_manager(GitHubException("timed out")).derive(GitHubNotificationsManager)

    result = manager.mark_thread_as_read("12345")

    assert not result
    assert result.reason is FailureReason.TRANSPORT_ERROR
    assert result.status_code is None


def test_mutation_with_expected_status_succeeds() -> None:
    """Test that the expected status yields a truthy result."""
    manager = make_manager(make_response(205, "")).derive(GitHubNotificationsManager)

    result = manager.mark_thread_as_read("12345")

    assert result
    assert result.status_code == 205
    assert result.reason is None


def test_derive_shares_the_transport() -> None:
    """Test that derived managers reuse the transport and its side channel."""
    manager = make_manager(RequestFailed(make_response(404, '{"message": "Branch not found"}')))
    branches = manager.derive(GitHubBranchesManager)

    assert branches.transport is manager.transport
    with pytest.raises(GitHubRequestError):
        branches.get_branch("octocat/Hello-World", "missing")
    assert manager.last_error_body == '{"message": "Branch not found"}'


def test_create_reads_token_from_environment(monkeypatch: MonkeyPatch) -> None:
    """Test that create falls back to GITHUB_PAT_TOKEN and the other settings."""
    monkeypatch.setenv("GITHUB_PAT_TOKEN", "ghp_env_token")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("DEFAULT_ERROR_MESSAGE", "Request to GitHub failed")
    get_client = MagicMock()
    monkeypatch.setattr("github_manager.github.manager.get_github_pat_client", get_client)

    manager = GitHubBranchesManager.create(request_timeout=5.0)

    assert isinstance(manager, GitHubBranchesManager)
    get_client.assert_called_once_with("ghp_env_token", "https://ghe.example.com/api/v3", 5.0)
    assert manager.transport.client is get_client.return_value
    assert manager.transport.default_error_message == "Request to GitHub failed"


def test_create_prefers_explicit_arguments(monkeypatch: MonkeyPatch) -> None:
    """Test that explicit arguments win over the environment."""
    monkeypatch.setenv("GITHUB_PAT_TOKEN", "ghp_env_token")
    get_client = MagicMock()
    monkeypatch.setattr("github_manager.github.manager.get_github_pat_client", get_client)

    GitHubManager.create(access_token="ghp_explicit", github_api_url="https://api.example.com")

    assert get_client.call_args.args[:2] == ("ghp_explicit", "https://api.example.com")


def test_create_without_token_raises(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Test that a missing token is reported as a configuration error."""
    monkeypatch.delenv("GITHUB_PAT_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError):
        GitHubManager.create()


def test_failed_mutation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a failed mutation is logged at error level with the operation name."""
    manager = make_manager(RequestFailed(make_response(404, '{"message": "Not Found"}'))).derive(GitHubNotificationsManager)

    with caplog.at_level(logging.ERROR):
        manager.mark_thread_as_read("12345")

    messages = [str(record.msg) for record in caplog.records if record.levelno == logging.ERROR]
    assert any("GitHub operation failed" in message and "mark_thread_as_read" in message for message in messages)
