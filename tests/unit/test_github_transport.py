"""Unit tests for the GitHubTransport class."""

from unittest.mock import MagicMock

import pytest
from githubkit.exception import GitHubException, RequestFailed

from github_manager.github.exceptions import GitHubRequestError
from github_manager.github.transport import GitHubTransport


def make_response(status_code: int = 200, text: str = "") -> MagicMock:
    """Build a stand-in for a githubkit response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


def test_send_request_returns_text_and_records_status() -> None:
    """Test that a successful request returns the body and remembers the status code."""
    client = MagicMock()
    client.request.return_value = make_response(200, '{"id": 1}')
    transport = GitHubTransport(client)

    assert transport.send_request("GET", "/repos/o/r/actions/runs/1") == '{"id": 1}'
    assert transport.last_status_code == 200
    assert transport.last_error_body == ""


def test_send_request_drops_null_parameters() -> None:
    """Test that None-valued query parameters are not sent."""
    client = MagicMock()
    client.request.return_value = make_response(200, "[]")
    transport = GitHubTransport(client)

    transport.send_request("GET", "/notifications", params={"all": True, "since": None}, body={"read": True})

    args, kwargs = client.request.call_args
    assert args == ("GET", "/notifications")
    assert kwargs["params"] == {"all": True}
    assert kwargs["json"] == {"read": True}
    assert kwargs["headers"]["Accept"] == "application/vnd.github+json"


def test_send_request_sends_no_params_when_all_are_null() -> None:
    """Test that an all-None parameter set results in no query string."""
    client = MagicMock()
    client.request.return_value = make_response(204, "")
    transport = GitHubTransport(client)

    assert transport.send_request("DELETE", "/repos/o/r/actions/runs/1", params={"page": None}) == ""
    assert client.request.call_args.kwargs["params"] is None


def test_request_failed_raises_with_error_body() -> None:
    """Test that an error status raises GitHubRequestError with GitHub's message and body."""
    client = MagicMock()
    client.request.side_effect = RequestFailed(make_response(404, '{"message": "Not Found"}'))
    transport = GitHubTransport(client)

    with pytest.raises(GitHubRequestError) as exc_info:
        transport.send_request("GET", "/repos/o/r/branches/missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Not Found"
    assert exc_info.value.method == "GET"
    assert exc_info.value.path == "/repos/o/r/branches/missing"
    assert transport.last_status_code == 404
    assert transport.last_error_body == '{"message": "Not Found"}'
    assert transport.json_error_body() == {"message": "Not Found"}


def test_request_failed_without_message_uses_default_error_message() -> None:
    """Test that the configured default message is used when GitHub sends none."""
    client = MagicMock()
    client.request.side_effect = RequestFailed(make_response(502, "<html>Bad Gateway</html>"))
    transport = GitHubTransport(client, default_error_message="GitHub is unavailable")

    with pytest.raises(GitHubRequestError) as exc_info:
        transport.send_request("GET", "/notifications")

    assert exc_info.value.message == "GitHub is unavailable"
    assert transport.json_error_body() == {}


def test_network_failure_raises_without_status_code() -> None:
    """Test that failures without a response are reported with no status code."""
    client = MagicMock()
    client.request.side_effect = GitHubException("connection reset by peer")
    transport = GitHubTransport(client)

    with pytest.raises(GitHubRequestError) as exc_info:
        transport.send_request("GET", "/notifications")

    assert exc_info.value.status_code is None
    assert transport.last_status_code is None
    assert "connection reset" in transport.last_error_body


def test_successful_request_clears_previous_error_body() -> None:
    """Test that the error body only describes the most recent request."""
    client = MagicMock()
    client.request.side_effect = [RequestFailed(make_response(404, '{"message": "Not Found"}')), make_response(200, "{}")]
    transport = GitHubTransport(client)

    with pytest.raises(GitHubRequestError):
        transport.send_request("GET", "/user/codespaces/missing")
    transport.send_request("GET", "/user/codespaces")

    assert transport.last_status_code == 200
    assert transport.last_error_body == ""


def test_send_redirect_request_reads_location_from_redirect_history() -> None:
    """Test that the redirect target is taken from the first redirect response."""
    redirect = MagicMock()
    redirect.headers = {"Location": "https://pipelines.actions.githubusercontent.com/logs.zip"}
    response = make_response(200, "PK")
    response.raw_response.history = [redirect]
    client = MagicMock()
    client.request.return_value = response
    transport = GitHubTransport(client)

    location = transport.send_redirect_request("GET", "/repos/o/r/actions/runs/1/logs")

    assert location == "https://pipelines.actions.githubusercontent.com/logs.zip"
    assert client.request.call_args.args == ("GET", "/repos/o/r/actions/runs/1/logs")
    assert transport.last_status_code == 200


def test_send_redirect_request_without_history_uses_response_headers() -> None:
    """Test that an unfollowed redirect answers with its own Location header."""
    response = make_response(302, "")
    response.raw_response.history = []
    response.headers = {"Location": "https://example.com/logs.zip"}
    client = MagicMock()
    client.request.return_value = response
    transport = GitHubTransport(client)

    assert transport.send_redirect_request("GET", "/repos/o/r/actions/runs/1/logs") == "https://example.com/logs.zip"


def test_send_redirect_request_failure_raises() -> None:
    """Test that a failed log download raises like any other read."""
    client = MagicMock()
    client.request.side_effect = RequestFailed(make_response(410, '{"message": "Gone"}'))
    transport = GitHubTransport(client)

    with pytest.raises(GitHubRequestError) as exc_info:
        transport.send_redirect_request("GET", "/repos/o/r/actions/runs/1/logs")
    assert exc_info.value.status_code == 410
