"""Contains unit tests for the utils.github module."""

import pytest

from github_manager.schemas.issues import Issue
from github_manager.schemas.users import Repository, User
from github_manager.schemas.workflow_runs import WorkflowRun
from github_manager.utils.github import resolve_identifier, split_repository


def test_split_repository_missing() -> None:
    """Test that ValueError is raised if repo is None."""
    with pytest.raises(ValueError, match="A repository is required"):
        split_repository(None)


@pytest.mark.parametrize(
    "malformed_repo",
    [
        pytest.param("", id="empty string"),
        pytest.param("/", id="only a slash"),
        pytest.param("octocat-HelloWorld", id="no slash"),
        pytest.param("owner/repo/extra", id="too many parts"),
        pytest.param(Repository(name="Hello-World"), id="entity without owner or full name"),
    ],
)
def test_split_repository_various_malformed(malformed_repo: str | Repository) -> None:
    """Test that ValueError is raised if repo is malformed (various cases)."""
    with pytest.raises(ValueError):
        split_repository(malformed_repo)


@pytest.mark.parametrize(
    "repo_input,expected_owner,expected_repo",
    [
        pytest.param("octocat/Hello-World", "octocat", "Hello-World", id="no slashes"),
        pytest.param("/octocat/Hello-World/", "octocat", "Hello-World", id="both slashes"),
        pytest.param(Repository(name="Hello-World", owner=User(login="octocat")), "octocat", "Hello-World", id="entity"),
        pytest.param(Repository(full_name="octocat/Spoon-Knife"), "octocat", "Spoon-Knife", id="entity with full name only"),
    ],
)
def test_split_repository_valid(repo_input: str | Repository, expected_owner: str, expected_repo: str) -> None:
    """Test that strings and entities are split into owner and repository."""
    owner, repo = split_repository(repo_input)
    assert owner == expected_owner
    assert repo == expected_repo


@pytest.mark.parametrize(
    "value,attribute,expected",
    [
        pytest.param(42, "id", "42", id="integer"),
        pytest.param("ci.yml", "id", "ci.yml", id="string"),
        pytest.param(WorkflowRun(id=30433642), "id", "30433642", id="entity id"),
        pytest.param(User(login="octocat"), "login", "octocat", id="entity login"),
        pytest.param(Issue(number=1347), "number", "1347", id="entity number"),
    ],
)
def test_resolve_identifier(value: object, attribute: str, expected: str) -> None:
    """Test that identifiers come from raw values or from the named entity attribute."""
    assert resolve_identifier(value, attribute) == expected


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(WorkflowRun(), id="entity without id"),
        pytest.param(True, id="boolean"),
        pytest.param("", id="empty string"),
    ],
)
def test_resolve_identifier_rejects_empty_values(value: object) -> None:
    """Test that values that cannot identify a resource are rejected."""
    with pytest.raises(ValueError):
        resolve_identifier(value)
