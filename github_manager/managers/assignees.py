"""Manager for the assignees of a repository's issues."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.mapping.results import ActionResult
from github_manager.schemas.issues import Issue
from github_manager.schemas.users import Repository, User
from github_manager.utils.github import resolve_identifier


class GitHubAssigneesManager(GitHubManager):
    """Lists assignable users and adds or removes the assignees of issues."""

    def _issue_path(self, repo: Repository | str, issue: Issue | int | str) -> str:
        return f"{self._repository_path(repo)}/issues/{resolve_identifier(issue, 'number')}"

    def list_assignees(
        self,
        repo: Repository | str,
        *,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[User] | list[Any] | str:
        """List the users issues of a repository can be assigned to."""
        params = self._omit_null_parameters(per_page=per_page, page=page)
        path = f"{self._repository_path(repo)}/assignees"
        return self._fetch_list("GET", path, User.from_json, return_format, params=params)

    def check_user_can_be_assigned(self, repo: Repository | str, assignee: User | str) -> ActionResult:
        """Check whether a user can be assigned to issues of a repository."""
        path = f"{self._repository_path(repo)}/assignees/{resolve_identifier(assignee, 'login')}"
        return self._perform_action("check_user_can_be_assigned", "GET", path, 204)

    def add_issue_assignees(
        self,
        repo: Repository | str,
        issue: Issue | int | str,
        assignees: list[User | str],
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Issue | dict[str, Any] | str:
        """Add up to 10 assignees to an issue; people already assigned are kept."""
        body = {"assignees": [resolve_identifier(assignee, "login") for assignee in assignees]}
        path = f"{self._issue_path(repo, issue)}/assignees"
        return self._fetch("POST", path, Issue.from_json, return_format, body=body)

    def remove_issue_assignees(
        self,
        repo: Repository | str,
        issue: Issue | int | str,
        assignees: list[User | str],
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Issue | dict[str, Any] | str:
        """Remove assignees from an issue."""
        body = {"assignees": [resolve_identifier(assignee, "login") for assignee in assignees]}
        path = f"{self._issue_path(repo, issue)}/assignees"
        return self._fetch("DELETE", path, Issue.from_json, return_format, body=body)

    def check_user_can_be_assigned_to_issue(
        self,
        repo: Repository | str,
        issue: Issue | int | str,
        assignee: User | str,
    ) -> ActionResult:
        """Check whether a user can be assigned to a specific issue."""
        path = f"{self._issue_path(repo, issue)}/assignees/{resolve_identifier(assignee, 'login')}"
        return self._perform_action("check_user_can_be_assigned_to_issue", "GET", path, 204)
