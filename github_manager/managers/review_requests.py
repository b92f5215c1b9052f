"""Manager for the review requests of pull requests."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.schemas.pulls import PullRequest, RequestedReviewers
from github_manager.schemas.users import Repository, Team, User
from github_manager.utils.github import resolve_identifier


class GitHubReviewRequestsManager(GitHubManager):
    """Requests, lists and withdraws pull request reviews."""

    def _requested_reviewers_path(self, repo: Repository | str, pull: PullRequest | int | str) -> str:
        return f"{self._repository_path(repo)}/pulls/{resolve_identifier(pull, 'number')}/requested_reviewers"

    def _reviewers_body(self, reviewers: list[User | str] | None, team_reviewers: list[Team | str] | None) -> dict[str, Any]:
        return self._omit_null_parameters(
            reviewers=[resolve_identifier(user, "login") for user in reviewers] if reviewers is not None else None,
            team_reviewers=[resolve_identifier(team, "slug") for team in team_reviewers] if team_reviewers is not None else None,
        )

    def get_requested_reviewers(
        self,
        repo: Repository | str,
        pull: PullRequest | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RequestedReviewers | dict[str, Any] | str:
        """Get the users and teams whose review is still requested."""
        return self._fetch("GET", self._requested_reviewers_path(repo, pull), RequestedReviewers.from_json, return_format)

    def request_reviewers(
        self,
        repo: Repository | str,
        pull: PullRequest | int | str,
        reviewers: list[User | str] | None = None,
        team_reviewers: list[Team | str] | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> PullRequest | dict[str, Any] | str:
        """Request reviews from users (by login) and teams (by slug)."""
        body = self._reviewers_body(reviewers, team_reviewers)
        return self._fetch("POST", self._requested_reviewers_path(repo, pull), PullRequest.from_json, return_format, body=body)

    def remove_requested_reviewers(
        self,
        repo: Repository | str,
        pull: PullRequest | int | str,
        reviewers: list[User | str] | None = None,
        team_reviewers: list[Team | str] | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> PullRequest | dict[str, Any] | str:
        """Withdraw review requests."""
        body = self._reviewers_body(reviewers if reviewers is not None else [], team_reviewers)
        return self._fetch("DELETE", self._requested_reviewers_path(repo, pull), PullRequest.from_json, return_format, body=body)
