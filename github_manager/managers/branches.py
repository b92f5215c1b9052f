"""Manager for the branches of a repository."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.schemas.branches import Branch, BranchCommit, ForkBranch, ShortBranch
from github_manager.schemas.users import Repository
from github_manager.utils.github import resolve_identifier


class GitHubBranchesManager(GitHubManager):
    """Lists, renames, merges and syncs branches."""

    def _branch_path(self, repo: Repository | str, branch: Branch | ShortBranch | str) -> str:
        return f"{self._repository_path(repo)}/branches/{resolve_identifier(branch, 'name')}"

    def list_branches(
        self,
        repo: Repository | str,
        *,
        protected: bool | None = None,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[ShortBranch] | list[Any] | str:
        """List the branches of a repository."""
        params = self._omit_null_parameters(protected=protected, per_page=per_page, page=page)
        path = f"{self._repository_path(repo)}/branches"
        return self._fetch_list("GET", path, ShortBranch.from_json, return_format, params=params)

    def get_branch(
        self,
        repo: Repository | str,
        branch: Branch | ShortBranch | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Branch | dict[str, Any] | str:
        """Get a branch with its tip commit."""
        return self._fetch("GET", self._branch_path(repo, branch), Branch.from_json, return_format)

    def rename_branch(
        self,
        repo: Repository | str,
        branch: Branch | ShortBranch | str,
        new_name: str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Branch | dict[str, Any] | str:
        """Rename a branch."""
        path = f"{self._branch_path(repo, branch)}/rename"
        return self._fetch("POST", path, Branch.from_json, return_format, body={"new_name": new_name})

    def sync_fork_branch(
        self,
        repo: Repository | str,
        branch: Branch | ShortBranch | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ForkBranch | dict[str, Any] | str:
        """Bring a branch of a fork up to date with the upstream repository."""
        path = f"{self._repository_path(repo)}/merge-upstream"
        body = {"branch": resolve_identifier(branch, "name")}
        return self._fetch("POST", path, ForkBranch.from_json, return_format, body=body)

    def merge_branch(
        self,
        repo: Repository | str,
        base: Branch | ShortBranch | str,
        head: Branch | ShortBranch | str,
        commit_message: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> BranchCommit | dict[str, Any] | str:
        """Merge head into base and return the merge commit."""
        body = self._omit_null_parameters(
            base=resolve_identifier(base, "name"),
            head=resolve_identifier(head, "name"),
            commit_message=commit_message,
        )
        path = f"{self._repository_path(repo)}/merges"
        return self._fetch("POST", path, BranchCommit.from_json, return_format, body=body)
