"""Manager for codespaces."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.mapping.results import ActionResult
from github_manager.schemas.codespaces import (
    Codespace,
    CodespaceDefaultAttributes,
    CodespaceExportDetails,
    CodespacesList,
    DevContainersList,
)
from github_manager.schemas.pulls import PullRequest
from github_manager.schemas.users import Repository
from github_manager.utils.github import resolve_identifier


class GitHubCodespacesManager(GitHubManager):
    """Creates, lists, updates and exports codespaces of a repository or user, and starts, stops or deletes them."""

    @staticmethod
    def _codespace_path(codespace: Codespace | str) -> str:
        return f"/user/codespaces/{resolve_identifier(codespace, 'name')}"

    def _creation_body(
        self,
        location: str | None,
        client_ip: str | None,
        machine: str | None,
        devcontainer_path: str | None,
        multi_repo_permissions_opt_out: bool | None,
        working_directory: str | None,
        idle_timeout_minutes: int | None,
        display_name: str | None,
        retention_period_minutes: int | None,
        **extra: Any,
    ) -> dict[str, Any]:
        return self._omit_null_parameters(
            **extra,
            location=location,
            client_ip=client_ip,
            machine=machine,
            devcontainer_path=devcontainer_path,
            multi_repo_permissions_opt_out=multi_repo_permissions_opt_out,
            working_directory=working_directory,
            idle_timeout_minutes=idle_timeout_minutes,
            display_name=display_name,
            retention_period_minutes=retention_period_minutes,
        )

    def list_repository_codespaces(
        self,
        repo: Repository | str,
        *,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CodespacesList | dict[str, Any] | str:
        """List the authenticated user's codespaces in a repository."""
        params = self._omit_null_parameters(per_page=per_page, page=page)
        path = f"{self._repository_path(repo)}/codespaces"
        return self._fetch("GET", path, CodespacesList.from_json, return_format, params=params)

    def create_repository_codespace(
        self,
        repo: Repository | str,
        *,
        ref: str | None = None,
        location: str | None = None,
        client_ip: str | None = None,
        machine: str | None = None,
        devcontainer_path: str | None = None,
        multi_repo_permissions_opt_out: bool | None = None,
        working_directory: str | None = None,
        idle_timeout_minutes: int | None = None,
        display_name: str | None = None,
        retention_period_minutes: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Create a codespace owned by the authenticated user in a repository."""
        body = self._creation_body(
            location,
            client_ip,
            machine,
            devcontainer_path,
            multi_repo_permissions_opt_out,
            working_directory,
            idle_timeout_minutes,
            display_name,
            retention_period_minutes,
            ref=ref,
        )
        path = f"{self._repository_path(repo)}/codespaces"
        return self._fetch("POST", path, Codespace.from_json, return_format, body=body)

    def list_repository_devcontainers(
        self,
        repo: Repository | str,
        *,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> DevContainersList | dict[str, Any] | str:
        """List the devcontainer.json configurations a codespace of the repository can use."""
        params = self._omit_null_parameters(per_page=per_page, page=page)
        path = f"{self._repository_path(repo)}/codespaces/devcontainers"
        return self._fetch("GET", path, DevContainersList.from_json, return_format, params=params)

    def get_default_codespace_attributes(
        self,
        repo: Repository | str,
        *,
        ref: str | None = None,
        client_ip: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CodespaceDefaultAttributes | dict[str, Any] | str:
        """Get the location and devcontainer a new codespace of the repository would default to."""
        params = self._omit_null_parameters(ref=ref, client_ip=client_ip)
        path = f"{self._repository_path(repo)}/codespaces/new"
        return self._fetch("GET", path, CodespaceDefaultAttributes.from_json, return_format, params=params)

    def create_codespace_from_pull_request(
        self,
        repo: Repository | str,
        pull: PullRequest | int | str,
        *,
        location: str | None = None,
        client_ip: str | None = None,
        machine: str | None = None,
        devcontainer_path: str | None = None,
        multi_repo_permissions_opt_out: bool | None = None,
        working_directory: str | None = None,
        idle_timeout_minutes: int | None = None,
        display_name: str | None = None,
        retention_period_minutes: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Create a codespace for the head branch of a pull request."""
        body = self._creation_body(
            location,
            client_ip,
            machine,
            devcontainer_path,
            multi_repo_permissions_opt_out,
            working_directory,
            idle_timeout_minutes,
            display_name,
            retention_period_minutes,
        )
        path = f"{self._repository_path(repo)}/pulls/{resolve_identifier(pull, 'number')}/codespaces"
        return self._fetch("POST", path, Codespace.from_json, return_format, body=body)

    def list_user_codespaces(
        self,
        *,
        per_page: int | None = None,
        page: int | None = None,
        repository_id: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CodespacesList | dict[str, Any] | str:
        """List the authenticated user's codespaces, optionally for one repository id."""
        params = self._omit_null_parameters(per_page=per_page, page=page, repository_id=repository_id)
        return self._fetch("GET", "/user/codespaces", CodespacesList.from_json, return_format, params=params)

    def create_user_codespace(
        self,
        repository: Repository | int,
        *,
        ref: str | None = None,
        location: str | None = None,
        client_ip: str | None = None,
        machine: str | None = None,
        devcontainer_path: str | None = None,
        multi_repo_permissions_opt_out: bool | None = None,
        working_directory: str | None = None,
        idle_timeout_minutes: int | None = None,
        display_name: str | None = None,
        retention_period_minutes: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Create a codespace for the authenticated user in the repository with the given id."""
        body = self._creation_body(
            location,
            client_ip,
            machine,
            devcontainer_path,
            multi_repo_permissions_opt_out,
            working_directory,
            idle_timeout_minutes,
            display_name,
            retention_period_minutes,
            repository_id=int(resolve_identifier(repository)),
            ref=ref,
        )
        return self._fetch("POST", "/user/codespaces", Codespace.from_json, return_format, body=body)

    def get_user_codespace(
        self,
        codespace: Codespace | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Get a codespace by name."""
        return self._fetch("GET", self._codespace_path(codespace), Codespace.from_json, return_format)

    def update_user_codespace(
        self,
        codespace: Codespace | str,
        *,
        machine: str | None = None,
        display_name: str | None = None,
        recent_folders: list[str] | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Change the machine type, display name or recent folders of a codespace."""
        body = self._omit_null_parameters(machine=machine, display_name=display_name, recent_folders=recent_folders)
        return self._fetch("PATCH", self._codespace_path(codespace), Codespace.from_json, return_format, body=body)

    def delete_user_codespace(self, codespace: Codespace | str) -> ActionResult:
        """Delete a codespace."""
        return self._perform_action("delete_user_codespace", "DELETE", self._codespace_path(codespace), 202)

    def export_user_codespace(
        self,
        codespace: Codespace | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CodespaceExportDetails | dict[str, Any] | str:
        """Start exporting the unpushed changes of a codespace to a branch."""
        path = f"{self._codespace_path(codespace)}/exports"
        return self._fetch("POST", path, CodespaceExportDetails.from_json, return_format)

    def get_user_codespace_export_details(
        self,
        codespace: Codespace | str,
        export_id: CodespaceExportDetails | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CodespaceExportDetails | dict[str, Any] | str:
        """Get the state of an export of a codespace; export_id may be "latest"."""
        path = f"{self._codespace_path(codespace)}/exports/{resolve_identifier(export_id)}"
        return self._fetch("GET", path, CodespaceExportDetails.from_json, return_format)

    def start_user_codespace(
        self,
        codespace: Codespace | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Start a codespace."""
        path = f"{self._codespace_path(codespace)}/start"
        return self._fetch("POST", path, Codespace.from_json, return_format)

    def stop_user_codespace(
        self,
        codespace: Codespace | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Codespace | dict[str, Any] | str:
        """Stop a codespace."""
        path = f"{self._codespace_path(codespace)}/stop"
        return self._fetch("POST", path, Codespace.from_json, return_format)
