"""Pydantic models for codespaces and the machines they run on."""

from datetime import datetime
from typing import ClassVar, Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import GitHubList, GitHubResponse
from github_manager.schemas.users import Repository, User
from github_manager.utils.timestamps import parse_github_timestamp


class CodespaceMachine(GitHubResponse):
    """Machine type a codespace runs on."""

    name: str = ""
    display_name: str = ""
    operating_system: str = ""
    storage_in_bytes: int = 0
    memory_in_bytes: int = 0
    cpus: int = 0
    prebuild_availability: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            name=fields.get_str("name"),
            display_name=fields.get_str("display_name"),
            operating_system=fields.get_str("operating_system"),
            storage_in_bytes=fields.get_int("storage_in_bytes"),
            memory_in_bytes=fields.get_int("memory_in_bytes"),
            cpus=fields.get_int("cpus"),
            prebuild_availability=fields.get_str("prebuild_availability"),
        )


class GitStatus(GitHubResponse):
    """State of the git working copy inside a codespace."""

    ahead: int = 0
    behind: int = 0
    has_unpushed_changes: bool = False
    has_uncommitted_changes: bool = False
    ref: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            ahead=fields.get_int("ahead"),
            behind=fields.get_int("behind"),
            has_unpushed_changes=fields.get_bool("has_unpushed_changes"),
            has_uncommitted_changes=fields.get_bool("has_uncommitted_changes"),
            ref=fields.get_str("ref"),
        )


class Codespace(GitHubResponse):
    """Pydantic model for a codespace."""

    id: int = 0
    name: str = ""
    display_name: str = ""
    environment_id: str = ""
    owner: User = User()
    billable_owner: User = User()
    repository: Repository = Repository()
    machine: CodespaceMachine = CodespaceMachine()
    prebuild: bool = False
    devcontainer_path: str = ""
    created_at: str = ""
    updated_at: str = ""
    last_used_at: str = ""
    state: str = ""
    url: str = ""
    git_status: GitStatus = GitStatus()
    location: str = ""
    idle_timeout_minutes: int = 0
    web_url: str = ""
    machines_url: str = ""
    start_url: str = ""
    stop_url: str = ""
    pulls_url: str = ""
    recent_folders: tuple[str, ...] = ()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_int("id"),
            name=fields.get_str("name"),
            display_name=fields.get_str("display_name"),
            environment_id=fields.get_str("environment_id"),
            owner=User.from_json(fields.get_object("owner")),
            billable_owner=User.from_json(fields.get_object("billable_owner")),
            repository=Repository.from_json(fields.get_object("repository")),
            machine=CodespaceMachine.from_json(fields.get_object("machine")),
            prebuild=fields.get_bool("prebuild"),
            devcontainer_path=fields.get_str("devcontainer_path"),
            created_at=fields.get_str("created_at"),
            updated_at=fields.get_str("updated_at"),
            last_used_at=fields.get_str("last_used_at"),
            state=fields.get_str("state"),
            url=fields.get_str("url"),
            git_status=GitStatus.from_json(fields.get_object("git_status")),
            location=fields.get_str("location"),
            idle_timeout_minutes=fields.get_int("idle_timeout_minutes"),
            web_url=fields.get_str("web_url"),
            machines_url=fields.get_str("machines_url"),
            start_url=fields.get_str("start_url"),
            stop_url=fields.get_str("stop_url"),
            pulls_url=fields.get_str("pulls_url"),
            recent_folders=tuple(fields.get_strings("recent_folders")),
        )


class CodespacesList(GitHubList[Codespace]):
    """A page of codespaces."""

    items_key: ClassVar[str] = "codespaces"

    @classmethod
    def _item_from_json(cls, fields: JsonObject) -> Codespace:
        return Codespace.from_json(fields)

    @property
    def codespaces(self) -> tuple[Codespace, ...]:
        """The codespaces on this page."""
        return self.items


class CodespaceExportDetails(GitHubResponse):
    """State of the export of a codespace's unpushed changes to a branch."""

    state: str = ""
    completed_at: str = ""
    branch: str = ""
    sha: str = ""
    id: str = ""
    export_url: str = ""
    html_url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            state=fields.get_str("state"),
            completed_at=fields.get_str("completed_at"),
            branch=fields.get_str("branch"),
            sha=fields.get_str("sha"),
            id=fields.get_str("id"),
            export_url=fields.get_str("export_url"),
            html_url=fields.get_str("html_url"),
        )

    @property
    def completed_at_datetime(self) -> datetime | None:
        """completed_at parsed as a datetime, None while the export is running."""
        return parse_github_timestamp(self.completed_at)


class DevContainer(GitHubResponse):
    """A devcontainer.json configuration found in a repository."""

    path: str = ""
    name: str = ""
    display_name: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(path=fields.get_str("path"), name=fields.get_str("name"), display_name=fields.get_str("display_name"))


class DevContainersList(GitHubList[DevContainer]):
    """The devcontainer configurations of a repository."""

    items_key: ClassVar[str] = "devcontainers"

    @classmethod
    def _item_from_json(cls, fields: JsonObject) -> DevContainer:
        return DevContainer.from_json(fields)

    @property
    def devcontainers(self) -> tuple[DevContainer, ...]:
        """The configurations on this page."""
        return self.items


class CodespaceDefaults(GitHubResponse):
    """Location and configuration a new codespace would get."""

    location: str = ""
    devcontainer_path: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(location=fields.get_str("location"), devcontainer_path=fields.get_str("devcontainer_path"))


class CodespaceDefaultAttributes(GitHubResponse):
    """Default attributes of a codespace created in a repository, with who would be billed."""

    billable_owner: User = User()
    defaults: CodespaceDefaults = CodespaceDefaults()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            billable_owner=User.from_json(fields.get_object("billable_owner")),
            defaults=CodespaceDefaults.from_json(fields.get_object("defaults")),
        )
