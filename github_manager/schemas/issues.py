"""Pydantic models for issues and their labels."""

from typing import Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import GitHubResponse
from github_manager.schemas.users import User


class Label(GitHubResponse):
    """Pydantic model for an issue or pull request label."""

    id: int = 0
    node_id: str = ""
    url: str = ""
    name: str = ""
    description: str = ""
    color: str = ""
    default: bool = False

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_int("id"),
            node_id=fields.get_str("node_id"),
            url=fields.get_str("url"),
            name=fields.get_str("name"),
            description=fields.get_str("description"),
            color=fields.get_str("color"),
            default=fields.get_bool("default"),
        )


class Issue(GitHubResponse):
    """Pydantic model for a GitHub issue."""

    id: int = 0
    node_id: str = ""
    url: str = ""
    repository_url: str = ""
    html_url: str = ""
    number: int = 0
    state: str = ""
    title: str = ""
    body: str = ""
    user: User = User()
    labels: tuple[Label, ...] = ()
    assignee: User | None = None
    assignees: tuple[User, ...] = ()
    locked: bool = False
    comments: int = 0
    created_at: str = ""
    updated_at: str = ""
    closed_at: str = ""
    author_association: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        assignee = fields.get_optional_object("assignee")
        return cls(
            id=fields.get_int("id"),
            node_id=fields.get_str("node_id"),
            url=fields.get_str("url"),
            repository_url=fields.get_str("repository_url"),
            html_url=fields.get_str("html_url"),
            number=fields.get_int("number"),
            state=fields.get_str("state"),
            title=fields.get_str("title"),
            body=fields.get_str("body"),
            user=User.from_json(fields.get_object("user")),
            labels=tuple(Label.from_json(item) for item in fields.get_objects("labels")),
            assignee=User.from_json(assignee) if assignee is not None else None,
            assignees=tuple(User.from_json(item) for item in fields.get_objects("assignees")),
            locked=fields.get_bool("locked"),
            comments=fields.get_int("comments"),
            created_at=fields.get_str("created_at"),
            updated_at=fields.get_str("updated_at"),
            closed_at=fields.get_str("closed_at"),
            author_association=fields.get_str("author_association"),
        )

    @property
    def assignee_logins(self) -> list[str]:
        """Logins of everyone assigned to the issue."""
        return [user.login for user in self.assignees]
