"""Pydantic models for GitHub users, teams, repositories and reviewers."""

from enum import Enum
from typing import Annotated, Any, Literal, Self

from pydantic import Field

from github_manager.mapping.fields import JsonObject, as_json_object
from github_manager.schemas.base import BaseResponseDetails, GitHubResponse


class User(GitHubResponse):
    """Pydantic model for a GitHub user or organization account."""

    login: str = ""
    id: int = 0
    node_id: str = ""
    avatar_url: str = ""
    gravatar_id: str = ""
    url: str = ""
    html_url: str = ""
    followers_url: str = ""
    following_url: str = ""
    gists_url: str = ""
    starred_url: str = ""
    subscriptions_url: str = ""
    organizations_url: str = ""
    repos_url: str = ""
    events_url: str = ""
    received_events_url: str = ""
    type: str = ""
    site_admin: bool = False

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            login=fields.get_str("login"),
            id=fields.get_int("id"),
            node_id=fields.get_str("node_id"),
            avatar_url=fields.get_str("avatar_url"),
            gravatar_id=fields.get_str("gravatar_id"),
            url=fields.get_str("url"),
            html_url=fields.get_str("html_url"),
            followers_url=fields.get_str("followers_url"),
            following_url=fields.get_str("following_url"),
            gists_url=fields.get_str("gists_url"),
            starred_url=fields.get_str("starred_url"),
            subscriptions_url=fields.get_str("subscriptions_url"),
            organizations_url=fields.get_str("organizations_url"),
            repos_url=fields.get_str("repos_url"),
            events_url=fields.get_str("events_url"),
            received_events_url=fields.get_str("received_events_url"),
            type=fields.get_str("type"),
            site_admin=fields.get_bool("site_admin"),
        )


class Team(BaseResponseDetails):
    """Pydantic model for a GitHub team."""

    node_id: str = ""
    html_url: str = ""
    slug: str = ""
    description: str = ""
    privacy: str = ""
    permission: str = ""
    members_url: str = ""
    repositories_url: str = ""
    parent: "Team | None" = None

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        parent = fields.get_optional_object("parent")
        return cls(
            **cls._base_details(fields),
            node_id=fields.get_str("node_id"),
            html_url=fields.get_str("html_url"),
            slug=fields.get_str("slug"),
            description=fields.get_str("description"),
            privacy=fields.get_str("privacy"),
            permission=fields.get_str("permission"),
            members_url=fields.get_str("members_url"),
            repositories_url=fields.get_str("repositories_url"),
            parent=cls.from_json(parent) if parent is not None else None,
        )


class Repository(BaseResponseDetails):
    """Pydantic model for the repository summary GitHub embeds in other resources."""

    node_id: str = ""
    full_name: str = ""
    owner: User = User()
    private: bool = False
    html_url: str = ""
    description: str = ""
    fork: bool = False

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            **cls._base_details(fields),
            node_id=fields.get_str("node_id"),
            full_name=fields.get_str("full_name"),
            owner=User.from_json(fields.get_object("owner")),
            private=fields.get_bool("private"),
            html_url=fields.get_str("html_url"),
            description=fields.get_str("description"),
            fork=fields.get_bool("fork"),
        )

    @property
    def owner_login(self) -> str:
        """Login of the account owning the repository."""
        return self.owner.login


class ReviewerType(str, Enum):
    """Enum for the kinds of account that can review a deployment."""

    USER = "User"
    TEAM = "Team"


class UserReviewer(GitHubResponse):
    """A deployment reviewer that is a user."""

    type: Literal["User"] = "User"
    reviewer: User


class TeamReviewer(GitHubResponse):
    """A deployment reviewer that is a team."""

    type: Literal["Team"] = "Team"
    reviewer: Team


Reviewer = Annotated[UserReviewer | TeamReviewer, Field(discriminator="type")]


def reviewer_from_json(data: JsonObject | dict[str, Any]) -> UserReviewer | TeamReviewer:
    """Map a reviewer, choosing the payload shape from its type (User when absent)."""
    fields = as_json_object(data)
    reviewer_type = fields.get_enum("type", ReviewerType, ReviewerType.USER)
    payload = fields.get_object("reviewer")
    match reviewer_type:
        case ReviewerType.USER:
            return UserReviewer(reviewer=User.from_json(payload))
        case ReviewerType.TEAM:
            return TeamReviewer(reviewer=Team.from_json(payload))
