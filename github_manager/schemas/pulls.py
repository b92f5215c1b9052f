"""Pydantic models for pull requests and their requested reviewers."""

from typing import Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import GitHubResponse
from github_manager.schemas.issues import Label
from github_manager.schemas.users import Repository, Team, User


class PullRequestBranch(GitHubResponse):
    """Head or base branch of a pull request."""

    label: str = ""
    ref: str = ""
    sha: str = ""
    user: User = User()
    repo: Repository = Repository()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            label=fields.get_str("label"),
            ref=fields.get_str("ref"),
            sha=fields.get_str("sha"),
            user=User.from_json(fields.get_object("user")),
            repo=Repository.from_json(fields.get_object("repo")),
        )


class PullRequest(GitHubResponse):
    """Pydantic model for a GitHub pull request."""

    id: int = 0
    node_id: str = ""
    url: str = ""
    html_url: str = ""
    number: int = 0
    state: str = ""
    locked: bool = False
    title: str = ""
    body: str = ""
    user: User = User()
    labels: tuple[Label, ...] = ()
    assignees: tuple[User, ...] = ()
    requested_reviewers: tuple[User, ...] = ()
    requested_teams: tuple[Team, ...] = ()
    head: PullRequestBranch = PullRequestBranch()
    base: PullRequestBranch = PullRequestBranch()
    draft: bool = False
    merged: bool = False
    created_at: str = ""
    updated_at: str = ""
    closed_at: str = ""
    merged_at: str = ""
    merge_commit_sha: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_int("id"),
            node_id=fields.get_str("node_id"),
            url=fields.get_str("url"),
            html_url=fields.get_str("html_url"),
            number=fields.get_int("number"),
            state=fields.get_str("state"),
            locked=fields.get_bool("locked"),
            title=fields.get_str("title"),
            body=fields.get_str("body"),
            user=User.from_json(fields.get_object("user")),
            labels=tuple(Label.from_json(item) for item in fields.get_objects("labels")),
            assignees=tuple(User.from_json(item) for item in fields.get_objects("assignees")),
            requested_reviewers=tuple(User.from_json(item) for item in fields.get_objects("requested_reviewers")),
            requested_teams=tuple(Team.from_json(item) for item in fields.get_objects("requested_teams")),
            head=PullRequestBranch.from_json(fields.get_object("head")),
            base=PullRequestBranch.from_json(fields.get_object("base")),
            draft=fields.get_bool("draft"),
            merged=fields.get_bool("merged"),
            created_at=fields.get_str("created_at"),
            updated_at=fields.get_str("updated_at"),
            closed_at=fields.get_str("closed_at"),
            merged_at=fields.get_str("merged_at"),
            merge_commit_sha=fields.get_str("merge_commit_sha"),
        )


class RequestedReviewers(GitHubResponse):
    """Users and teams whose review has been requested on a pull request."""

    users: tuple[User, ...] = ()
    teams: tuple[Team, ...] = ()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            users=tuple(User.from_json(item) for item in fields.get_objects("users")),
            teams=tuple(Team.from_json(item) for item in fields.get_objects("teams")),
        )
