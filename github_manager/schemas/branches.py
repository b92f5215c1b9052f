"""Pydantic models for branches, branch commits and fork synchronization."""

from enum import Enum
from typing import Any, Self

from pydantic import Field

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import BaseResponseDetails, GitHubResponse
from github_manager.schemas.users import User


class GitActor(GitHubResponse):
    """Author or committer recorded in a git commit."""

    name: str = ""
    email: str = ""
    date: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(name=fields.get_str("name"), email=fields.get_str("email"), date=fields.get_str("date"))


class CommitTree(GitHubResponse):
    """Reference to a git tree or parent commit."""

    sha: str = ""
    url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(sha=fields.get_str("sha"), url=fields.get_str("url"))


class CommitDetails(GitHubResponse):
    """The git-level data of a commit."""

    author: GitActor = GitActor()
    committer: GitActor = GitActor()
    message: str = ""
    tree: CommitTree = CommitTree()
    url: str = ""
    comment_count: int = 0

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            author=GitActor.from_json(fields.get_object("author")),
            committer=GitActor.from_json(fields.get_object("committer")),
            message=fields.get_str("message"),
            tree=CommitTree.from_json(fields.get_object("tree")),
            url=fields.get_str("url"),
            comment_count=fields.get_int("comment_count"),
        )


class CommitStats(GitHubResponse):
    """Line counts of a commit."""

    additions: int = 0
    deletions: int = 0
    total: int = 0

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            additions=fields.get_int("additions"),
            deletions=fields.get_int("deletions"),
            total=fields.get_int("total"),
        )


class CommitFile(GitHubResponse):
    """A file changed by a commit."""

    sha: str = ""
    filename: str = ""
    status: str = ""
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    blob_url: str = ""
    raw_url: str = ""
    contents_url: str = ""
    patch: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            sha=fields.get_str("sha"),
            filename=fields.get_str("filename"),
            status=fields.get_str("status"),
            additions=fields.get_int("additions"),
            deletions=fields.get_int("deletions"),
            changes=fields.get_int("changes"),
            blob_url=fields.get_str("blob_url"),
            raw_url=fields.get_str("raw_url"),
            contents_url=fields.get_str("contents_url"),
            patch=fields.get_str("patch"),
        )


class BranchCommit(GitHubResponse):
    """Pydantic model for the commit at the tip of a branch or produced by a merge."""

    sha: str = ""
    node_id: str = ""
    commit: CommitDetails = CommitDetails()
    url: str = ""
    html_url: str = ""
    comments_url: str = ""
    author: User = User()
    committer: User = User()
    parents: tuple[CommitTree, ...] = ()
    stats: CommitStats = CommitStats()
    files: tuple[CommitFile, ...] = ()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            sha=fields.get_str("sha"),
            node_id=fields.get_str("node_id"),
            commit=CommitDetails.from_json(fields.get_object("commit")),
            url=fields.get_str("url"),
            html_url=fields.get_str("html_url"),
            comments_url=fields.get_str("comments_url"),
            author=User.from_json(fields.get_object("author")),
            committer=User.from_json(fields.get_object("committer")),
            parents=tuple(CommitTree.from_json(item) for item in fields.get_objects("parents")),
            stats=CommitStats.from_json(fields.get_object("stats")),
            files=tuple(CommitFile.from_json(item) for item in fields.get_objects("files")),
        )


class BranchLinks(GitHubResponse):
    """The _links object of a branch."""

    self_link: str = Field(default="", alias="self")
    html: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(self_link=fields.get_str("self"), html=fields.get_str("html"))


class Branch(BaseResponseDetails):
    """Pydantic model for a branch with its tip commit and protection summary."""

    commit: BranchCommit = BranchCommit()
    links: BranchLinks = Field(default=BranchLinks(), alias="_links")
    protected: bool = False
    protection: dict[str, Any] = {}
    protection_url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            **cls._base_details(fields),
            commit=BranchCommit.from_json(fields.get_object("commit")),
            links=BranchLinks.from_json(fields.get_object("_links")),
            protected=fields.get_bool("protected"),
            protection=fields.get_object("protection").raw,
            protection_url=fields.get_str("protection_url"),
        )


class ShortBranch(GitHubResponse):
    """Pydantic model for a branch as listed by the branches endpoint."""

    name: str = ""
    commit: CommitTree = CommitTree()
    protected: bool = False

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            name=fields.get_str("name"),
            commit=CommitTree.from_json(fields.get_object("commit")),
            protected=fields.get_bool("protected"),
        )


class MergeType(str, Enum):
    """Enum for the ways GitHub can bring a fork branch up to date."""

    MERGE = "merge"
    FAST_FORWARD = "fast-forward"
    NONE = "none"


class ForkBranch(GitHubResponse):
    """Result of syncing a fork branch with its upstream repository."""

    message: str = ""
    merge_type: MergeType = MergeType.NONE
    base_branch: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            message=fields.get_str("message"),
            merge_type=fields.get_enum("merge_type", MergeType, MergeType.NONE),
            base_branch=fields.get_str("base_branch"),
        )
