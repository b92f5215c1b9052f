"""Pydantic models for GitHub Actions workflow runs, their usage and deployment reviews."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import BaseResponseDetails, GitHubList, GitHubResponse
from github_manager.schemas.users import Repository, Reviewer, Team, TeamReviewer, User, UserReviewer, reviewer_from_json
from github_manager.utils.timestamps import parse_github_timestamp


class PullRequestPart(GitHubResponse):
    """Head or base of a pull request attached to a workflow run."""

    sha: str = ""
    ref: str = ""
    repo: BaseResponseDetails = BaseResponseDetails()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            sha=fields.get_str("sha"),
            ref=fields.get_str("ref"),
            repo=BaseResponseDetails.from_json(fields.get_object("repo")),
        )


class WorkflowRunPullRequest(GitHubResponse):
    """Minimal pull request GitHub attaches to a workflow run."""

    id: int = 0
    number: int = 0
    url: str = ""
    head: PullRequestPart = PullRequestPart()
    base: PullRequestPart = PullRequestPart()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_int("id"),
            number=fields.get_int("number"),
            url=fields.get_str("url"),
            head=PullRequestPart.from_json(fields.get_object("head")),
            base=PullRequestPart.from_json(fields.get_object("base")),
        )


class ReferencedWorkflow(GitHubResponse):
    """A reusable workflow referenced by a run."""

    path: str = ""
    sha: str = ""
    ref: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(path=fields.get_str("path"), sha=fields.get_str("sha"), ref=fields.get_str("ref"))


class CommitProfile(GitHubResponse):
    """Name and email of a commit author or committer."""

    name: str = ""
    email: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(name=fields.get_str("name"), email=fields.get_str("email"))


class HeadCommit(GitHubResponse):
    """The commit a workflow run was triggered on."""

    id: str = ""
    tree_id: str = ""
    message: str = ""
    timestamp: str = ""
    author: CommitProfile = CommitProfile()
    committer: CommitProfile = CommitProfile()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_str("id"),
            tree_id=fields.get_str("tree_id"),
            message=fields.get_str("message"),
            timestamp=fields.get_str("timestamp"),
            author=CommitProfile.from_json(fields.get_object("author")),
            committer=CommitProfile.from_json(fields.get_object("committer")),
        )


class WorkflowRun(BaseResponseDetails):
    """Pydantic model for a GitHub Actions workflow run."""

    node_id: str = ""
    check_suite_id: int = 0
    check_suite_node_id: str = ""
    head_branch: str = ""
    head_sha: str = ""
    path: str = ""
    run_number: int = 0
    event: str = ""
    display_title: str = ""
    status: str = ""
    conclusion: str = ""
    workflow_id: int = 0
    html_url: str = ""
    pull_requests: tuple[WorkflowRunPullRequest, ...] = ()
    created_at: str = ""
    updated_at: str = ""
    actor: User = User()
    run_attempt: int = 0
    referenced_workflows: tuple[ReferencedWorkflow, ...] = ()
    run_started_at: str = ""
    triggering_actor: User = User()
    jobs_url: str = ""
    logs_url: str = ""
    check_suite_url: str = ""
    artifacts_url: str = ""
    cancel_url: str = ""
    rerun_url: str = ""
    previous_attempt_url: str = ""
    workflow_url: str = ""
    head_commit: HeadCommit = HeadCommit()
    repository: Repository = Repository()
    head_repository: Repository = Repository()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            **cls._base_details(fields),
            node_id=fields.get_str("node_id"),
            check_suite_id=fields.get_int("check_suite_id"),
            check_suite_node_id=fields.get_str("check_suite_node_id"),
            head_branch=fields.get_str("head_branch"),
            head_sha=fields.get_str("head_sha"),
            path=fields.get_str("path"),
            run_number=fields.get_int("run_number"),
            event=fields.get_str("event"),
            display_title=fields.get_str("display_title"),
            status=fields.get_str("status"),
            conclusion=fields.get_str("conclusion"),
            workflow_id=fields.get_int("workflow_id"),
            html_url=fields.get_str("html_url"),
            pull_requests=tuple(WorkflowRunPullRequest.from_json(item) for item in fields.get_objects("pull_requests")),
            created_at=fields.get_str("created_at"),
            updated_at=fields.get_str("updated_at"),
            actor=User.from_json(fields.get_object("actor")),
            run_attempt=fields.get_int("run_attempt"),
            referenced_workflows=tuple(ReferencedWorkflow.from_json(item) for item in fields.get_objects("referenced_workflows")),
            run_started_at=fields.get_str("run_started_at"),
            triggering_actor=User.from_json(fields.get_object("triggering_actor")),
            jobs_url=fields.get_str("jobs_url"),
            logs_url=fields.get_str("logs_url"),
            check_suite_url=fields.get_str("check_suite_url"),
            artifacts_url=fields.get_str("artifacts_url"),
            cancel_url=fields.get_str("cancel_url"),
            rerun_url=fields.get_str("rerun_url"),
            previous_attempt_url=fields.get_str("previous_attempt_url"),
            workflow_url=fields.get_str("workflow_url"),
            head_commit=HeadCommit.from_json(fields.get_object("head_commit")),
            repository=Repository.from_json(fields.get_object("repository")),
            head_repository=Repository.from_json(fields.get_object("head_repository")),
        )

    @property
    def created_at_datetime(self) -> datetime | None:
        """Creation time of the run, when GitHub reported one."""
        return parse_github_timestamp(self.created_at)


class WorkflowRunsList(GitHubList[WorkflowRun]):
    """A page of workflow runs."""

    items_key: ClassVar[str] = "workflow_runs"

    @classmethod
    def _item_from_json(cls, fields: JsonObject) -> WorkflowRun:
        return WorkflowRun.from_json(fields)

    @property
    def workflow_runs(self) -> tuple[WorkflowRun, ...]:
        """The runs on this page, in the order GitHub returned them."""
        return self.items


class JobRun(GitHubResponse):
    """Billable duration of one job of a run."""

    job_id: int = 0
    duration_ms: int = 0

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(job_id=fields.get_int("job_id"), duration_ms=fields.get_int("duration_ms"))


class BillableRun(GitHubResponse):
    """Billable time of a run on one runner environment (UBUNTU, MACOS, WINDOWS)."""

    name: str = ""
    total_ms: int = 0
    jobs: int = 0
    job_runs: tuple[JobRun, ...] = ()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            name=fields.get_str("name"),
            total_ms=fields.get_int("total_ms"),
            jobs=fields.get_int("jobs"),
            job_runs=tuple(JobRun.from_json(item) for item in fields.get_objects("job_runs")),
        )


class WorkflowRunUsage(GitHubResponse):
    """Billable time of a workflow run, broken down by runner environment."""

    billable: tuple[BillableRun, ...] = ()
    run_duration_ms: int = 0

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        billable = fields.get_object("billable")
        # GitHub keys each breakdown by environment name; the key becomes the name.
        return cls(
            billable=tuple(BillableRun.from_json(billable.get_object(name)).model_copy(update={"name": name}) for name in billable),
            run_duration_ms=fields.get_int("run_duration_ms"),
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize the usage back to its wire representation."""
        return self._restore_null_fields(
            {
                "billable": {item.name: item.model_dump(mode="json", exclude={"name"}) for item in self.billable},
                "run_duration_ms": self.run_duration_ms,
            }
        )

    def billable_for(self, name: str) -> BillableRun | None:
        """Return the breakdown for one runner environment."""
        for item in self.billable:
            if item.name == name:
                return item
        return None


class Environment(BaseResponseDetails):
    """Deployment environment referenced by pending deployments and reviews."""

    node_id: str = ""
    html_url: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            **cls._base_details(fields),
            node_id=fields.get_str("node_id"),
            html_url=fields.get_str("html_url"),
            created_at=fields.get_str("created_at"),
            updated_at=fields.get_str("updated_at"),
        )


class PendingDeployment(GitHubResponse):
    """A deployment of a workflow run waiting for protection rules to pass."""

    environment: Environment = Environment()
    wait_timer: int = 0
    wait_timer_started_at: str = ""
    current_user_can_approve: bool = False
    reviewers: tuple[Reviewer, ...] = ()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            environment=Environment.from_json(fields.get_object("environment")),
            wait_timer=fields.get_int("wait_timer"),
            wait_timer_started_at=fields.get_str("wait_timer_started_at"),
            current_user_can_approve=fields.get_bool("current_user_can_approve"),
            reviewers=tuple(reviewer_from_json(item) for item in fields.get_objects("reviewers")),
        )

    @property
    def wait_timer_started_at_datetime(self) -> datetime | None:
        """When the wait timer started, when GitHub reported it."""
        return parse_github_timestamp(self.wait_timer_started_at)

    @property
    def user_reviewers(self) -> tuple[User, ...]:
        """Reviewers that are users."""
        return tuple(item.reviewer for item in self.reviewers if isinstance(item, UserReviewer))

    @property
    def team_reviewers(self) -> tuple[Team, ...]:
        """Reviewers that are teams."""
        return tuple(item.reviewer for item in self.reviewers if isinstance(item, TeamReviewer))


class ReviewState(str, Enum):
    """Enum for the decisions a deployment review can record."""

    APPROVED = "approved"
    REJECTED = "rejected"


class Review(GitHubResponse):
    """A review recorded in a workflow run's deployment approval history."""

    state: ReviewState = ReviewState.APPROVED
    comment: str = ""
    environments: tuple[Environment, ...] = ()
    user: User = User()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            state=fields.get_enum("state", ReviewState, ReviewState.APPROVED),
            comment=fields.get_str("comment"),
            environments=tuple(Environment.from_json(item) for item in fields.get_objects("environments")),
            user=User.from_json(fields.get_object("user")),
        )


class DeploymentReview(GitHubResponse):
    """A deployment created or resumed by reviewing pending deployments."""

    url: str = ""
    id: int = 0
    node_id: str = ""
    sha: str = ""
    ref: str = ""
    task: str = ""
    payload: Any = None
    original_environment: str = ""
    environment: str = ""
    description: str = ""
    creator: User = User()
    created_at: str = ""
    updated_at: str = ""
    statuses_url: str = ""
    repository_url: str = ""
    transient_environment: bool = False
    production_environment: bool = False

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            url=fields.get_str("url"),
            id=fields.get_int("id"),
            node_id=fields.get_str("node_id"),
            sha=fields.get_str("sha"),
            ref=fields.get_str("ref"),
            task=fields.get_str("task"),
            payload=fields.get_value("payload"),
            original_environment=fields.get_str("original_environment"),
            environment=fields.get_str("environment"),
            description=fields.get_str("description"),
            creator=User.from_json(fields.get_object("creator")),
            created_at=fields.get_str("created_at"),
            updated_at=fields.get_str("updated_at"),
            statuses_url=fields.get_str("statuses_url"),
            repository_url=fields.get_str("repository_url"),
            transient_environment=fields.get_bool("transient_environment"),
            production_environment=fields.get_bool("production_environment"),
        )
