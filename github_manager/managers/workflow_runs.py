"""Manager for the GitHub Actions workflow runs endpoints."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.mapping.results import ActionResult
from github_manager.schemas.users import Repository
from github_manager.schemas.workflow_runs import (
    DeploymentReview,
    PendingDeployment,
    Review,
    ReviewState,
    WorkflowRun,
    WorkflowRunsList,
    WorkflowRunUsage,
)
from github_manager.utils.github import resolve_identifier


class GitHubWorkflowRunsManager(GitHubManager):
    """Lists, inspects, re-runs and reviews workflow runs of a repository."""

    def _run_path(self, repo: Repository | str, run: WorkflowRun | int | str) -> str:
        return f"{self._repository_path(repo)}/actions/runs/{resolve_identifier(run)}"

    def rerun_workflow_job(self, repo: Repository | str, job_id: int | str, enable_debug_logging: bool = False) -> ActionResult:
        """Re-run a single job and its dependent jobs."""
        path = f"{self._repository_path(repo)}/actions/jobs/{resolve_identifier(job_id)}/rerun"
        return self._perform_action("rerun_workflow_job", "POST", path, 201, body={"enable_debug_logging": enable_debug_logging})

    def list_repository_workflow_runs(
        self,
        repo: Repository | str,
        *,
        actor: str | None = None,
        branch: str | None = None,
        event: str | None = None,
        status: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        created: str | None = None,
        exclude_pull_requests: bool | None = None,
        check_suite_id: int | None = None,
        head_sha: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRunsList | dict[str, Any] | str:
        """List all workflow runs of a repository, newest first."""
        params = self._omit_null_parameters(
            actor=actor,
            branch=branch,
            event=event,
            status=status,
            per_page=per_page,
            page=page,
            created=created,
            exclude_pull_requests=exclude_pull_requests,
            check_suite_id=check_suite_id,
            head_sha=head_sha,
        )
        path = f"{self._repository_path(repo)}/actions/runs"
        return self._fetch("GET", path, WorkflowRunsList.from_json, return_format, params=params)

    def list_workflow_runs(
        self,
        repo: Repository | str,
        workflow: int | str,
        *,
        actor: str | None = None,
        branch: str | None = None,
        event: str | None = None,
        status: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        created: str | None = None,
        exclude_pull_requests: bool | None = None,
        check_suite_id: int | None = None,
        head_sha: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRunsList | dict[str, Any] | str:
        """List the runs of one workflow, given by id or by file name such as 'ci.yml'."""
        params = self._omit_null_parameters(
            actor=actor,
            branch=branch,
            event=event,
            status=status,
            per_page=per_page,
            page=page,
            created=created,
            exclude_pull_requests=exclude_pull_requests,
            check_suite_id=check_suite_id,
            head_sha=head_sha,
        )
        path = f"{self._repository_path(repo)}/actions/workflows/{resolve_identifier(workflow)}/runs"
        return self._fetch("GET", path, WorkflowRunsList.from_json, return_format, params=params)

    def get_workflow_run(
        self,
        repo: Repository | str,
        run: WorkflowRun | int | str,
        *,
        exclude_pull_requests: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRun | dict[str, Any] | str:
        """Get a specific workflow run."""
        params = self._omit_null_parameters(exclude_pull_requests=exclude_pull_requests)
        return self._fetch("GET", self._run_path(repo, run), WorkflowRun.from_json, return_format, params=params)

    def delete_workflow_run(self, repo: Repository | str, run: WorkflowRun | int | str) -> ActionResult:
        """Delete a workflow run."""
        return self._perform_action("delete_workflow_run", "DELETE", self._run_path(repo, run), 204)

    def get_reviews_history(
        self,
        repo: Repository | str,
        run: WorkflowRun | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Review] | list[Any] | str:
        """Get the deployment approval history of a run, oldest first."""
        path = f"{self._run_path(repo, run)}/approvals"
        return self._fetch_list("GET", path, Review.from_json, return_format)

    def approve_pull_request_fork(self, repo: Repository | str, run: WorkflowRun | int | str) -> ActionResult:
        """Approve a run triggered by a pull request from a first-time contributor's fork."""
        path = f"{self._run_path(repo, run)}/approve"
        return self._perform_action("approve_pull_request_fork", "POST", path, 201)

    def get_workflow_run_attempt(
        self,
        repo: Repository | str,
        run: WorkflowRun | int | str,
        attempt_number: int,
        *,
        exclude_pull_requests: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRun | dict[str, Any] | str:
        """Get one attempt of a workflow run."""
        params = self._omit_null_parameters(exclude_pull_requests=exclude_pull_requests)
        path = f"{self._run_path(repo, run)}/attempts/{attempt_number}"
        return self._fetch("GET", path, WorkflowRun.from_json, return_format, params=params)

    def download_workflow_attempt_logs(self, repo: Repository | str, run: WorkflowRun | int | str, attempt_number: int) -> str:
        """Return the short-lived URL of the log archive of one attempt of a workflow run."""
        return self._fetch_redirect("GET", f"{self._run_path(repo, run)}/attempts/{attempt_number}/logs")

    def cancel_workflow_run(self, repo: Repository | str, run: WorkflowRun | int | str) -> ActionResult:
        """Cancel a workflow run."""
        path = f"{self._run_path(repo, run)}/cancel"
        return self._perform_action("cancel_workflow_run", "POST", path, 202)

    def download_workflow_logs(self, repo: Repository | str, run: WorkflowRun | int | str) -> str:
        """Return the short-lived URL of the log archive of a workflow run."""
        return self._fetch_redirect("GET", f"{self._run_path(repo, run)}/logs")

    def delete_workflow_run_logs(self, repo: Repository | str, run: WorkflowRun | int | str) -> ActionResult:
        """Delete all logs of a workflow run."""
        path = f"{self._run_path(repo, run)}/logs"
        return self._perform_action("delete_workflow_run_logs", "DELETE", path, 204)

    def get_pending_deployments(
        self,
        repo: Repository | str,
        run: WorkflowRun | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[PendingDeployment] | list[Any] | str:
        """Get the deployments of a run waiting for protection rules to pass."""
        path = f"{self._run_path(repo, run)}/pending_deployments"
        return self._fetch_list("GET", path, PendingDeployment.from_json, return_format)

    def review_pending_deployments(
        self,
        repo: Repository | str,
        run: WorkflowRun | int | str,
        environment_ids: list[int],
        state: ReviewState | str,
        comment: str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[DeploymentReview] | list[Any] | str:
        """Approve or reject the pending deployments of a run for the given environments."""
        body = {
            "environment_ids": list(environment_ids),
            "state": ReviewState(state).value,
            "comment": comment,
        }
        path = f"{self._run_path(repo, run)}/pending_deployments"
        return self._fetch_list("POST", path, DeploymentReview.from_json, return_format, body=body)

    def rerun_workflow(self, repo: Repository | str, run: WorkflowRun | int | str, enable_debug_logging: bool = False) -> ActionResult:
        """Re-run every job of a workflow run."""
        path = f"{self._run_path(repo, run)}/rerun"
        return self._perform_action("rerun_workflow", "POST", path, 201, body={"enable_debug_logging": enable_debug_logging})

    def rerun_failed_jobs(self, repo: Repository | str, run: WorkflowRun | int | str, enable_debug_logging: bool = False) -> ActionResult:
        """Re-run the failed jobs of a workflow run and their dependents."""
        path = f"{self._run_path(repo, run)}/rerun-failed-jobs"
        return self._perform_action("rerun_failed_jobs", "POST", path, 201, body={"enable_debug_logging": enable_debug_logging})

    def get_workflow_run_usage(
        self,
        repo: Repository | str,
        run: WorkflowRun | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRunUsage | dict[str, Any] | str:
        """Get the billable time of a workflow run."""
        path = f"{self._run_path(repo, run)}/timing"
        return self._fetch("GET", path, WorkflowRunUsage.from_json, return_format)
