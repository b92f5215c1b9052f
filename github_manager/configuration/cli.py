"""Defines the Command Line Interface (CLI) using Typer."""

import logging
from typing import Any

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_manager.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_manager.github.exceptions import GitHubRequestError
from github_manager.github.manager import GitHubManager
from github_manager.managers.branches import GitHubBranchesManager
from github_manager.managers.notifications import GitHubNotificationsManager
from github_manager.managers.workflow_runs import GitHubWorkflowRunsManager
from github_manager.mapping.fields import FieldTypeError, ResponseParseError
from github_manager.mapping.formats import ReturnFormat, dump_json
from github_manager.schemas.base import GitHubResponse
from github_manager.utils.constants import DEFAULT_GITHUB_API_URL

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Query the GitHub REST API from the command line.")


def configure_logging(debug: bool) -> None:
    """Route structlog through the standard library, at debug level when requested."""
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if debug else logging.WARNING)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def to_printable(value: Any) -> Any:
    """Convert mapped entities into JSON trees so every format can be printed the same way."""
    if isinstance(value, GitHubResponse):
        return value.to_json()
    if isinstance(value, list):
        return [to_printable(item) for item in value]
    return value


def echo_result(value: Any) -> None:
    """Print a response in whichever representation was requested."""
    if isinstance(value, str):
        typer.echo(value)
    else:
        typer.echo(dump_json(to_printable(value)))


def build_manager(ctx: typer.Context) -> GitHubManager:
    """Create the manager shared by every command from the options in the context."""
    try:
        return GitHubManager.create(
            access_token=ctx.obj["github_pat_token"],
            github_api_url=ctx.obj["github_api_url"],
            request_timeout=ctx.obj["request_timeout"],
        )
    except GitHubAuthenticationConfigurationUndefinedError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def run_request(ctx: typer.Context, request: Any) -> None:
    """Run one request against the manager, print its result and turn failures into exit code 1."""
    try:
        result = request(build_manager(ctx), ctx.obj["return_format"])
    except GitHubRequestError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except (FieldTypeError, ResponseParseError) as exc:
        typer.echo(f"Error: unexpected response from GitHub: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    echo_result(result)


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = DEFAULT_GITHUB_API_URL,
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")] = None,
    request_timeout: Annotated[float | None, Option(envvar="REQUEST_TIMEOUT", help="Per-request timeout in seconds.")] = None,
    return_format: Annotated[
        ReturnFormat, Option("--format", case_sensitive=False, help="Representation of the response to print.")
    ] = ReturnFormat.LIBRARY_OBJECT,
) -> None:
    """Set the GitHub connection options for the current context."""
    configure_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["github_api_url"] = github_api_url
    ctx.obj["github_pat_token"] = github_pat_token
    ctx.obj["request_timeout"] = request_timeout
    ctx.obj["return_format"] = return_format


@typer_app.command(name="workflow-runs")
def workflow_runs_cli(
    ctx: typer.Context,
    repo: Annotated[str, Argument(help="Repository name (owner/repo).")],
    branch: Annotated[str | None, Option(help="Only runs of this branch.")] = None,
    status: Annotated[str | None, Option(help="Only runs with this status or conclusion.")] = None,
    per_page: Annotated[int | None, Option(help="Results per page (max 100).")] = None,
    page: Annotated[int | None, Option(help="Page number to fetch.")] = None,
) -> None:
    """List the workflow runs of a repository."""
    run_request(
        ctx,
        lambda manager, return_format: manager.derive(GitHubWorkflowRunsManager).list_repository_workflow_runs(
            repo, branch=branch, status=status, per_page=per_page, page=page, return_format=return_format
        ),
    )


@typer_app.command(name="pending-deployments")
def pending_deployments_cli(
    ctx: typer.Context,
    repo: Annotated[str, Argument(help="Repository name (owner/repo).")],
    run_id: Annotated[int, Argument(help="Workflow run ID.")],
) -> None:
    """List the deployments of a workflow run waiting for approval."""
    run_request(
        ctx,
        lambda manager, return_format: manager.derive(GitHubWorkflowRunsManager).get_pending_deployments(
            repo, run_id, return_format=return_format
        ),
    )


@typer_app.command(name="notifications")
def notifications_cli(
    ctx: typer.Context,
    all_notifications: Annotated[bool, Option("--all", help="Include notifications already marked as read.")] = False,
    participating: Annotated[bool, Option(help="Only notifications in which the user is directly involved.")] = False,
    per_page: Annotated[int | None, Option(help="Results per page (max 50).")] = None,
) -> None:
    """List the notifications of the authenticated user."""
    run_request(
        ctx,
        lambda manager, return_format: manager.derive(GitHubNotificationsManager).list_notifications(
            all=all_notifications or None,
            participating=participating or None,
            per_page=per_page,
            return_format=return_format,
        ),
    )


@typer_app.command(name="branches")
def branches_cli(
    ctx: typer.Context,
    repo: Annotated[str, Argument(help="Repository name (owner/repo).")],
    protected: Annotated[bool | None, Option(help="Only protected (or unprotected) branches.")] = None,
    per_page: Annotated[int | None, Option(help="Results per page (max 100).")] = None,
) -> None:
    """List the branches of a repository."""
    run_request(
        ctx,
        lambda manager, return_format: manager.derive(GitHubBranchesManager).list_branches(
            repo, protected=protected, per_page=per_page, return_format=return_format
        ),
    )


if __name__ == "__main__":
    typer_app()
