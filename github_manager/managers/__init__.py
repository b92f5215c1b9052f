"""Managers exposing one method per GitHub REST endpoint, grouped by resource."""

from .assignees import GitHubAssigneesManager
from .branches import GitHubBranchesManager
from .codespaces import GitHubCodespacesManager
from .marketplace import GitHubMarketplaceManager
from .notifications import GitHubNotificationsManager
from .review_requests import GitHubReviewRequestsManager
from .webhooks import GitHubWebhooksManager
from .workflow_runs import GitHubWorkflowRunsManager

__all__ = [
    "GitHubAssigneesManager",
    "GitHubBranchesManager",
    "GitHubCodespacesManager",
    "GitHubMarketplaceManager",
    "GitHubNotificationsManager",
    "GitHubReviewRequestsManager",
    "GitHubWebhooksManager",
    "GitHubWorkflowRunsManager",
]
