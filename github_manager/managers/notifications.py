"""Manager for the notification threads of the authenticated user."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.mapping.results import ActionResult
from github_manager.schemas.notifications import Notification, ThreadSubscription
from github_manager.schemas.users import Repository
from github_manager.utils.github import resolve_identifier


class GitHubNotificationsManager(GitHubManager):
    """Reads notification threads, marks them as read and manages thread subscriptions."""

    @staticmethod
    def _thread_path(thread: Notification | int | str) -> str:
        return f"/notifications/threads/{resolve_identifier(thread)}"

    def list_notifications(
        self,
        *,
        all: bool | None = None,
        participating: bool | None = None,
        since: str | None = None,
        before: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Notification] | list[Any] | str:
        """List the notifications of the authenticated user, most recently updated first."""
        params = self._omit_null_parameters(
            all=all, participating=participating, since=since, before=before, per_page=per_page, page=page
        )
        return self._fetch_list("GET", "/notifications", Notification.from_json, return_format, params=params)

    def mark_notifications_as_read(
        self,
        *,
        last_read_at: str | None = None,
        read: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> dict[str, Any] | str:
        """Mark every notification as read; large inboxes are processed asynchronously and answer with a message."""
        body = self._omit_null_parameters(last_read_at=last_read_at, read=read)
        return self._fetch_message("PUT", "/notifications", return_format, body=body)

    def get_thread(
        self,
        thread: Notification | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Notification | dict[str, Any] | str:
        """Get a notification thread."""
        return self._fetch("GET", self._thread_path(thread), Notification.from_json, return_format)

    def mark_thread_as_read(self, thread: Notification | int | str) -> ActionResult:
        """Mark a notification thread as read."""
        return self._perform_action("mark_thread_as_read", "PATCH", self._thread_path(thread), 205)

    def get_thread_subscription(
        self,
        thread: Notification | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ThreadSubscription | dict[str, Any] | str:
        """Get the authenticated user's subscription to a thread."""
        path = f"{self._thread_path(thread)}/subscription"
        return self._fetch("GET", path, ThreadSubscription.from_json, return_format)

    def set_thread_subscription(
        self,
        thread: Notification | int | str,
        ignored: bool = False,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ThreadSubscription | dict[str, Any] | str:
        """Subscribe to a thread, or mute it with ignored=True."""
        path = f"{self._thread_path(thread)}/subscription"
        return self._fetch("PUT", path, ThreadSubscription.from_json, return_format, body={"ignored": ignored})

    def delete_thread_subscription(self, thread: Notification | int | str) -> ActionResult:
        """Stop overriding the default subscription of a thread."""
        path = f"{self._thread_path(thread)}/subscription"
        return self._perform_action("delete_thread_subscription", "DELETE", path, 204)

    def list_repository_notifications(
        self,
        repo: Repository | str,
        *,
        all: bool | None = None,
        participating: bool | None = None,
        since: str | None = None,
        before: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Notification] | list[Any] | str:
        """List the authenticated user's notifications for one repository."""
        params = self._omit_null_parameters(
            all=all, participating=participating, since=since, before=before, per_page=per_page, page=page
        )
        path = f"{self._repository_path(repo)}/notifications"
        return self._fetch_list("GET", path, Notification.from_json, return_format, params=params)

    def mark_repository_notifications_as_read(
        self,
        repo: Repository | str,
        *,
        last_read_at: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> dict[str, Any] | str:
        """Mark every notification of a repository as read."""
        body = self._omit_null_parameters(last_read_at=last_read_at)
        path = f"{self._repository_path(repo)}/notifications"
        return self._fetch_message("PUT", path, return_format, body=body)
