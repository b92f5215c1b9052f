"""Manager for the webhook of the authenticated GitHub App."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.mapping.results import ActionResult
from github_manager.schemas.webhooks import Delivery, WebhookConfiguration
from github_manager.utils.github import resolve_identifier


class GitHubWebhooksManager(GitHubManager):
    """Reads and updates the app webhook configuration and its deliveries.

    These endpoints require a JWT issued for the GitHub App as the access token.
    """

    def get_app_webhook_configuration(
        self,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WebhookConfiguration | dict[str, Any] | str:
        """Get the webhook configuration of the app."""
        return self._fetch("GET", "/app/hook/config", WebhookConfiguration.from_json, return_format)

    def update_app_webhook_configuration(
        self,
        *,
        url: str | None = None,
        content_type: str | None = None,
        secret: str | None = None,
        insecure_ssl: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WebhookConfiguration | dict[str, Any] | str:
        """Update the webhook configuration of the app; omitted values are left unchanged."""
        body = self._omit_null_parameters(url=url, content_type=content_type, secret=secret, insecure_ssl=insecure_ssl)
        return self._fetch("PATCH", "/app/hook/config", WebhookConfiguration.from_json, return_format, body=body)

    def list_app_webhook_deliveries(
        self,
        *,
        per_page: int | None = None,
        cursor: str | None = None,
        redelivery: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Delivery] | list[Any] | str:
        """List the deliveries of the app webhook."""
        params = self._omit_null_parameters(per_page=per_page, cursor=cursor, redelivery=redelivery)
        return self._fetch_list("GET", "/app/hook/deliveries", Delivery.from_json, return_format, params=params)

    def get_app_webhook_delivery(
        self,
        delivery: Delivery | int | str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Delivery | dict[str, Any] | str:
        """Get one delivery of the app webhook, with its request and response."""
        path = f"/app/hook/deliveries/{resolve_identifier(delivery)}"
        return self._fetch("GET", path, Delivery.from_json, return_format)

    def redeliver_app_webhook_delivery(self, delivery: Delivery | int | str) -> ActionResult:
        """Ask GitHub to deliver a webhook payload again."""
        path = f"/app/hook/deliveries/{resolve_identifier(delivery)}/attempts"
        return self._perform_action("redeliver_app_webhook_delivery", "POST", path, 202)
