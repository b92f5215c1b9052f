"""Pydantic models for GitHub App webhook configuration and deliveries."""

from typing import Any, Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import GitHubResponse


class WebhookConfiguration(GitHubResponse):
    """Pydantic model for the webhook configuration of a GitHub App."""

    content_type: str = ""
    insecure_ssl: str = ""
    secret: str = ""
    url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            content_type=fields.get_str("content_type"),
            # GitHub documents a string but some endpoints answer with a number.
            insecure_ssl=fields.get_text("insecure_ssl"),
            secret=fields.get_str("secret"),
            url=fields.get_str("url"),
        )


class DeliveryExchange(GitHubResponse):
    """Headers and payload of a delivered request or its response."""

    headers: dict[str, Any] = {}
    payload: Any = None

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(headers=fields.get_object("headers").raw, payload=fields.get_value("payload"))


class Delivery(GitHubResponse):
    """Pydantic model for one webhook delivery attempt."""

    id: int = 0
    guid: str = ""
    delivered_at: str = ""
    redelivery: bool = False
    duration: float = 0.0
    status: str = ""
    status_code: int = 0
    event: str = ""
    action: str = ""
    installation_id: int = 0
    repository_id: int = 0
    url: str = ""
    request: DeliveryExchange = DeliveryExchange()
    response: DeliveryExchange = DeliveryExchange()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_int("id"),
            guid=fields.get_str("guid"),
            delivered_at=fields.get_str("delivered_at"),
            redelivery=fields.get_bool("redelivery"),
            duration=fields.get_float("duration"),
            status=fields.get_str("status"),
            status_code=fields.get_int("status_code"),
            event=fields.get_str("event"),
            action=fields.get_str("action"),
            installation_id=fields.get_int("installation_id"),
            repository_id=fields.get_int("repository_id"),
            url=fields.get_str("url"),
            request=DeliveryExchange.from_json(fields.get_object("request")),
            response=DeliveryExchange.from_json(fields.get_object("response")),
        )
