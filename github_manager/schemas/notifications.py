"""Pydantic models for notification threads and their subscriptions."""

from typing import Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import GitHubResponse
from github_manager.schemas.users import Repository


class NotificationSubject(GitHubResponse):
    """What a notification thread is about."""

    title: str = ""
    url: str = ""
    latest_comment_url: str = ""
    type: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            title=fields.get_str("title"),
            url=fields.get_str("url"),
            latest_comment_url=fields.get_str("latest_comment_url"),
            type=fields.get_str("type"),
        )


class Notification(GitHubResponse):
    """Pydantic model for a notification thread."""

    # Thread ids are sent as strings.
    id: str = ""
    repository: Repository = Repository()
    subject: NotificationSubject = NotificationSubject()
    reason: str = ""
    unread: bool = False
    updated_at: str = ""
    last_read_at: str = ""
    url: str = ""
    subscription_url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_str("id"),
            repository=Repository.from_json(fields.get_object("repository")),
            subject=NotificationSubject.from_json(fields.get_object("subject")),
            reason=fields.get_str("reason"),
            unread=fields.get_bool("unread"),
            updated_at=fields.get_str("updated_at"),
            last_read_at=fields.get_str("last_read_at"),
            url=fields.get_str("url"),
            subscription_url=fields.get_str("subscription_url"),
        )


class ThreadSubscription(GitHubResponse):
    """Pydantic model for the authenticated user's subscription to a thread."""

    subscribed: bool = False
    ignored: bool = False
    reason: str = ""
    created_at: str = ""
    url: str = ""
    thread_url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            subscribed=fields.get_bool("subscribed"),
            ignored=fields.get_bool("ignored"),
            reason=fields.get_str("reason"),
            created_at=fields.get_str("created_at"),
            url=fields.get_str("url"),
            thread_url=fields.get_str("thread_url"),
        )
