"""Selects how a response body is handed back to the caller."""

import json
from enum import Enum
from typing import Any, Callable, TypeVar

from github_manager.mapping.fields import JsonObject

T = TypeVar("T")

Mapper = Callable[[JsonObject], T]


class ReturnFormat(str, Enum):
    """Enum for the representations a manager operation can return."""

    STRING = "string"
    JSON = "json"
    LIBRARY_OBJECT = "library_object"


def materialize(text: str, return_format: ReturnFormat, mapper: Mapper[T]) -> T | dict[str, Any] | str:
    """Return a JSON object response as raw text, a parsed dict or a mapped entity.

    The mapper only runs for LIBRARY_OBJECT, so a payload that would fail
    mapping can still be inspected as STRING or JSON.
    """
    if return_format == ReturnFormat.STRING:
        return text
    document = JsonObject.parse(text)
    if return_format == ReturnFormat.JSON:
        return document.raw
    return mapper(document)


def materialize_list(text: str, return_format: ReturnFormat, mapper: Mapper[T]) -> list[T] | list[Any] | str:
    """Return a JSON array response as raw text, a parsed list or mapped entities in response order."""
    if return_format == ReturnFormat.STRING:
        return text
    items = JsonObject.parse_array(text)
    if return_format == ReturnFormat.JSON:
        return items
    return [mapper(JsonObject(item, f"[{index}]")) for index, item in enumerate(items)]


def materialize_message(text: str, return_format: ReturnFormat) -> dict[str, Any] | str:
    """Return a status message response; LIBRARY_OBJECT yields the message value itself.

    GitHub may answer these endpoints with an empty body, which maps to an
    empty message.
    """
    if return_format == ReturnFormat.STRING:
        return text
    if not text.strip():
        return {} if return_format == ReturnFormat.JSON else ""
    document = JsonObject.parse(text)
    if return_format == ReturnFormat.JSON:
        return document.raw
    return document.get_str("message")


def dump_json(value: Any) -> str:
    """Serialize a JSON tree the way the CLI prints it."""
    return json.dumps(value, indent=2, sort_keys=False)
