"""Response materialization: typed field access, return formats and action results."""

from .fields import FieldTypeError, JsonObject, ResponseParseError, as_json_object
from .formats import ReturnFormat, materialize, materialize_list, materialize_message
from .results import ActionResult, FailureReason

__all__ = [
    "ActionResult",
    "FailureReason",
    "FieldTypeError",
    "JsonObject",
    "ResponseParseError",
    "ReturnFormat",
    "as_json_object",
    "materialize",
    "materialize_list",
    "materialize_message",
]
