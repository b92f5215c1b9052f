"""Typed, defaulted access to the fields of a parsed GitHub JSON object."""

import json
from enum import Enum
from typing import Any, Iterator, TypeVar

E = TypeVar("E", bound=Enum)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_JSON_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "integer",
    float: "number",
    type(None): "null",
}


def json_type_name(value: Any) -> str:
    """Return the JSON name of the type of a decoded value."""
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


class ResponseParseError(ValueError):
    """Raised when a response body is not the JSON container an endpoint returns."""

    def __init__(self, expected: str, detail: str) -> None:
        """Initializes the exception with the expected container and what was found instead."""
        super().__init__(f"Expected a JSON {expected} in the response body: {detail}")
        self.expected = expected
        self.detail = detail


class FieldTypeError(ValueError):
    """Raised when a field is present but cannot be coerced to the requested type."""

    def __init__(self, field: str, expected: str, actual: Any) -> None:
        """Initializes the exception with the offending field name and value."""
        super().__init__(f"Field '{field}' should be {expected}, found {json_type_name(actual)}: {actual!r}")
        self.field = field
        self.expected = expected
        self.actual = actual


class JsonObject:
    """Read-only view over one JSON object with typed, defaulted getters.

    Every getter returns its default when the key is missing or holds JSON
    null, so mappers tolerate fields GitHub has not sent. A value of the wrong
    JSON type raises FieldTypeError naming the field.
    """

    __slots__ = ("_data", "_path")

    def __init__(self, data: dict[str, Any] | None = None, path: str = "") -> None:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise FieldTypeError(path or "<root>", "an object", data)
        self._data = data
        self._path = path

    @classmethod
    def parse(cls, text: str) -> "JsonObject":
        """Parse a response body that must hold a JSON object."""
        return cls(_decode(text, "object", dict))

    @staticmethod
    def parse_array(text: str) -> list[Any]:
        """Parse a response body that must hold a JSON array."""
        return _decode(text, "array", list)

    @property
    def raw(self) -> dict[str, Any]:
        """The underlying decoded dictionary."""
        return self._data

    def keys(self) -> list[str]:
        """Keys of the object in document order."""
        return list(self._data.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"JsonObject({self._data!r})"

    def _field(self, key: str) -> str:
        return f"{self._path}.{key}" if self._path else key

    def _lookup(self, key: str) -> Any:
        return self._data.get(key)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Return the untouched JSON value stored at key."""
        value = self._lookup(key)
        return default if value is None else value

    def get_str(self, key: str, default: str = "") -> str:
        """Return a string field."""
        value = self._lookup(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise FieldTypeError(self._field(key), "a string", value)
        return value

    def get_int(self, key: str, default: int = 0) -> int:
        """Return an integer field; booleans and fractional numbers are rejected."""
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, bool):
            raise FieldTypeError(self._field(key), "a 64-bit integer", value)
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int) or not INT64_MIN <= value <= INT64_MAX:
            raise FieldTypeError(self._field(key), "a 64-bit integer", value)
        return value

    def get_text(self, key: str, default: str = "") -> str:
        """Return a field GitHub sends either as a string or as an integer, always as a string."""
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise FieldTypeError(self._field(key), "a string or an integer", value)
        return str(value)

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return a numeric field as a float."""
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldTypeError(self._field(key), "a number", value)
        return float(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean field."""
        value = self._lookup(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise FieldTypeError(self._field(key), "a boolean", value)
        return value

    def get_optional_object(self, key: str) -> "JsonObject | None":
        """Return a nested object, or None when it is absent."""
        value = self._lookup(key)
        if value is None:
            return None
        if not isinstance(value, dict):
            raise FieldTypeError(self._field(key), "an object", value)
        return JsonObject(value, self._field(key))

    def get_object(self, key: str) -> "JsonObject":
        """Return a nested object, or an empty one when it is absent."""
        nested = self.get_optional_object(key)
        return nested if nested is not None else JsonObject({}, self._field(key))

    def get_array(self, key: str) -> list[Any]:
        """Return an array field as a list of untouched JSON values."""
        value = self._lookup(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise FieldTypeError(self._field(key), "an array", value)
        return value

    def get_objects(self, key: str) -> list["JsonObject"]:
        """Return an array of objects, in document order."""
        items: list[JsonObject] = []
        for index, item in enumerate(self.get_array(key)):
            element = f"{self._field(key)}[{index}]"
            if not isinstance(item, dict):
                raise FieldTypeError(element, "an object", item)
            items.append(JsonObject(item, element))
        return items

    def get_strings(self, key: str) -> list[str]:
        """Return an array of strings, in document order."""
        items = self.get_array(key)
        for index, item in enumerate(items):
            if not isinstance(item, str):
                raise FieldTypeError(f"{self._field(key)}[{index}]", "a string", item)
        return list(items)

    def get_ints(self, key: str) -> list[int]:
        """Return an array of integers, in document order."""
        items = self.get_array(key)
        for index, item in enumerate(items):
            if isinstance(item, bool) or not isinstance(item, int) or not INT64_MIN <= item <= INT64_MAX:
                raise FieldTypeError(f"{self._field(key)}[{index}]", "a 64-bit integer", item)
        return list(items)

    def get_enum(self, key: str, enum_type: type[E], default: E) -> E:
        """Return a string field converted to a member of enum_type."""
        value = self.get_str(key, "")
        if not value:
            return default
        try:
            return enum_type(value)
        except ValueError:
            allowed = ", ".join(str(member.value) for member in enum_type)
            raise FieldTypeError(self._field(key), f"one of [{allowed}]", value) from None


def as_json_object(data: "JsonObject | dict[str, Any] | None") -> JsonObject:
    """Wrap a plain dictionary, or pass a JsonObject through unchanged."""
    if isinstance(data, JsonObject):
        return data
    return JsonObject(data)


def _decode(text: str, expected: str, container: type) -> Any:
    try:
        decoded = json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ResponseParseError(expected, str(exc)) from exc
    if not isinstance(decoded, container):
        raise ResponseParseError(expected, f"found {json_type_name(decoded)}")
    return decoded
