"""Unit tests for typed field access on parsed GitHub JSON objects."""

from enum import Enum

import pytest

from github_manager.mapping.fields import FieldTypeError, JsonObject, ResponseParseError, as_json_object


class Color(str, Enum):
    """Enum used to exercise enum fields."""

    RED = "red"
    BLUE = "blue"


def test_missing_fields_return_defaults() -> None:
    """Test that every getter returns its default for a missing key."""
    fields = JsonObject({})
    assert fields.get_str("name") == ""
    assert fields.get_int("id") == 0
    assert fields.get_float("duration") == 0.0
    assert fields.get_bool("unread") is False
    assert len(fields.get_object("owner")) == 0
    assert fields.get_optional_object("parent") is None
    assert fields.get_objects("items") == []
    assert fields.get_strings("bullets") == []
    assert fields.get_ints("environment_ids") == []
    assert fields.get_enum("color", Color, Color.RED) is Color.RED
    assert fields.get_value("payload") is None


def test_null_fields_return_defaults() -> None:
    """Test that JSON null is treated like an absent key."""
    fields = JsonObject.parse('{"name": null, "id": null, "owner": null, "items": null}')
    assert fields.get_str("name", "fallback") == "fallback"
    assert fields.get_int("id", 7) == 7
    assert fields.get_optional_object("owner") is None
    assert fields.get_objects("items") == []


def test_present_fields_are_returned() -> None:
    """Test that present values are returned with their JSON types."""
    fields = JsonObject({"name": "main", "id": 42, "duration": 3, "protected": True, "color": "blue"})
    assert fields.get_str("name") == "main"
    assert fields.get_int("id") == 42
    assert fields.get_float("duration") == 3.0
    assert fields.get_bool("protected") is True
    assert fields.get_enum("color", Color, Color.RED) is Color.BLUE


def test_large_integers_are_preserved() -> None:
    """Test that identifiers beyond 32 bits come back unchanged."""
    fields = JsonObject.parse('{"id": 9007199254740993}')
    assert fields.get_int("id") == 9007199254740993


def test_integral_float_is_accepted_as_integer() -> None:
    """Test that a number such as 5.0 is accepted for an integer field."""
    assert JsonObject({"count": 5.0}).get_int("count") == 5


@pytest.mark.parametrize("value", [2**63, -(2**63) - 1, 2**70])
def test_integers_outside_64_bits_are_rejected(value: int) -> None:
    """Test that integers that do not fit in 64 bits raise an error naming the field."""
    with pytest.raises(FieldTypeError) as exc_info:
        JsonObject({"id": value}).get_int("id")
    assert exc_info.value.field == "id"

    with pytest.raises(FieldTypeError) as exc_info:
        JsonObject({"environment_ids": [1, value]}).get_ints("environment_ids")
    assert exc_info.value.field == "environment_ids[1]"


def test_64_bit_bounds_are_accepted() -> None:
    """Test that the largest and smallest 64-bit integers are returned unchanged."""
    fields = JsonObject({"max": 2**63 - 1, "min": -(2**63)})
    assert fields.get_int("max") == 2**63 - 1
    assert fields.get_int("min") == -(2**63)


def test_get_text_accepts_strings_and_integers() -> None:
    """Test that fields sent as a string or an integer come back as strings."""
    fields = JsonObject({"insecure_ssl": "0", "numeric": 1, "missing": None})
    assert fields.get_text("insecure_ssl") == "0"
    assert fields.get_text("numeric") == "1"
    assert fields.get_text("missing", "0") == "0"


@pytest.mark.parametrize("value", [True, {"nested": 1}, [1], 1.5])
def test_get_text_rejects_other_json_types(value: object) -> None:
    """Test that booleans, objects, arrays and fractions are not turned into text."""
    with pytest.raises(FieldTypeError) as exc_info:
        JsonObject({"insecure_ssl": value}).get_text("insecure_ssl")
    assert exc_info.value.field == "insecure_ssl"


@pytest.mark.parametrize(
    "key, value, getter",
    [
        ("name", 42, "get_str"),
        ("id", "42", "get_int"),
        ("id", True, "get_int"),
        ("id", 1.5, "get_int"),
        ("duration", "fast", "get_float"),
        ("unread", "yes", "get_bool"),
        ("owner", [], "get_object"),
        ("items", {}, "get_objects"),
    ],
)
def test_wrong_type_raises_field_type_error(key: str, value: object, getter: str) -> None:
    """Test that a value of the wrong JSON type raises an error naming the field."""
    fields = JsonObject({key: value})
    with pytest.raises(FieldTypeError) as exc_info:
        getattr(fields, getter)(key)
    assert exc_info.value.field == key
    assert key in str(exc_info.value)


def test_nested_field_errors_name_the_full_path() -> None:
    """Test that errors inside nested objects and arrays report the dotted path."""
    fields = JsonObject({"commit": {"sha": 123}, "runs": [{"id": 1}, {"id": "x"}]})
    with pytest.raises(FieldTypeError) as exc_info:
        fields.get_object("commit").get_str("sha")
    assert exc_info.value.field == "commit.sha"

    with pytest.raises(FieldTypeError) as exc_info:
        [run.get_int("id") for run in fields.get_objects("runs")]
    assert exc_info.value.field == "runs[1].id"


def test_array_of_objects_rejects_scalar_elements() -> None:
    """Test that a scalar inside an array of objects is reported with its index."""
    with pytest.raises(FieldTypeError) as exc_info:
        JsonObject({"reviewers": [{"type": "User"}, "octocat"]}).get_objects("reviewers")
    assert exc_info.value.field == "reviewers[1]"


def test_get_strings_rejects_non_string_elements() -> None:
    """Test that string arrays are checked element by element."""
    with pytest.raises(FieldTypeError) as exc_info:
        JsonObject({"bullets": ["a", 2]}).get_strings("bullets")
    assert exc_info.value.field == "bullets[1]"


def test_unknown_enum_value_raises() -> None:
    """Test that an enum value outside the allowed set raises naming the allowed values."""
    with pytest.raises(FieldTypeError) as exc_info:
        JsonObject({"color": "green"}).get_enum("color", Color, Color.RED)
    assert "red" in str(exc_info.value)
    assert "blue" in str(exc_info.value)


def test_get_objects_preserves_order() -> None:
    """Test that arrays are returned in document order."""
    fields = JsonObject({"items": [{"id": 3}, {"id": 1}, {"id": 2}]})
    assert [item.get_int("id") for item in fields.get_objects("items")] == [3, 1, 2]


@pytest.mark.parametrize("text", ["[1, 2]", '"text"', "42", "not json", ""])
def test_parse_rejects_non_objects(text: str) -> None:
    """Test that a body that is not a JSON object fails with a parse error."""
    with pytest.raises(ResponseParseError):
        JsonObject.parse(text)


def test_parse_array_rejects_objects() -> None:
    """Test that an array endpoint answering with an object fails with a parse error."""
    with pytest.raises(ResponseParseError) as exc_info:
        JsonObject.parse_array('{"message": "Not Found"}')
    assert "array" in str(exc_info.value)


def test_constructor_rejects_non_dict() -> None:
    """Test that wrapping something other than a dict fails."""
    with pytest.raises(FieldTypeError):
        JsonObject([1, 2])  # type: ignore[arg-type]


def test_as_json_object_passes_through_existing_instances() -> None:
    """Test that as_json_object wraps dicts and returns JsonObject instances unchanged."""
    fields = JsonObject({"id": 1})
    assert as_json_object(fields) is fields
    assert as_json_object({"id": 2}).get_int("id") == 2
    assert len(as_json_object(None)) == 0


def test_iteration_follows_document_order() -> None:
    """Test that keys are iterated in the order they appear in the document."""
    fields = JsonObject.parse('{"UBUNTU": {}, "MACOS": {}, "WINDOWS": {}}')
    assert list(fields) == ["UBUNTU", "MACOS", "WINDOWS"]
    assert fields.keys() == ["UBUNTU", "MACOS", "WINDOWS"]
    assert "MACOS" in fields
