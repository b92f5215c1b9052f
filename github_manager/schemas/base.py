"""Pydantic base models for entities mapped from GitHub responses."""

from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr, SerializerFunctionWrapHandler, model_serializer

from github_manager.mapping.fields import JsonObject, as_json_object


class GitHubResponse(BaseModel):
    """Base model for an immutable entity mapped from a GitHub JSON object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Wire keys that held JSON null; they map to defaults but serialize back as null.
    _null_fields: frozenset[str] = PrivateAttr(default_factory=frozenset)

    @classmethod
    def from_json(cls, data: JsonObject | dict[str, Any] | None) -> Self:
        """Map a JSON object onto the entity."""
        fields = as_json_object(data)
        entity = cls._from_fields(fields)
        entity._null_fields = frozenset(key for key in fields if fields.raw[key] is None)
        return entity

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        raise NotImplementedError(f"{cls.__name__} does not define how it is mapped from JSON")

    def to_json(self) -> dict[str, Any]:
        """Serialize the entity back to its wire representation."""
        return self.model_dump(mode="json", by_alias=True)

    @model_serializer(mode="wrap")
    def _serialize_with_null_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return self._restore_null_fields(handler(self))

    def _restore_null_fields(self, data: dict[str, Any]) -> dict[str, Any]:
        for key in self._null_fields:
            if key in data:
                data[key] = None
        return data


class BaseResponseDetails(GitHubResponse):
    """Entity carrying GitHub's common id, name and url triple."""

    id: int = 0
    name: str = ""
    url: str = ""

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(**cls._base_details(fields))

    @staticmethod
    def _base_details(fields: JsonObject) -> dict[str, Any]:
        return {
            "id": fields.get_int("id"),
            "name": fields.get_str("name"),
            "url": fields.get_str("url"),
        }


T = TypeVar("T", bound=GitHubResponse)


class GitHubList(GitHubResponse, Generic[T]):
    """A page of entities together with the total count reported by GitHub.

    total_count is the value GitHub reports and may exceed len(items) when the
    result set spans several pages.
    """

    items_key: ClassVar[str] = "items"

    total_count: int = 0
    items: tuple[T, ...] = ()

    @classmethod
    def _item_from_json(cls, fields: JsonObject) -> T:
        raise NotImplementedError(f"{cls.__name__} does not define how its items are mapped")

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            total_count=fields.get_int("total_count"),
            items=tuple(cls._item_from_json(item) for item in fields.get_objects(cls.items_key)),
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize the page back to its wire representation."""
        return self._restore_null_fields(
            {
                "total_count": self.total_count,
                self.items_key: [item.to_json() for item in self.items],
            }
        )
