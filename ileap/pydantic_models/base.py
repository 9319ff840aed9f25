"""
Base model for all wire records.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel


def without_none(data: Any) -> Any:
    """Drop keys whose value is None from a serialized record."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class IleapBaseModel(BaseModel):
    """
    Frozen record with camelCase wire names.

    Absent optional fields are omitted from the output rather than written
    as null, so ``model_dump_json()`` yields the wire form directly.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    @model_serializer(mode="wrap")
    def serialize_record(self, handler):
        return without_none(handler(self))
