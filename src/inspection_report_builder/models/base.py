"""Shared pydantic base for models parsed from the inspection API payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Immutable model accepting both camelCase wire keys and snake_case names.

    Keys whose value is ``None`` are dropped before validation, so an explicit
    ``null`` takes the field default exactly like a missing key.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
