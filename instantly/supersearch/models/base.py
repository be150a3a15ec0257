"""Shared base for models built from user-supplied form fields."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class FormModel(BaseModel):
    """Model accepting camelCase form names or snake_case field names.

    ``None`` values are treated as "not supplied" so that the field default
    applies, the same way an empty form field falls back to its default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        protected_namespaces=(),
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
