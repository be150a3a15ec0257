"""Dropdown option model."""

from pydantic import BaseModel, ConfigDict


class ResourceOption(BaseModel):
    """A selectable campaign or lead list."""

    name: str
    value: str

    model_config = ConfigDict(frozen=True)
