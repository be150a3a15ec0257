"""Resource locator model: an ID picked from a list or typed by hand."""

from __future__ import annotations

import re

from pydantic import field_validator, model_validator

from ..core.enums import LocatorMode
from .base import FormModel

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


class ResourceLocator(FormModel):
    """Locator value as produced by a list-or-ID picker.

    Values typed by hand (``id`` mode) must be lowercase UUIDs.
    """

    mode: LocatorMode = LocatorMode.LIST
    value: str = ""

    @field_validator("value")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def _check_uuid(self) -> ResourceLocator:
        if self.mode == LocatorMode.ID and self.value and not UUID_PATTERN.match(self.value):
            raise ValueError("Please enter a valid UUID")
        return self
