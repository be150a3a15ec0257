"""Resolve resource locator values to plain resource IDs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pydantic

from .core.exceptions import ValidationError
from .models import ResourceLocator


def get_resource_locator_value(value: Any, *, field: str = "resourceId") -> str:
    """Return the resource ID held by a locator.

    Accepts a plain string, a ``{"mode": ..., "value": ...}`` mapping or a
    ``ResourceLocator``.

    Raises:
        ValidationError: If the value is empty, malformed, or not a UUID in
            ``id`` mode

    Examples:
        >>> get_resource_locator_value(" abc ")
        'abc'
        >>> get_resource_locator_value({"mode": "list", "value": "abc"})
        'abc'
    """
    if isinstance(value, str):
        resolved = value.strip()
    elif isinstance(value, ResourceLocator):
        resolved = value.value
    elif isinstance(value, Mapping):
        try:
            resolved = ResourceLocator.model_validate(dict(value)).value
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid {field}: {_first_error(e)}") from e
    else:
        raise ValidationError(f"Invalid {field}: unsupported locator type {type(value).__name__}")

    if not resolved:
        raise ValidationError(f"{field} is required")
    return resolved


def _first_error(error: pydantic.ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    return str(errors[0].get("msg", error))
