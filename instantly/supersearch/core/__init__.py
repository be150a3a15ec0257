"""Core enums and exceptions."""

from .enums import EnrichmentType, LocatorMode, ModelVersion, Operation, ResourceType
from .exceptions import (
    AuthenticationError,
    EnrichmentError,
    ProviderError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "EnrichmentError",
    "EnrichmentType",
    "LocatorMode",
    "ModelVersion",
    "Operation",
    "ProviderError",
    "RateLimitError",
    "ResourceType",
    "ValidationError",
]
