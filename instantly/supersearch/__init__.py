"""Instantly SuperSearch Enrichment - API client for lead enrichment operations."""

from .config import BASE_URL, MAX_PAGE_LIMIT
from .connector import SuperSearchEnrichmentConnector
from .core import (
    AuthenticationError,
    EnrichmentError,
    EnrichmentType,
    LocatorMode,
    ModelVersion,
    Operation,
    ProviderError,
    RateLimitError,
    ResourceType,
    ValidationError,
)
from .locator import get_resource_locator_value
from .models import (
    AddToResourceParams,
    AIEnrichmentParams,
    CreateEnrichmentParams,
    EnrichmentPayload,
    GetEnrichmentParams,
    HistoryParams,
    ResourceLocator,
    ResourceOption,
    RunEnrichmentParams,
    SearchFilters,
)
from .parameters import (
    OperationDefinition,
    get_operation_definition,
    list_operations,
    parse_parameters,
)

__version__ = "0.1.0"

__all__ = [
    "BASE_URL",
    "MAX_PAGE_LIMIT",
    "AIEnrichmentParams",
    "AddToResourceParams",
    "AuthenticationError",
    "CreateEnrichmentParams",
    "EnrichmentError",
    "EnrichmentPayload",
    "EnrichmentType",
    "GetEnrichmentParams",
    "HistoryParams",
    "LocatorMode",
    "ModelVersion",
    "Operation",
    "OperationDefinition",
    "ProviderError",
    "RateLimitError",
    "ResourceLocator",
    "ResourceOption",
    "ResourceType",
    "RunEnrichmentParams",
    "SearchFilters",
    "SuperSearchEnrichmentConnector",
    "ValidationError",
    "get_operation_definition",
    "get_resource_locator_value",
    "list_operations",
    "parse_parameters",
]
