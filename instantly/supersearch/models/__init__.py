"""Parameter models for SuperSearch enrichment operations.

Architecture:
    Pydantic v2 models validate user-supplied fields before any request is
    built. All models are frozen and accept both the camelCase names used
    by automation forms and Python snake_case names.

Model Categories:
    - Payloads: EnrichmentPayload, SearchFilters
    - Operation parameters: CreateEnrichmentParams, GetEnrichmentParams,
      RunEnrichmentParams, AddToResourceParams, AIEnrichmentParams,
      HistoryParams
    - Locators and options: ResourceLocator, ResourceOption
"""

from .enrichment import EnrichmentPayload, SearchFilters
from .operations import (
    AddToResourceOptions,
    AddToResourceParams,
    AIEnrichmentParams,
    AISettings,
    CreateAdditionalFields,
    CreateEnrichmentParams,
    GetEnrichmentParams,
    HistoryParams,
    RunEnrichmentParams,
    RunOptions,
)
from .resource_locator import UUID_PATTERN, ResourceLocator
from .resource_option import ResourceOption

__all__ = [
    "AIEnrichmentParams",
    "AISettings",
    "AddToResourceOptions",
    "AddToResourceParams",
    "CreateAdditionalFields",
    "CreateEnrichmentParams",
    "EnrichmentPayload",
    "GetEnrichmentParams",
    "HistoryParams",
    "ResourceLocator",
    "ResourceOption",
    "RunEnrichmentParams",
    "RunOptions",
    "SearchFilters",
    "UUID_PATTERN",
]
