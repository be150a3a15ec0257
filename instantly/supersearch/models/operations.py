"""Parameter models for each SuperSearch enrichment operation.

Each model mirrors the fields a user fills in for one operation. Optional
collections ("additional fields", "run options", ...) are nested models
whose members stay ``None`` when not supplied, so the request builders can
tell "not set" apart from an explicit ``False``.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from ..config import DEFAULT_HISTORY_LIMIT
from ..core.enums import EnrichmentType, ModelVersion, ResourceType
from .base import FormModel
from .enrichment import EnrichmentPayload, SearchFilters
from .resource_locator import ResourceLocator

LocatorValue = ResourceLocator | str


class CreateAdditionalFields(FormModel):
    max_results: int | None = Field(default=None, ge=1, le=10000)
    resource_id: str | None = None
    resource_type: ResourceType | None = None
    list_name: str | None = None
    auto_update: bool | None = None
    skip_rows_without_email: bool | None = None


class CreateEnrichmentParams(FormModel):
    """Fields for creating a SuperSearch enrichment.

    ``resource_id``/``resource_type`` may be given at the top level or in
    ``additional_fields``; the latter wins when both are set.
    """

    name: str
    resource_id: str | None = None
    resource_type: ResourceType | None = None
    search_filters: SearchFilters = Field(default_factory=SearchFilters)
    enrichment_settings: EnrichmentPayload = Field(default_factory=EnrichmentPayload)
    additional_fields: CreateAdditionalFields = Field(default_factory=CreateAdditionalFields)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Enrichment name must not be empty")
        return value


class GetEnrichmentParams(FormModel):
    resource_id: LocatorValue
    get_all_enrichments: bool = False


class RunOptions(FormModel):
    lead_ids: list[str] = Field(default_factory=list)
    enrichment_type: EnrichmentType | None = None
    limit: int | None = Field(default=None, ge=1, le=10000)


class RunEnrichmentParams(FormModel):
    enrichment_id: LocatorValue
    run_options: RunOptions = Field(default_factory=RunOptions)


class AddToResourceOptions(FormModel):
    auto_update: bool | None = None
    skip_rows_without_email: bool | None = None
    limit: int | None = Field(default=None, ge=1, le=10000)


class AddToResourceParams(FormModel):
    resource_id: LocatorValue
    enrichment_types: EnrichmentPayload = Field(default_factory=EnrichmentPayload)
    additional_options: AddToResourceOptions = Field(default_factory=AddToResourceOptions)


class AISettings(FormModel):
    input_columns: list[str] = Field(default_factory=list)
    use_instantly_account: bool | None = None
    overwrite: bool | None = None
    auto_update: bool | None = None
    skip_leads_without_email: bool | None = None
    limit: int | None = Field(default=None, ge=1, le=10000)
    prompt: str | None = None
    template_id: str | None = None


class AIEnrichmentParams(FormModel):
    """Fields for AI personalization of existing leads.

    A top-level ``prompt`` is used when ``additional_settings`` carries none.
    """

    resource_id: LocatorValue
    output_column: str = "ai_personalization"
    resource_type: ResourceType = ResourceType.CAMPAIGN
    model_version: ModelVersion = ModelVersion.GPT_4O
    prompt: str | None = None
    additional_settings: AISettings = Field(default_factory=AISettings)


class HistoryParams(FormModel):
    resource_id: LocatorValue
    return_all: bool = False
    # Upper bound is checked by the connector so the error names the API limit
    limit: int = Field(default=DEFAULT_HISTORY_LIMIT, ge=1)
