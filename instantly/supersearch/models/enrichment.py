"""Enrichment payload and SuperSearch filter models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from .base import FormModel


class EnrichmentPayload(FormModel):
    """The seven enrichment switches sent as ``enrichment_payload``.

    An explicit ``False`` is kept; only missing values take the default.
    """

    work_email_enrichment: bool = True
    fully_enriched_profile: bool = True
    email_verification: bool = False
    joblisting: bool = Field(default=True, alias="jobListing")
    technologies: bool = True
    news: bool = True
    funding: bool = True

    def to_body(self) -> dict[str, bool]:
        return self.model_dump(by_alias=False)


class SearchFilters(FormModel):
    """Lead search criteria sent as ``search_filters``.

    Serialized with the API's camelCase keys. Empty strings, lists and
    mappings fall back to their defaults; the two booleans only do so
    when missing.
    """

    locations: list[Any] = Field(default_factory=list)
    department: list[Any] = Field(default_factory=list)
    level: list[Any] = Field(default_factory=list)
    employee_count: list[Any] = Field(default_factory=list)
    revenue: list[Any] = Field(default_factory=list)
    news: list[Any] = Field(default_factory=list)
    title: dict[str, Any] = Field(default_factory=dict)
    name: list[Any] = Field(default_factory=list)
    company_name: dict[str, Any] = Field(default_factory=dict)
    look_alike: str = ""
    keyword_filter: dict[str, Any] = Field(default_factory=dict)
    industry: dict[str, Any] = Field(default_factory=dict)
    domains: list[Any] = Field(default_factory=list)
    funding_type: list[Any] = Field(default_factory=list)
    skip_owned_leads: bool = True
    show_one_lead_per_company: bool = True

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if isinstance(v, bool) or v}
        return data

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
