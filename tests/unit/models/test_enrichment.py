"""Unit tests for enrichment payload and search filter models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from instantly.supersearch.models import EnrichmentPayload, SearchFilters

DEFAULT_PAYLOAD = {
    "work_email_enrichment": True,
    "fully_enriched_profile": True,
    "email_verification": False,
    "joblisting": True,
    "technologies": True,
    "news": True,
    "funding": True,
}


class TestEnrichmentPayload:
    def test_defaults(self):
        assert EnrichmentPayload().to_body() == DEFAULT_PAYLOAD

    def test_explicit_false_is_kept(self):
        payload = EnrichmentPayload.model_validate({"workEmailEnrichment": False, "funding": False})
        body = payload.to_body()
        assert body["work_email_enrichment"] is False
        assert body["funding"] is False
        assert body["news"] is True

    def test_none_falls_back_to_default(self):
        payload = EnrichmentPayload.model_validate({"emailVerification": None, "news": None})
        assert payload.to_body() == DEFAULT_PAYLOAD

    def test_job_listing_form_name_and_field_name(self):
        assert EnrichmentPayload.model_validate({"jobListing": False}).joblisting is False
        assert EnrichmentPayload.model_validate({"joblisting": False}).joblisting is False

    def test_frozen(self):
        payload = EnrichmentPayload()
        with pytest.raises(PydanticValidationError):
            payload.news = False


class TestSearchFilters:
    def test_defaults_use_api_keys(self):
        assert SearchFilters().to_body() == {
            "locations": [],
            "department": [],
            "level": [],
            "employeeCount": [],
            "revenue": [],
            "news": [],
            "title": {},
            "name": [],
            "companyName": {},
            "lookAlike": "",
            "keywordFilter": {},
            "industry": {},
            "domains": [],
            "fundingType": [],
            "skipOwnedLeads": True,
            "showOneLeadPerCompany": True,
        }

    def test_values_copied(self):
        filters = SearchFilters.model_validate(
            {
                "locations": ["San Francisco, CA"],
                "employeeCount": ["25 - 100"],
                "title": {"include": ["CEO"], "exclude": []},
                "lookAlike": "instantly.ai",
                "domains": ["example.com"],
            }
        )
        body = filters.to_body()
        assert body["locations"] == ["San Francisco, CA"]
        assert body["employeeCount"] == ["25 - 100"]
        assert body["title"] == {"include": ["CEO"], "exclude": []}
        assert body["lookAlike"] == "instantly.ai"
        assert body["domains"] == ["example.com"]

    def test_empty_values_fall_back_to_defaults(self):
        filters = SearchFilters.model_validate({"title": "", "lookAlike": "", "locations": []})
        body = filters.to_body()
        assert body["title"] == {}
        assert body["lookAlike"] == ""
        assert body["locations"] == []

    def test_false_booleans_kept(self):
        filters = SearchFilters.model_validate(
            {"skipOwnedLeads": False, "showOneLeadPerCompany": False}
        )
        body = filters.to_body()
        assert body["skipOwnedLeads"] is False
        assert body["showOneLeadPerCompany"] is False

    def test_snake_case_names_accepted(self):
        filters = SearchFilters.model_validate({"funding_type": ["seed"]})
        assert filters.to_body()["fundingType"] == ["seed"]
