"""Create SuperSearch enrichment endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import DEFAULT_CREATE_LIMIT, enrichment_path
from instantly.supersearch.models import CreateEnrichmentParams
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(_params: dict[str, Any]) -> str:
    return enrichment_path()


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the create request body.

    ``limit`` falls back to 100 when no max results were given. Optional
    fields are only sent when set.
    """
    request: CreateEnrichmentParams = params["request"]
    extra = request.additional_fields

    body: dict[str, Any] = {
        "enrichment_payload": request.enrichment_settings.to_body(),
        "search_filters": request.search_filters.to_body(),
        "search_name": request.name,
        "limit": extra.max_results or DEFAULT_CREATE_LIMIT,
    }

    resource_id = extra.resource_id or request.resource_id
    if resource_id:
        body["resource_id"] = resource_id
    resource_type = extra.resource_type if extra.resource_type is not None else request.resource_type
    if resource_type is not None:
        body["resource_type"] = int(resource_type)

    if extra.list_name:
        body["list_name"] = extra.list_name
    if extra.auto_update is not None:
        body["auto_update"] = extra.auto_update
    if extra.skip_rows_without_email is not None:
        body["skip_rows_without_email"] = extra.skip_rows_without_email
    return body


SPEC = RestEndpointSpec(
    id="create",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    """Return the created enrichment as sent by the API."""
