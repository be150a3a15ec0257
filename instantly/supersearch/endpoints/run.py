"""Run SuperSearch enrichment endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import enrichment_path
from instantly.supersearch.models import RunEnrichmentParams
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(_params: dict[str, Any]) -> str:
    return enrichment_path("run")


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    request: RunEnrichmentParams = params["request"]
    options = request.run_options

    body: dict[str, Any] = {"enrichment_id": params["enrichment_id"]}
    if options.lead_ids:
        body["lead_ids"] = list(options.lead_ids)
    if options.enrichment_type:
        body["enrichment_type"] = options.enrichment_type.value
    if options.limit:
        body["limit"] = options.limit
    return body


SPEC = RestEndpointSpec(
    id="run",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    pass
