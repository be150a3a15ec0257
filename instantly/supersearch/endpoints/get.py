"""Get SuperSearch enrichment endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import enrichment_path
from instantly.supersearch.models import GetEnrichmentParams
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return enrichment_path(params["resource_id"])


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    request: GetEnrichmentParams = params["request"]
    return {"all": True} if request.get_all_enrichments else {}


SPEC = RestEndpointSpec(
    id="get",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    pass
