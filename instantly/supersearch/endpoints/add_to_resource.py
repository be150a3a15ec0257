"""Add SuperSearch enrichment to a campaign or lead list."""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import enrichment_path
from instantly.supersearch.models import AddToResourceParams
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return enrichment_path(params["resource_id"], "add")


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    request: AddToResourceParams = params["request"]
    options = request.additional_options

    body: dict[str, Any] = {"enrichment_payload": request.enrichment_types.to_body()}
    if options.auto_update is not None:
        body["auto_update"] = options.auto_update
    if options.skip_rows_without_email is not None:
        body["skip_rows_without_email"] = options.skip_rows_without_email
    if options.limit:
        body["limit"] = options.limit
    return body


SPEC = RestEndpointSpec(
    id="add_to_resource",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    pass
