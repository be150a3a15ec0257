"""AI personalization endpoint definition and adapter.

Runs an AI model over the leads of a campaign or list and stores the
output in ``output_column``.
"""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import enrichment_path
from instantly.supersearch.models import AIEnrichmentParams
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec

# Optional booleans copied when explicitly set, keyed by body name
_FLAG_FIELDS = (
    "use_instantly_account",
    "overwrite",
    "auto_update",
    "skip_leads_without_email",
)


def build_path(_params: dict[str, Any]) -> str:
    return enrichment_path("ai")


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    request: AIEnrichmentParams = params["request"]
    settings = request.additional_settings

    body: dict[str, Any] = {
        "resource_id": params["resource_id"],
        "output_column": request.output_column,
        "resource_type": int(request.resource_type),
        "model_version": request.model_version.value,
    }

    if settings.input_columns:
        body["input_columns"] = list(settings.input_columns)
    for name in _FLAG_FIELDS:
        value = getattr(settings, name)
        if value is not None:
            body[name] = value
    if settings.limit:
        body["limit"] = settings.limit
    prompt = settings.prompt or request.prompt
    if prompt:
        body["prompt"] = prompt
    if settings.template_id:
        body["template_id"] = settings.template_id
    return body


SPEC = RestEndpointSpec(
    id="ai_enrichment",
    method="POST",
    build_path=build_path,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    pass
