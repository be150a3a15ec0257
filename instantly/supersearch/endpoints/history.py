"""Enrichment history endpoint definition and adapter.

Supports a single page with an explicit ``limit`` and cursor pagination
over the whole history.
"""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import enrichment_path
from instantly.supersearch.runtime.pagination import next_cursor
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return enrichment_path("history", params["resource_id"])


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"limit": params["limit"]}


SPEC = RestEndpointSpec(
    id="history",
    method="GET",
    build_path=build_path,
    build_query=build_query,
    next_cursor=next_cursor,
)


class Adapter(ResponseAdapter):
    pass
