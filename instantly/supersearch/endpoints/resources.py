"""Campaign and lead list listings used to populate resource pickers."""

from __future__ import annotations

from typing import Any

from instantly.supersearch.config import CAMPAIGNS_PATH, LEAD_LISTS_PATH, MAX_PAGE_LIMIT
from instantly.supersearch.models import ResourceOption
from instantly.supersearch.runtime.pagination import extract_page_items, next_cursor
from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"limit": params.get("limit", MAX_PAGE_LIMIT)}


CAMPAIGNS_SPEC = RestEndpointSpec(
    id="campaigns",
    method="GET",
    build_path=lambda _p: CAMPAIGNS_PATH,
    build_query=build_query,
    next_cursor=next_cursor,
)

LEAD_LISTS_SPEC = RestEndpointSpec(
    id="lead_lists",
    method="GET",
    build_path=lambda _p: LEAD_LISTS_PATH,
    build_query=build_query,
    next_cursor=next_cursor,
)


class _OptionsAdapter(ResponseAdapter):
    """Turn listing entries into labelled picker options."""

    label = ""

    def parse(self, response: Any, params: dict[str, Any]) -> list[ResourceOption]:
        return self.parse_page(response, params)

    def parse_page(self, response: Any, params: dict[str, Any]) -> list[ResourceOption]:
        return [
            ResourceOption(name=f"{self.label}: {entry.get('name', '')}", value=str(entry["id"]))
            for entry in extract_page_items(response)
            if isinstance(entry, dict) and entry.get("id")
        ]


class CampaignsAdapter(_OptionsAdapter):
    label = "Campaign"


class LeadListsAdapter(_OptionsAdapter):
    label = "List"
