"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..pagination import CursorPaginator, PagePolicy, extract_page_items
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    next_cursor: Callable[[Any], dict[str, Any] | None] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response

    def parse_page(self, response: Any, params: dict[str, Any]) -> list[Any]:
        return extract_page_items(response)


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        if spec.method.upper() == "GET":
            data = await self._t.get(path, params=query, headers=headers)
        else:
            data = await self._t.post(path, json_body=body, headers=headers)

        return adapter.parse(data, params)

    async def paginate(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        policy: PagePolicy | None = None,
    ) -> list[Any]:
        """Collect every item of a cursor-paginated GET endpoint."""
        if spec.next_cursor is None or spec.method.upper() != "GET":
            raise ValueError(f"Endpoint {spec.id} does not support pagination")

        path = spec.build_path(params)
        headers = spec.build_headers(params) if spec.build_headers else None
        base_query = dict(spec.build_query(params)) if spec.build_query else {}
        # Page size comes from the policy, not the single-page query
        base_query.pop("limit", None)

        async def fetch_page(page_query: dict[str, Any]) -> Any:
            return await self._t.get(path, params={**base_query, **page_query}, headers=headers)

        paginator = CursorPaginator(
            spec.id,
            policy,
            extract_items=lambda page: adapter.parse_page(page, params),
            cursor_from=spec.next_cursor,
        )
        result = await paginator.execute(fetch_page)
        return result.items
