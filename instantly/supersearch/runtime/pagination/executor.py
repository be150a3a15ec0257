"""Cursor pagination loop.

The executor repeatedly fetches pages, collects their items and follows
the cursor the API returns until one of the stop conditions holds:

- the response carries no next cursor
- a page holds no items
- the API hands back a cursor it already returned
- the policy's ``max_items`` or ``max_pages`` is reached
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from .definitions import PagePolicy, PaginationResult, extract_page_items, next_cursor
from .telemetry import log_page_completed, log_page_error, log_pagination_complete

logger = logging.getLogger(__name__)

FetchPage = Callable[[dict[str, Any]], Awaitable[Any]]


class CursorPaginator:
    """Follows ``next_starting_after`` cursors across listing pages."""

    def __init__(
        self,
        endpoint_id: str,
        policy: PagePolicy | None = None,
        *,
        extract_items: Callable[[Any], list[Any]] = extract_page_items,
        cursor_from: Callable[[Any], dict[str, Any] | None] = next_cursor,
    ) -> None:
        self._endpoint_id = endpoint_id
        self._policy = policy or PagePolicy()
        self._extract_items = extract_items
        self._cursor_from = cursor_from

    async def execute(self, fetch_page: FetchPage) -> PaginationResult:
        """Fetch pages until exhausted.

        Args:
            fetch_page: Async function taking the page query parameters
                (``limit`` plus the cursor, if any) and returning the raw page

        Returns:
            PaginationResult with all collected items
        """
        result = PaginationResult()
        cursor: dict[str, Any] | None = None
        seen: set[str] = set()

        while True:
            query: dict[str, Any] = {"limit": self._policy.page_size, **(cursor or {})}
            started = perf_counter()
            try:
                page = await fetch_page(query)
            except Exception as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page_index=result.pages_used,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            items = self._extract_items(page)
            log_page_completed(
                endpoint_id=self._endpoint_id,
                page_index=result.pages_used,
                items=len(items),
                latency_ms=(perf_counter() - started) * 1000.0,
            )
            result.pages_used += 1
            result.items.extend(items)

            if self._policy.max_items is not None and len(result.items) >= self._policy.max_items:
                result.truncated = len(result.items) > self._policy.max_items
                del result.items[self._policy.max_items :]
                break

            if not items:
                break

            cursor = self._cursor_from(page)
            if cursor is None:
                break

            key = repr(sorted(cursor.items()))
            if key in seen:
                logger.warning(
                    "Repeated pagination cursor, stopping",
                    extra={"endpoint_id": self._endpoint_id, "cursor": cursor},
                )
                break
            seen.add(key)

            if self._policy.max_pages is not None and result.pages_used >= self._policy.max_pages:
                result.truncated = True
                break

        log_pagination_complete(endpoint_id=self._endpoint_id, result=result)
        return result
