"""Pagination data structures and Instantly cursor helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...config import CURSOR_PARAM, ITEMS_KEY, MAX_PAGE_LIMIT, NEXT_CURSOR_KEY


@dataclass(frozen=True)
class PagePolicy:
    """Pagination limits for an endpoint.

    Attributes:
        page_size: Items requested per page
        max_items: Stop once this many items were collected (None = no cap)
        max_pages: Hard stop on the number of pages fetched (None = no cap)
    """

    page_size: int = MAX_PAGE_LIMIT
    max_items: int | None = None
    max_pages: int | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")
        if self.max_items is not None and self.max_items < 1:
            raise ValueError("max_items must be at least 1")
        if self.max_pages is not None and self.max_pages < 1:
            raise ValueError("max_pages must be at least 1")


@dataclass
class PaginationResult:
    """Result of a pagination run."""

    items: list[Any] = field(default_factory=list)
    pages_used: int = 0
    truncated: bool = False

    @property
    def total_items(self) -> int:
        return len(self.items)


def extract_page_items(response: Any) -> list[Any]:
    """Return the items of one listing page.

    A bare list is a complete page; a mapping carries its items under
    ``items``.
    """
    if isinstance(response, list):
        return response
    if isinstance(response, dict):
        items = response.get(ITEMS_KEY)
        return list(items) if items else []
    return []


def next_cursor(response: Any) -> dict[str, Any] | None:
    """Query parameters for the page after ``response``, or None at the end."""
    if not isinstance(response, dict):
        return None
    cursor = response.get(NEXT_CURSOR_KEY)
    if not cursor:
        return None
    return {CURSOR_PARAM: cursor}
