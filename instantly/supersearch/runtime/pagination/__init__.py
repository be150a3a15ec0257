"""Cursor pagination for listing endpoints."""

from .definitions import PagePolicy, PaginationResult, extract_page_items, next_cursor
from .executor import CursorPaginator

__all__ = [
    "CursorPaginator",
    "PagePolicy",
    "PaginationResult",
    "extract_page_items",
    "next_cursor",
]
