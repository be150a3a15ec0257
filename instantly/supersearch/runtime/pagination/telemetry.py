"""Structured logging for pagination runs."""

from __future__ import annotations

import logging

from .definitions import PaginationResult

logger = logging.getLogger(__name__)


def log_page_completed(*, endpoint_id: str, page_index: int, items: int, latency_ms: float) -> None:
    """Log a single fetched page."""
    logger.info(
        "page_completed",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "items": items,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(*, endpoint_id: str, page_index: int, error_type: str, error_message: str) -> None:
    """Log a page fetch that raised."""
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(*, endpoint_id: str, result: PaginationResult) -> None:
    """Log the end of a pagination run."""
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_used": result.pages_used,
            "total_items": result.total_items,
            "truncated": result.truncated,
        },
    )
