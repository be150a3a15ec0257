"""Shared Instantly API constants.

This module centralizes the base URL, endpoint paths and API limits used by
the endpoint definitions and the connector so they stay small and focused.
"""

from __future__ import annotations

BASE_URL = "https://api.instantly.ai"
API_PREFIX = "/api/v2"

ENRICHMENT_PATH = f"{API_PREFIX}/supersearch-enrichment"
CAMPAIGNS_PATH = f"{API_PREFIX}/campaigns"
LEAD_LISTS_PATH = f"{API_PREFIX}/lead-lists"

# Instantly rejects page sizes above 100 on every listing endpoint
MAX_PAGE_LIMIT = 100
DEFAULT_HISTORY_LIMIT = 50
DEFAULT_CREATE_LIMIT = 100

API_KEY_ENV_VAR = "INSTANTLY_API_KEY"
DEFAULT_TIMEOUT = 30.0

# Response keys used by v2 cursor pagination
ITEMS_KEY = "items"
NEXT_CURSOR_KEY = "next_starting_after"
CURSOR_PARAM = "starting_after"


def enrichment_path(*parts: str) -> str:
    """Build a path below the SuperSearch enrichment root.

    Examples:
        >>> enrichment_path()
        '/api/v2/supersearch-enrichment'
        >>> enrichment_path("history", "abc")
        '/api/v2/supersearch-enrichment/history/abc'
    """
    if not parts:
        return ENRICHMENT_PATH
    return "/".join([ENRICHMENT_PATH, *parts])
