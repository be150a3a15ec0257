"""SuperSearch enrichment endpoint registry.

Maps endpoint IDs to their specifications and response adapters.
"""

from __future__ import annotations

from instantly.supersearch.runtime.rest import ResponseAdapter, RestEndpointSpec

from .add_to_resource import SPEC as AddToResourceSpec  # noqa: N811
from .add_to_resource import Adapter as AddToResourceAdapter
from .ai_enrichment import SPEC as AIEnrichmentSpec  # noqa: N811
from .ai_enrichment import Adapter as AIEnrichmentAdapter
from .create import SPEC as CreateSpec  # noqa: N811
from .create import Adapter as CreateAdapter
from .get import SPEC as GetSpec  # noqa: N811
from .get import Adapter as GetAdapter
from .history import SPEC as HistorySpec  # noqa: N811
from .history import Adapter as HistoryAdapter
from .resources import CAMPAIGNS_SPEC as CampaignsSpec  # noqa: N811
from .resources import LEAD_LISTS_SPEC as LeadListsSpec  # noqa: N811
from .resources import CampaignsAdapter, LeadListsAdapter
from .run import SPEC as RunSpec  # noqa: N811
from .run import Adapter as RunAdapter

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "create": (CreateSpec, CreateAdapter),
    "get": (GetSpec, GetAdapter),
    "run": (RunSpec, RunAdapter),
    "add_to_resource": (AddToResourceSpec, AddToResourceAdapter),
    "ai_enrichment": (AIEnrichmentSpec, AIEnrichmentAdapter),
    "history": (HistorySpec, HistoryAdapter),
    "campaigns": (CampaignsSpec, CampaignsAdapter),
    "lead_lists": (LeadListsSpec, LeadListsAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "create", "history")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
    "AddToResourceSpec",
    "AddToResourceAdapter",
    "AIEnrichmentSpec",
    "AIEnrichmentAdapter",
    "CampaignsSpec",
    "CampaignsAdapter",
    "CreateSpec",
    "CreateAdapter",
    "GetSpec",
    "GetAdapter",
    "HistorySpec",
    "HistoryAdapter",
    "LeadListsSpec",
    "LeadListsAdapter",
    "RunSpec",
    "RunAdapter",
]
