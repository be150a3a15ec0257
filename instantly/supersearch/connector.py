"""SuperSearch enrichment REST connector.

This connector turns user-supplied fields into Instantly v2 API requests
and returns the JSON responses unchanged.

Architecture:
    Each operation validates its fields into a parameter model, resolves
    resource locators to IDs, then looks up the endpoint spec and adapter
    from the endpoint registry and executes them with ``RestRunner``.
    Listing endpoints are followed across pages with the cursor paginator.

Request Flow:
    1. Field validation → parameter model (``parse_parameters``)
    2. Locator resolution → plain resource IDs
    3. Endpoint lookup → spec + adapter
    4. RestRunner → HTTP request, adapter parse
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable, Mapping
from time import perf_counter
from typing import Any

import aiohttp

from .config import API_KEY_ENV_VAR, BASE_URL, DEFAULT_TIMEOUT, MAX_PAGE_LIMIT
from .core.enums import Operation
from .core.exceptions import AuthenticationError, EnrichmentError, ProviderError, ValidationError
from .endpoints import get_endpoint_adapter, get_endpoint_spec
from .locator import get_resource_locator_value
from .models import (
    AddToResourceParams,
    AIEnrichmentParams,
    CreateEnrichmentParams,
    GetEnrichmentParams,
    HistoryParams,
    ResourceOption,
    RunEnrichmentParams,
)
from .parameters import parse_parameters, resolve_operation
from .runtime.rest import RESTProvider, RestRunner, RESTTransport

logger = logging.getLogger(__name__)

Fields = Mapping[str, Any]


class SuperSearchEnrichmentConnector(RESTProvider):
    """Instantly SuperSearch enrichment operations.

    Every operation accepts either its parameter model or a raw field
    mapping using the form's camelCase names.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the connector.

        Args:
            api_key: Instantly API key. Read from ``INSTANTLY_API_KEY`` when
                not given.
            base_url: API base URL
            timeout: Total request timeout in seconds

        Raises:
            AuthenticationError: If no API key is available
        """
        api_key = api_key or os.environ.get(API_KEY_ENV_VAR)
        if not api_key:
            raise AuthenticationError(
                f"An Instantly API key is required (pass api_key or set {API_KEY_ENV_VAR})"
            )
        self.base_url = base_url
        self._transport = RESTTransport(
            base_url=base_url,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout,
        )
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from an endpoint.

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec, adapter = self._resolve(endpoint_id)
        logger.debug("Fetching endpoint", extra={"endpoint_id": endpoint_id})
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def fetch_all(self, endpoint_id: str, params: dict[str, Any]) -> list[Any]:
        """Fetch every page of a paginated endpoint."""
        spec, adapter = self._resolve(endpoint_id)
        logger.debug("Paginating endpoint", extra={"endpoint_id": endpoint_id})
        return await self._runner.paginate(spec=spec, adapter=adapter, params=params)

    async def fetch_health(self) -> dict[str, object]:
        """List a single campaign to verify connectivity and credentials."""
        start = perf_counter()
        await self.fetch("campaigns", {"limit": 1})
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "provider": "instantly",
            "status": "ok",
            "latency_ms": latency_ms,
            "endpoint": "campaigns",
        }

    async def create(self, params: CreateEnrichmentParams | Fields) -> Any:
        """Create a SuperSearch enrichment."""
        request = parse_parameters(Operation.CREATE, params)
        return await self.fetch("create", {"request": request})

    async def get(self, params: GetEnrichmentParams | Fields) -> Any:
        """Get a SuperSearch enrichment by resource ID."""
        request = parse_parameters(Operation.GET, params)
        resource_id = get_resource_locator_value(request.resource_id)
        return await self.fetch("get", {"request": request, "resource_id": resource_id})

    async def run(self, params: RunEnrichmentParams | Fields) -> Any:
        """Run an enrichment for specific leads or all unenriched leads."""
        request = parse_parameters(Operation.RUN, params)
        enrichment_id = get_resource_locator_value(request.enrichment_id, field="enrichmentId")
        return await self.fetch("run", {"request": request, "enrichment_id": enrichment_id})

    async def add_to_resource(self, params: AddToResourceParams | Fields) -> Any:
        """Add enrichment to a campaign or lead list."""
        request = parse_parameters(Operation.ADD_TO_RESOURCE, params)
        resource_id = get_resource_locator_value(request.resource_id)
        return await self.fetch("add_to_resource", {"request": request, "resource_id": resource_id})

    async def run_ai_enrichment(self, params: AIEnrichmentParams | Fields) -> Any:
        """Run AI personalization on the leads of a resource."""
        request = parse_parameters(Operation.RUN_AI_ENRICHMENT, params)
        resource_id = get_resource_locator_value(request.resource_id)
        return await self.fetch("ai_enrichment", {"request": request, "resource_id": resource_id})

    async def get_history(self, params: HistoryParams | Fields) -> Any:
        """Get enrichment history for a resource.

        Returns the single page response, or the list of every history entry
        when ``return_all`` is set.

        Raises:
            ValidationError: If ``limit`` exceeds the API maximum of 100
        """
        request = parse_parameters(Operation.GET_HISTORY, params)
        if request.limit > MAX_PAGE_LIMIT:
            raise ValidationError(
                f"Limit cannot exceed {MAX_PAGE_LIMIT}. "
                f"Instantly API has a maximum limit of {MAX_PAGE_LIMIT}."
            )
        resource_id = get_resource_locator_value(request.resource_id)
        endpoint_params = {"request": request, "resource_id": resource_id, "limit": request.limit}
        if request.return_all:
            return await self.fetch_all("history", endpoint_params)
        return await self.fetch("history", endpoint_params)

    async def list_resources(self) -> list[ResourceOption]:
        """Campaigns followed by lead lists, for resource pickers.

        Listing failures are logged and produce an empty list.
        """
        try:
            campaigns = await self.fetch_all("campaigns", {})
            lead_lists = await self.fetch_all("lead_lists", {})
        except (ProviderError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "Could not list resources",
                extra={"status_code": getattr(e, "status_code", None), "error": str(e)},
            )
            return []
        return [*campaigns, *lead_lists]

    async def list_enrichments(self) -> list[ResourceOption]:
        """Enrichments for enrichment pickers.

        The API has no endpoint listing enrichments, so there is nothing
        to offer; the ID has to be entered by hand.
        """
        return []

    async def execute(
        self,
        operation: Operation | str,
        fields: Fields,
        *,
        item_index: int = 0,
    ) -> list[Any]:
        """Run ``operation`` for one input item.

        Returns:
            Output items: one per response, or one per history entry when
            all history pages were requested
        """
        op = resolve_operation(operation)
        handler = self._handlers()[op]
        logger.debug("Executing operation", extra={"operation": op.value, "item_index": item_index})
        try:
            result = await handler(fields)
        except EnrichmentError as e:
            if e.item_index is None:
                e.item_index = item_index
            logger.error(
                "Operation failed",
                extra={"operation": op.value, "item_index": item_index},
            )
            raise

        if op == Operation.GET_HISTORY and isinstance(result, list):
            return result
        return [result]

    async def execute_many(
        self,
        operation: Operation | str,
        items: Iterable[Fields],
        *,
        continue_on_fail: bool = False,
    ) -> list[Any]:
        """Run ``operation`` for each input item in order.

        With ``continue_on_fail`` a failing item yields ``{"error": message}``
        instead of aborting the batch.
        """
        results: list[Any] = []
        for index, fields in enumerate(items):
            try:
                results.extend(await self.execute(operation, fields, item_index=index))
            except EnrichmentError as e:
                if not continue_on_fail:
                    raise
                results.append({"error": str(e)})
        return results

    async def close(self) -> None:
        await self._transport.close()

    def _handlers(self) -> dict[Operation, Any]:
        return {
            Operation.CREATE: self.create,
            Operation.GET: self.get,
            Operation.RUN: self.run,
            Operation.ADD_TO_RESOURCE: self.add_to_resource,
            Operation.RUN_AI_ENRICHMENT: self.run_ai_enrichment,
            Operation.GET_HISTORY: self.get_history,
        }

    def _resolve(self, endpoint_id: str):
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return spec, adapter_cls()
