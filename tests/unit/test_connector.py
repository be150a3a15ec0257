"""Unit tests for SuperSearchEnrichmentConnector.

The transport is mocked; tests check the requests each operation issues
and how responses come back.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from instantly.supersearch import (
    AuthenticationError,
    CreateEnrichmentParams,
    Operation,
    ProviderError,
    ResourceOption,
    SuperSearchEnrichmentConnector,
    ValidationError,
)

UUID = "01234567-89ab-cdef-0123-456789abcdef"


def _response(body):
    response = AsyncMock()
    response.status = 200
    response.headers = {}
    response.json = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


@pytest.fixture
def connector():
    connector = SuperSearchEnrichmentConnector(api_key="test-key")
    connector._transport.get = AsyncMock(return_value={"id": "enr-1", "status": "ok"})
    connector._transport.post = AsyncMock(return_value={"id": "enr-1", "status": "ok"})
    return connector


class TestConstruction:
    def test_api_key_sets_bearer_header(self):
        connector = SuperSearchEnrichmentConnector(api_key="secret")
        assert connector._transport._http.headers == {"Authorization": "Bearer secret"}
        assert connector.base_url == "https://api.instantly.ai"

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("INSTANTLY_API_KEY", "from-env")
        connector = SuperSearchEnrichmentConnector()
        assert connector._transport._http.headers["Authorization"] == "Bearer from-env"

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("INSTANTLY_API_KEY", raising=False)
        with pytest.raises(AuthenticationError, match="INSTANTLY_API_KEY"):
            SuperSearchEnrichmentConnector()

    def test_context_manager_closes(self):
        async def run() -> bool:
            async with SuperSearchEnrichmentConnector(api_key="k") as connector:
                connector._transport.close = AsyncMock()
                closer = connector._transport.close
            closer.assert_awaited_once()
            return True

        assert asyncio.run(run())


class TestOperations:
    @pytest.mark.asyncio
    async def test_create(self, connector):
        result = await connector.create(
            {"name": "Founders", "searchFilters": {"locations": ["Berlin"]}}
        )

        assert result == {"id": "enr-1", "status": "ok"}
        args, kwargs = connector._transport.post.call_args
        assert args == ("/api/v2/supersearch-enrichment",)
        body = kwargs["json_body"]
        assert body["search_name"] == "Founders"
        assert body["search_filters"]["locations"] == ["Berlin"]
        assert body["limit"] == 100

    @pytest.mark.asyncio
    async def test_create_accepts_model(self, connector):
        await connector.create(CreateEnrichmentParams(name="Model"))
        assert connector._transport.post.call_args.kwargs["json_body"]["search_name"] == "Model"

    @pytest.mark.asyncio
    async def test_get_with_locator(self, connector):
        await connector.get(
            {"resourceId": {"mode": "id", "value": UUID}, "getAllEnrichments": True}
        )

        connector._transport.get.assert_awaited_once_with(
            f"/api/v2/supersearch-enrichment/{UUID}", params={"all": True}, headers=None
        )

    @pytest.mark.asyncio
    async def test_get_without_all(self, connector):
        await connector.get({"resourceId": "r1"})

        connector._transport.get.assert_awaited_once_with(
            "/api/v2/supersearch-enrichment/r1", params={}, headers=None
        )

    @pytest.mark.asyncio
    async def test_run(self, connector):
        await connector.run({"enrichmentId": {"mode": "list", "value": "e1"}})

        connector._transport.post.assert_awaited_once_with(
            "/api/v2/supersearch-enrichment/run", json_body={"enrichment_id": "e1"}, headers=None
        )

    @pytest.mark.asyncio
    async def test_run_requires_enrichment_id(self, connector):
        with pytest.raises(ValidationError, match="enrichmentId is required"):
            await connector.run({"enrichmentId": {"mode": "list", "value": ""}})
        connector._transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_to_resource(self, connector):
        await connector.add_to_resource({"resourceId": "r1"})

        args, kwargs = connector._transport.post.call_args
        assert args == ("/api/v2/supersearch-enrichment/r1/add",)
        assert set(kwargs["json_body"]) == {"enrichment_payload"}

    @pytest.mark.asyncio
    async def test_run_ai_enrichment(self, connector):
        await connector.run_ai_enrichment({"resourceId": "r1", "outputColumn": "opener"})

        args, kwargs = connector._transport.post.call_args
        assert args == ("/api/v2/supersearch-enrichment/ai",)
        assert kwargs["json_body"]["output_column"] == "opener"
        assert kwargs["json_body"]["resource_id"] == "r1"

    @pytest.mark.asyncio
    async def test_remote_errors_propagate(self, connector):
        connector._transport.post = AsyncMock(
            side_effect=ProviderError("POST failed with status 400", status_code=400)
        )
        with pytest.raises(ProviderError) as exc_info:
            await connector.create({"name": "x"})
        assert exc_info.value.status_code == 400


class TestHistory:
    @pytest.mark.asyncio
    async def test_single_page(self, connector):
        connector._transport.get = AsyncMock(return_value={"items": [{"id": 1}]})

        result = await connector.get_history({"resourceId": "r1", "limit": 20})

        assert result == {"items": [{"id": 1}]}
        connector._transport.get.assert_awaited_once_with(
            "/api/v2/supersearch-enrichment/history/r1", params={"limit": 20}, headers=None
        )

    @pytest.mark.asyncio
    async def test_limit_above_100_rejected_before_request(self, connector):
        with pytest.raises(ValidationError, match="Limit cannot exceed 100"):
            await connector.get_history({"resourceId": "r1", "limit": 101})
        connector._transport.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_limit_of_100_allowed(self, connector):
        await connector.get_history({"resourceId": "r1", "limit": 100})
        assert connector._transport.get.call_args.kwargs["params"] == {"limit": 100}

    @pytest.mark.asyncio
    async def test_return_all_paginates(self, connector):
        connector._transport.get = AsyncMock(
            side_effect=[
                {"items": [{"id": 1}, {"id": 2}], "next_starting_after": "2"},
                {"items": [{"id": 3}], "next_starting_after": None},
            ]
        )

        result = await connector.get_history({"resourceId": "r1", "returnAll": True})

        assert result == [{"id": 1}, {"id": 2}, {"id": 3}]
        second = connector._transport.get.call_args_list[1]
        assert second.kwargs["params"] == {"limit": 100, "starting_after": "2"}


class TestExecute:
    @pytest.mark.asyncio
    async def test_single_response_becomes_one_item(self, connector):
        items = await connector.execute("create", {"name": "x"})
        assert items == [{"id": "enr-1", "status": "ok"}]

    @pytest.mark.asyncio
    async def test_history_return_all_yields_item_per_entry(self, connector):
        connector._transport.get = AsyncMock(return_value={"items": [{"id": 1}, {"id": 2}]})

        items = await connector.execute(
            Operation.GET_HISTORY, {"resourceId": "r1", "returnAll": True}
        )

        assert items == [{"id": 1}, {"id": 2}]

    @pytest.mark.asyncio
    async def test_unknown_operation(self, connector):
        with pytest.raises(ValidationError, match="Unknown operation"):
            await connector.execute("delete", {})

    @pytest.mark.asyncio
    async def test_validation_error_carries_item_index(self, connector):
        with pytest.raises(ValidationError) as exc_info:
            await connector.execute("getHistory", {"resourceId": "r1", "limit": 500}, item_index=4)
        assert exc_info.value.item_index == 4

    @pytest.mark.asyncio
    async def test_execute_many_stops_on_failure(self, connector):
        with pytest.raises(ValidationError) as exc_info:
            await connector.execute_many("create", [{"name": "a"}, {"name": ""}, {"name": "c"}])
        assert exc_info.value.item_index == 1
        assert connector._transport.post.await_count == 1

    @pytest.mark.asyncio
    async def test_execute_many_continue_on_fail(self, connector):
        items = await connector.execute_many(
            "create", [{"name": "a"}, {"name": ""}, {"name": "c"}], continue_on_fail=True
        )

        assert len(items) == 3
        assert items[0] == {"id": "enr-1", "status": "ok"}
        assert "name" in items[1]["error"]
        assert connector._transport.post.await_count == 2

    @pytest.mark.asyncio
    async def test_execute_many_continue_on_fail_after_connection_reset(self):
        connector = SuperSearchEnrichmentConnector(api_key="test-key")
        session = MagicMock()
        session.closed = False
        session.post.side_effect = [
            _response({"id": "a"}),
            aiohttp.ClientConnectionError("reset"),
            _response({"id": "c"}),
        ]
        connector._transport._http._session = session

        items = await connector.execute_many(
            "create", [{"name": "a"}, {"name": "b"}, {"name": "c"}], continue_on_fail=True
        )

        assert items[0] == {"id": "a"}
        assert "reset" in items[1]["error"]
        assert items[2] == {"id": "c"}

    @pytest.mark.asyncio
    async def test_execute_many_timeout_stops_without_continue_on_fail(self):
        connector = SuperSearchEnrichmentConnector(api_key="test-key")
        session = MagicMock()
        session.closed = False
        session.post.side_effect = asyncio.TimeoutError()
        connector._transport._http._session = session

        with pytest.raises(ProviderError) as exc_info:
            await connector.execute_many("create", [{"name": "a"}, {"name": "b"}])
        assert exc_info.value.item_index == 0

    @pytest.mark.asyncio
    async def test_remote_error_carries_item_index(self, connector):
        connector._transport.post = AsyncMock(side_effect=ProviderError("boom", status_code=500))

        with pytest.raises(ProviderError) as exc_info:
            await connector.execute("create", {"name": "x"}, item_index=3)

        assert exc_info.value.item_index == 3
        assert exc_info.value.status_code == 500


class TestPickers:
    @pytest.mark.asyncio
    async def test_list_resources(self, connector):
        connector._transport.get = AsyncMock(
            side_effect=[
                {"items": [{"id": "c1", "name": "Spring"}]},
                {"items": [{"id": "l1", "name": "Founders"}]},
            ]
        )

        options = await connector.list_resources()

        assert options == [
            ResourceOption(name="Campaign: Spring", value="c1"),
            ResourceOption(name="List: Founders", value="l1"),
        ]
        paths = [call.args[0] for call in connector._transport.get.call_args_list]
        assert paths == ["/api/v2/campaigns", "/api/v2/lead-lists"]

    @pytest.mark.asyncio
    async def test_list_resources_failure_returns_empty(self, connector):
        connector._transport.get = AsyncMock(side_effect=ProviderError("boom", status_code=500))
        assert await connector.list_resources() == []

    @pytest.mark.asyncio
    async def test_list_resources_connection_failure_returns_empty(self, connector):
        connector._transport.get = AsyncMock(side_effect=aiohttp.ClientConnectionError("down"))
        assert await connector.list_resources() == []

    @pytest.mark.asyncio
    async def test_list_resources_timeout_returns_empty(self, connector):
        connector._transport.get = AsyncMock(side_effect=asyncio.TimeoutError())
        assert await connector.list_resources() == []

    @pytest.mark.asyncio
    async def test_list_resources_follows_pages(self, connector):
        connector._transport.get = AsyncMock(
            side_effect=[
                {"items": [{"id": "c1", "name": "Spring"}], "next_starting_after": "c1"},
                {"items": [{"id": "c2", "name": "Summer"}]},
                {"items": [{"id": "l1", "name": "Founders"}]},
            ]
        )

        options = await connector.list_resources()

        assert [option.value for option in options] == ["c1", "c2", "l1"]
        second = connector._transport.get.call_args_list[1]
        assert second.args[0] == "/api/v2/campaigns"
        assert second.kwargs["params"] == {"limit": 100, "starting_after": "c1"}

    @pytest.mark.asyncio
    async def test_list_enrichments_is_empty(self, connector):
        assert await connector.list_enrichments() == []


class TestFetch:
    @pytest.mark.asyncio
    async def test_unknown_endpoint(self, connector):
        with pytest.raises(ValueError, match="Unknown REST endpoint"):
            await connector.fetch("nope", {})

    @pytest.mark.asyncio
    async def test_fetch_health(self, connector):
        health = await connector.fetch_health()

        assert health["status"] == "ok"
        assert health["latency_ms"] >= 0
        connector._transport.get.assert_awaited_once_with(
            "/api/v2/campaigns", params={"limit": 1}, headers=None
        )
