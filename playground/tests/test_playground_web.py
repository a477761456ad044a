"""Tests for the web playground API."""

from contextlib import asynccontextmanager
from decimal import Decimal

import aiohttp
import pytest
from pydantic import BaseModel

from jam_core import ExecutionContext, NodeCategory, NodeResult, create_registry, define_node
from jam_core.config import PlaygroundConfig
from jam_playground.runner import Playground
from jam_playground.web import PlaygroundServer, PlaygroundServerConfig


@asynccontextmanager
async def running_server(playground):
    """Start a PlaygroundServer on an OS-assigned port for the duration of a test."""
    server = PlaygroundServer(playground, PlaygroundServerConfig(host="127.0.0.1", port=0))
    await server.start()
    try:
        yield server
    finally:
        await server.stop()


def _base_url(server: PlaygroundServer) -> str:
    return f"http://127.0.0.1:{server.port}"


async def _get(playground, path, params=None):
    async with running_server(playground) as server:
        async with aiohttp.ClientSession() as session:
            async with session.get(f"{_base_url(server)}{path}", params=params) as resp:
                return resp.status, await resp.json()


async def _post(playground, payload=None, data=None):
    async with running_server(playground) as server:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                f"{_base_url(server)}/api/execute", json=payload, data=data
            ) as resp:
                return resp.status, await resp.json()


class TestServerLifecycle:
    @pytest.mark.asyncio
    async def test_start_stop(self, playground):
        server = PlaygroundServer(playground, PlaygroundServerConfig(port=0))

        await server.start()
        assert server.is_running
        assert server.port is not None

        await server.stop()
        assert not server.is_running
        assert server.port is None

    @pytest.mark.asyncio
    async def test_stop_when_not_started(self, playground):
        server = PlaygroundServer(playground)

        await server.stop()
        assert not server.is_running


class TestNodeRoutes:
    @pytest.mark.asyncio
    async def test_list_nodes(self, playground):
        status, body = await _get(playground, "/api/nodes")

        assert status == 200
        types = [node["type"] for node in body["nodes"]]
        assert len(types) == 16
        assert "social_ai_analyze" in types

    @pytest.mark.asyncio
    async def test_list_by_category(self, playground):
        status, body = await _get(playground, "/api/nodes", {"category": "transform"})

        assert status == 200
        assert [node["type"] for node in body["nodes"]] == ["map", "filter"]

    @pytest.mark.asyncio
    async def test_list_unknown_category(self, playground):
        status, body = await _get(playground, "/api/nodes", {"category": "magic"})

        assert status == 400
        assert "Unknown category 'magic'" in body["error"]

    @pytest.mark.asyncio
    async def test_get_node(self, playground):
        status, body = await _get(playground, "/api/nodes/twitter_monitor")

        assert status == 200
        assert body["type"] == "twitter_monitor"
        assert any(f["name"] == "keywords" for f in body["fields"])
        assert body["services"] == [
            {"service": "twitter", "displayName": "TwitterAPI.io", "configured": False}
        ]

    @pytest.mark.asyncio
    async def test_get_node_with_non_json_default(self, store):
        class ThresholdInput(BaseModel):
            threshold: Decimal = Decimal("0.5")

        class ThresholdOutput(BaseModel):
            passed: bool

        @define_node(
            type="threshold",
            name="Threshold",
            description="Compare against a threshold",
            category=NodeCategory.LOGIC,
            input_schema=ThresholdInput,
            output_schema=ThresholdOutput,
        )
        async def threshold_node(input: ThresholdInput, context: ExecutionContext) -> NodeResult:
            return NodeResult.ok(ThresholdOutput(passed=True))

        playground = Playground(
            registry=create_registry([threshold_node]),
            config=PlaygroundConfig(mock_delay_ms=0),
            store=store,
        )

        status, body = await _get(playground, "/api/nodes/threshold")

        assert status == 200
        assert body["exampleInput"] == {"threshold": "0.5"}
        assert body["fields"][0]["default"] == "0.5"

    @pytest.mark.asyncio
    async def test_get_node_sees_saved_credentials(self, playground, store):
        store.save("twitter", {"api_key": "saved"})

        _, body = await _get(playground, "/api/nodes/twitter_monitor")

        assert body["services"][0]["configured"] is True

    @pytest.mark.asyncio
    async def test_get_unknown_node(self, playground):
        status, body = await _get(playground, "/api/nodes/teleport")

        assert status == 404
        assert body["success"] is False


class TestExecuteRoute:
    @pytest.mark.asyncio
    async def test_mock_execution(self, playground):
        status, body = await _post(
            playground,
            {"nodeType": "search_contacts", "input": {"person_titles": ["CTO"]}, "mockMode": True},
        )

        assert status == 200
        assert body["success"] is True
        assert body["output"]["total_found"] >= 1

    @pytest.mark.asyncio
    async def test_real_execution_with_variables(self, playground):
        status, body = await _post(
            playground,
            {
                "nodeType": "filter",
                "input": {"items": "{{scores}}", "operator": "greater_than", "value": 50},
                "variables": {"scores": [10, 60, 90]},
            },
        )

        assert status == 200
        assert body["output"] == {"results": [60, 90], "count": 2, "filtered_out": 1}

    @pytest.mark.asyncio
    async def test_node_failure_is_200(self, playground):
        status, body = await _post(
            playground, {"nodeType": "seo_audit", "input": {"url": "https://example.com"}}
        )

        assert status == 200
        assert body["success"] is False
        assert "not configured" in body["error"]

    @pytest.mark.asyncio
    async def test_invalid_input_is_400(self, playground):
        status, body = await _post(playground, {"nodeType": "delay", "input": {"duration_ms": "soon"}})

        assert status == 400
        assert body["error"].startswith("Invalid input:")

    @pytest.mark.asyncio
    async def test_unknown_node_is_404(self, playground):
        status, body = await _post(playground, {"nodeType": "teleport", "input": {}})

        assert status == 404
        assert "Unknown node type" in body["error"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, message",
        [
            ({}, "nodeType is required"),
            ({"nodeType": 5}, "nodeType is required"),
            ({"nodeType": "end", "credentials": {"apollo": "key"}}, "credentials"),
            ({"nodeType": "end", "variables": [1, 2]}, "variables"),
            ([1, 2, 3], "JSON object"),
        ],
    )
    async def test_bad_request_body(self, playground, payload, message):
        status, body = await _post(playground, payload)

        assert status == 400
        assert message in body["error"]

    @pytest.mark.asyncio
    async def test_malformed_json(self, playground):
        status, body = await _post(playground, data="{nope")

        assert status == 400
        assert "valid JSON" in body["error"]
