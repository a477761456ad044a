"""Tests for conditional, end, delay and the shared comparison operators."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from jam_core.node import execute_node
from jam_nodes.logic import compare, conditional_node, delay_node, end_node


class TestCompare:
    @pytest.mark.parametrize(
        "operator,actual,expected,result",
        [
            ("equals", "a", "a", True),
            ("equals", 1, "1", False),
            ("not_equals", "a", "b", True),
            ("greater_than", 10, 5, True),
            ("greater_than", "10", 5, True),
            ("greater_than", "ten", 5, False),
            ("less_than", 3, 5, True),
            ("less_than", None, 5, False),
            ("contains", "hello world", "world", True),
            ("contains", ["a", "b"], "b", True),
            ("contains", {"key": 1}, "key", True),
            ("contains", 42, 4, False),
            ("exists", 0, None, True),
            ("exists", None, None, False),
            ("not_exists", None, None, True),
        ],
    )
    def test_operators(self, operator, actual, expected, result):
        assert compare(operator, actual, expected) is result

    def test_booleans_are_not_numbers(self):
        assert compare("greater_than", True, 0) is False


class TestConditionalNode:
    @pytest.mark.asyncio
    async def test_true_branch(self, make_context):
        context = make_context(variables={"contact": {"score": 92}})

        result = await execute_node(
            conditional_node,
            {
                "condition": {"variable": "contact.score", "operator": "greater_than", "value": 80},
                "true_node_id": "send_email",
                "false_node_id": "end",
            },
            context,
        )

        assert result.success
        assert result.output.condition_met is True
        assert result.output.selected_branch == "true"
        assert result.output.next_node_id == "send_email"

    @pytest.mark.asyncio
    async def test_missing_variable_takes_false_branch(self, make_context):
        result = await execute_node(
            conditional_node,
            {"condition": {"variable": "contact.email", "operator": "exists"}},
            make_context(),
        )

        assert result.success
        assert result.output.condition_met is False
        assert result.output.selected_branch == "false"
        assert result.output.next_node_id is None

    @pytest.mark.asyncio
    async def test_unknown_operator_is_rejected(self, make_context):
        result = await execute_node(
            conditional_node,
            {"condition": {"variable": "x", "operator": "matches"}},
            make_context(),
        )

        assert result.success is False
        assert result.error.startswith("Invalid input:")


class TestEndNode:
    @pytest.mark.asyncio
    async def test_defaults(self, make_context):
        result = await execute_node(end_node, {}, make_context())

        assert result.success
        assert result.output_dict() == {
            "terminated": True,
            "reason": "Workflow completed",
            "success": True,
        }

    @pytest.mark.asyncio
    async def test_custom_reason(self, make_context):
        result = await execute_node(end_node, {"reason": "No leads", "success": False}, make_context())

        assert result.output.reason == "No leads"
        assert result.output.success is False


class TestDelayNode:
    @pytest.mark.asyncio
    async def test_sleeps_for_duration(self, make_context):
        with patch("jam_nodes.logic.delay.asyncio.sleep", new=AsyncMock()) as sleep:
            result = await execute_node(delay_node, {"duration_ms": 1500}, make_context())

        assert result.success
        assert result.output.waited is True
        sleep.assert_awaited_once_with(1.5)

    @pytest.mark.asyncio
    async def test_rejects_duration_over_five_minutes(self, make_context):
        result = await execute_node(delay_node, {"duration_ms": 300_001}, make_context())

        assert result.success is False
        assert "duration_ms" in result.error
