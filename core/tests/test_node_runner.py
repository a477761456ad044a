"""
Tests for execute_node.

Covers input validation, executor failures, template resolution and the
end-to-end path from a synthesized example input to a successful result.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel

from jam_core.execution import create_execution_context
from jam_core.node import NodeCategory, NodeResult, define_node, execute_node
from jam_core.observability import clear_trace_context, get_trace_context
from jam_core.schema import build_example_input


class TopicInput(BaseModel):
    topic: str
    limit: int = 10


class TopicOutput(BaseModel):
    summary: str
    limit: int


@define_node(
    type="summarize_topic",
    name="Summarize Topic",
    description="Summarize a topic",
    category=NodeCategory.ACTION,
    input_schema=TopicInput,
    output_schema=TopicOutput,
)
async def summarize_topic_node(input: TopicInput, context) -> NodeResult:
    return NodeResult.ok(TopicOutput(summary=f"About {input.topic}", limit=input.limit))


@define_node(
    type="explode",
    name="Explode",
    description="Always raises",
    category=NodeCategory.LOGIC,
    input_schema=TopicInput,
    output_schema=TopicOutput,
)
async def explode_node(input: TopicInput, context) -> NodeResult:
    raise RuntimeError("kaboom")


@pytest.fixture(autouse=True)
def _clean_trace_context():
    clear_trace_context()
    yield
    clear_trace_context()


@pytest.fixture
def context():
    return create_execution_context(
        user_id="user-1",
        workflow_execution_id="exec-123",
        variables={"subject": {"name": "jam"}},
    )


@pytest.mark.asyncio
async def test_example_input_executes_successfully(context):
    example = build_example_input(TopicInput)

    assert "topic" in example
    result = await execute_node(summarize_topic_node, example, context)

    assert result.success
    assert result.output.limit == 10
    assert result.output.summary == "About example_topic"


@pytest.mark.asyncio
async def test_invalid_input_does_not_call_executor(context):
    executor = AsyncMock()
    node = define_node(
        type="guarded",
        name="Guarded",
        description="",
        category="logic",
        input_schema=TopicInput,
        output_schema=TopicOutput,
    )(executor)

    result = await execute_node(node, {"limit": "many"}, context)

    assert result.success is False
    assert result.error.startswith("Invalid input:")
    assert "topic" in result.error
    executor.assert_not_called()


@pytest.mark.asyncio
async def test_escaped_exception_becomes_failure(context):
    result = await execute_node(explode_node, {"topic": "x"}, context)

    assert result.success is False
    assert result.error == "kaboom"


@pytest.mark.asyncio
async def test_templates_resolved_before_validation(context):
    result = await execute_node(summarize_topic_node, {"topic": "{{subject.name}}"}, context)

    assert result.success
    assert result.output.summary == "About jam"


@pytest.mark.asyncio
async def test_accepts_validated_model_instance(context):
    result = await execute_node(summarize_topic_node, TopicInput(topic="t", limit=2), context)
    assert result.output.limit == 2


@pytest.mark.asyncio
async def test_non_result_return_is_failure(context):
    node = define_node(
        type="sloppy",
        name="Sloppy",
        description="",
        category="logic",
        input_schema=TopicInput,
        output_schema=TopicOutput,
    )(AsyncMock(return_value={"summary": "x"}))

    result = await execute_node(node, {"topic": "x"}, context)

    assert result.success is False
    assert "invalid result" in result.error


@pytest.mark.asyncio
async def test_trace_context_set_for_execution(context):
    await execute_node(summarize_topic_node, {"topic": "x"}, context)

    trace = get_trace_context()
    assert trace["workflow_execution_id"] == "exec-123"
    assert trace["node_type"] == "summarize_topic"
    assert trace["user_id"] == "user-1"
