"""Tests for node definitions and the NodeRegistry."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from jam_core.node import (
    DuplicateNodeError,
    NodeCapabilities,
    NodeCategory,
    NodeRegistry,
    NodeResult,
    create_registry,
    define_node,
)
from jam_core.schema import ObjectSchema


class EchoInput(BaseModel):
    text: str


class EchoOutput(BaseModel):
    text: str


def make_node(node_type: str, category: NodeCategory = NodeCategory.LOGIC, name: str = "Echo"):
    @define_node(
        type=node_type,
        name=name,
        description="Echo the input text",
        category=category,
        input_schema=EchoInput,
        output_schema=EchoOutput,
        estimated_duration=1,
        capabilities=NodeCapabilities(supports_rerun=True),
    )
    async def echo(input: EchoInput, context) -> NodeResult:
        return NodeResult.ok(EchoOutput(text=input.text))

    return echo


class TestDefineNode:
    def test_decorator_builds_definition(self):
        node = make_node("echo")

        assert node.type == "echo"
        assert node.category == NodeCategory.LOGIC
        assert node.input_schema is EchoInput
        assert callable(node.executor)

    def test_category_accepts_string(self):
        node = make_node("echo", category="transform")
        assert node.category == NodeCategory.TRANSFORM

    def test_schema_descriptions(self):
        node = make_node("echo")
        assert isinstance(node.input_description, ObjectSchema)
        assert list(node.output_description.fields) == ["text"]

    def test_metadata(self):
        metadata = make_node("echo").metadata()

        assert metadata.type == "echo"
        assert metadata.capabilities == ["supports_rerun"]
        assert metadata.model_dump(mode="json")["category"] == "logic"


class TestNodeRegistry:
    def test_register_and_get(self):
        registry = NodeRegistry()
        node = make_node("echo")

        registry.register(node)

        assert registry.get("echo") is node
        assert "echo" in registry
        assert len(registry) == 1

    def test_get_unknown_returns_none(self):
        assert NodeRegistry().get("missing") is None

    def test_duplicate_registration_raises_and_keeps_original(self):
        registry = NodeRegistry()
        original = make_node("echo", name="Original")
        registry.register(original)

        with pytest.raises(DuplicateNodeError):
            registry.register(make_node("echo", name="Replacement"))

        assert registry.get("echo") is original
        assert len(registry) == 1

    def test_listing_preserves_registration_order(self):
        registry = create_registry([make_node("b"), make_node("a"), make_node("c")])

        assert [d.type for d in registry.get_all()] == ["b", "a", "c"]
        assert [m.type for m in registry.get_all_metadata()] == ["b", "a", "c"]
        assert [d.type for d in registry] == ["b", "a", "c"]

    def test_get_by_category(self):
        registry = create_registry(
            [make_node("x", NodeCategory.LOGIC), make_node("y", NodeCategory.ACTION)]
        )

        assert [d.type for d in registry.get_by_category("action")] == ["y"]
        assert registry.get_by_category(NodeCategory.INTEGRATION) == []


class TestNodeResult:
    def test_success_dict_dumps_models(self):
        result = NodeResult.ok(EchoOutput(text="hi"))
        assert result.to_dict() == {"success": True, "output": {"text": "hi"}}

    def test_failure_dict(self):
        assert NodeResult.fail("nope").to_dict() == {"success": False, "error": "nope"}
