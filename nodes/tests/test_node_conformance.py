"""
Conformance tests run against every built-in node.

Verifies that each node:
- has a unique snake_case type and a known category
- accepts a synthesized mock input and its derived example input
- declares an output model that its synthesized mock validates against
- ships a realistic MOCK_OUTPUTS entry that validates against its output model
- fails cleanly when the service it needs is not configured
"""

from __future__ import annotations

import re

import pytest

from jam_core.execution import create_execution_context
from jam_core.node import NodeCategory, execute_node
from jam_core.schema import build_example_input, synthesize
from jam_nodes import (
    BUILT_IN_NODES,
    CREDENTIAL_SPECS,
    MOCK_OUTPUTS,
    SERVICE_FACTORIES,
    create_default_registry,
    create_mock_generator,
)

NODE_IDS = [node.type for node in BUILT_IN_NODES]

NODE_TYPES_WITH_SERVICES = sorted(
    {node_type for spec in CREDENTIAL_SPECS.values() for node_type in spec.node_types}
)


class TestNodeDefinitions:
    def test_types_are_unique(self):
        assert len(NODE_IDS) == len(set(NODE_IDS))

    def test_default_registry_has_every_node(self):
        registry = create_default_registry()

        assert registry.types() == NODE_IDS

    @pytest.mark.parametrize("node", BUILT_IN_NODES, ids=NODE_IDS)
    def test_type_is_snake_case(self, node):
        assert re.fullmatch(r"[a-z][a-z0-9_]*", node.type)

    @pytest.mark.parametrize("node", BUILT_IN_NODES, ids=NODE_IDS)
    def test_metadata_is_complete(self, node):
        metadata = node.metadata()

        assert metadata.name
        assert metadata.description
        assert metadata.category in set(NodeCategory)
        assert metadata.estimated_duration >= 0


class TestSchemaConformance:
    @pytest.mark.parametrize("node", BUILT_IN_NODES, ids=NODE_IDS)
    def test_synthesized_input_validates(self, node):
        node.input_schema.model_validate(synthesize(node.input_schema))

    @pytest.mark.parametrize("node", BUILT_IN_NODES, ids=NODE_IDS)
    def test_synthesized_output_validates(self, node):
        node.output_schema.model_validate(synthesize(node.output_schema))

    @pytest.mark.parametrize("node", BUILT_IN_NODES, ids=NODE_IDS)
    def test_example_input_validates(self, node):
        node.input_schema.model_validate(build_example_input(node.input_schema))


class TestMockOutputs:
    def test_every_node_has_a_mock(self):
        assert set(MOCK_OUTPUTS) == set(NODE_IDS)

    @pytest.mark.parametrize("node", BUILT_IN_NODES, ids=NODE_IDS)
    def test_mock_output_validates(self, node):
        node.output_schema.model_validate(MOCK_OUTPUTS[node.type])

    def test_generator_returns_copies(self):
        mocks = create_mock_generator()

        first = mocks.generate_output("search_contacts", None)
        first["contacts"].clear()

        assert mocks.generate_output("search_contacts", None)["contacts"]

    def test_extra_overrides_take_precedence(self):
        mocks = create_mock_generator({"end": {"terminated": True, "reason": "custom", "success": False}})

        assert mocks.generate_output("end", None)["reason"] == "custom"


class TestServiceWiring:
    def test_every_credential_spec_has_a_factory(self):
        assert set(CREDENTIAL_SPECS) == set(SERVICE_FACTORIES)

    def test_credential_node_types_exist(self):
        assert set(NODE_TYPES_WITH_SERVICES) <= set(NODE_IDS)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("node_type", NODE_TYPES_WITH_SERVICES)
    async def test_missing_service_fails_with_message(self, node_type):
        node = create_default_registry().get(node_type)
        context = create_execution_context(
            user_id="test-user",
            variables={"sender_name": "Jordan"},
            factories=SERVICE_FACTORIES,
        )

        result = await execute_node(node, synthesize(node.input_schema), context)

        assert result.success is False
        assert "not configured" in result.error
